[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "navicore"
version = "1.3.4"
description = "Core logic of a keyboard-driven file manager: previews, thumbnails, tasks, status bar and notifications"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = [
    "file-manager",
    "preview",
    "thumbnails",
    "statusbar",
    "keybindings",
    "tasks",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment :: File Managers",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["navicore"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
