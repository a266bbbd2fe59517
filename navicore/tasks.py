"""Background tasks, such as external commands, and the registry that tracks them."""

from __future__ import annotations

import enum
import subprocess
import threading
import uuid as uuidlib
from collections.abc import Callable, Iterable
from typing import IO

_STOP_GRACE_SECONDS = 3


class _Signal:
    """A list of callbacks that are all called on emit."""

    def __init__(self) -> None:
        self._slots: list[Callable] = []

    def connect(self, slot: Callable) -> None:
        self._slots.append(slot)

    def disconnect(self, slot: Callable) -> None:
        self._slots.remove(slot)

    def emit(self, *args) -> None:
        for slot in list(self._slots):
            slot(*args)


class TaskType(enum.Enum):
    COMMAND = 0
    COPY = 1
    MOVE = 2
    DELETE = 3
    TRASH = 4


class Task:
    """A unit of background work; command tasks run an external program."""

    def __init__(
        self,
        type: TaskType = TaskType.COMMAND,
        command: str = "",
        args: Iterable[str] = (),
    ) -> None:
        self.uuid = uuidlib.uuid4()
        self.type = type
        self.command = command
        self.args = list(args)
        self._progress = 0.0
        self._process: subprocess.Popen | None = None
        self._watcher: threading.Thread | None = None
        self.progress_changed = _Signal()
        self.finished = _Signal()
        self.error_occurred = _Signal()
        self.stdout = _Signal()
        self.stderr = _Signal()

    @property
    def command_string(self) -> str:
        return self.command + " " + " ".join(self.args)

    @property
    def progress(self) -> float:
        return self._progress

    def set_command(self, command: str, args: Iterable[str]) -> None:
        """Set the program and its arguments."""
        self.command = command
        self.args = list(args)

    def run(self) -> None:
        """Start the task; only command tasks do work of their own."""
        if self.type is TaskType.COMMAND:
            self._run_command()

    def _run_command(self) -> None:
        try:
            process = subprocess.Popen(
                [self.command, *self.args],
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                errors="replace",
            )
        except OSError as exc:
            self.error_occurred.emit(str(exc))
            return
        self._process = process
        readers = [
            threading.Thread(target=self._pump, args=(process.stdout, self.stdout), daemon=True),
            threading.Thread(target=self._pump, args=(process.stderr, self.stderr), daemon=True),
        ]
        for reader in readers:
            reader.start()

        def watch() -> None:
            for reader in readers:
                reader.join()
            process.wait()
            self.finished.emit(self.uuid)

        self._watcher = threading.Thread(target=watch, daemon=True)
        self._watcher.start()

    @staticmethod
    def _pump(stream: IO[str], signal: _Signal) -> None:
        with stream:
            for line in stream:
                signal.emit(line)

    def stop(self) -> None:
        """Terminate a running command, killing it if it does not exit in time."""
        process = self._process
        if process is None or process.poll() is not None:
            return
        process.terminate()
        try:
            process.wait(_STOP_GRACE_SECONDS)
        except subprocess.TimeoutExpired:
            process.kill()
            process.wait()

    def wait(self, timeout: float | None = None) -> int | None:
        """Wait for a started command to finish and return its exit code."""
        if self._watcher is not None:
            self._watcher.join(timeout)
            if self._watcher.is_alive():
                raise TimeoutError(f"task {self.uuid} still running")
        return self._process.returncode if self._process is not None else None

    def set_progress(self, progress: float) -> None:
        self._progress = progress
        self.progress_changed.emit(progress)

    def set_finished(self, state: bool) -> None:
        if state:
            self.finished.emit(self.uuid)


class TaskManager:
    """Keeps running tasks by id and drops each one when it finishes."""

    def __init__(self) -> None:
        self._tasks: dict[uuidlib.UUID, Task] = {}
        self._lock = threading.RLock()
        self.task_added = _Signal()
        self.task_removed = _Signal()
        self.tasks_cleared = _Signal()

    def add_task(self, task: Task) -> None:
        """Register and start a task."""
        with self._lock:
            self._tasks[task.uuid] = task
        task.finished.connect(self.remove_task)
        task.run()
        self.task_added.emit(task)

    def remove_task(self, uuid: uuidlib.UUID) -> bool:
        """Stop and forget a task; False if it is not known."""
        with self._lock:
            task = self._tasks.pop(uuid, None)
        if task is None:
            return False
        task.stop()
        self.task_removed.emit(task)
        return True

    def clear_tasks(self) -> bool:
        """Forget every task; False if there were none."""
        with self._lock:
            if not self._tasks:
                return False
            self._tasks.clear()
        self.tasks_cleared.emit()
        return True

    def task(self, uuid: uuidlib.UUID) -> Task | None:
        with self._lock:
            return self._tasks.get(uuid)

    def tasks(self) -> list[Task]:
        with self._lock:
            return list(self._tasks.values())

    @property
    def task_count(self) -> int:
        with self._lock:
            return len(self._tasks)

    def __len__(self) -> int:
        return self.task_count