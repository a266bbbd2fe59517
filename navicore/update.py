"""Checking whether a newer release is available."""

from __future__ import annotations

import urllib.error
import urllib.request

LATEST_MESSAGE = "You have the latest version of Navi"


def update_message(current_version: str, latest_version: str) -> str:
    """Message telling whether ``latest_version`` is newer; both carry a leading "v"."""
    latest = latest_version.strip()[1:]
    if latest > current_version[1:]:
        return (
            f"New version {latest} available. Please update the software."
            " See the update section of the documentation for more information"
            " on how to update Navi"
        )
    return LATEST_MESSAGE


def fetch_latest_version(url: str, timeout: float = 10.0) -> str:
    """Download the published version string."""
    with urllib.request.urlopen(url, timeout=timeout) as response:
        return response.read().decode("utf-8", errors="replace").strip()


def check_for_update(current_version: str, url: str, timeout: float = 10.0) -> str:
    """Fetch the latest version and describe the result, including failures."""
    try:
        latest = fetch_latest_version(url, timeout)
    except (urllib.error.URLError, OSError, ValueError) as exc:
        reason = getattr(exc, "reason", exc)
        return f"Error checking for update: {reason}"
    return update_message(current_version, latest)