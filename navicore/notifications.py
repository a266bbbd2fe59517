"""Stacked, self-expiring notifications in the bottom-right corner of a window."""

from __future__ import annotations

import enum
import time
from collections.abc import Callable
from dataclasses import dataclass, field

_MARGIN = 20


class NotificationType(enum.Enum):
    WARNING = "warning"
    INFO = "info"
    ERROR = "error"


_DURATIONS_MS = {
    NotificationType.WARNING: 5000,
    NotificationType.INFO: 3000,
    NotificationType.ERROR: 7000,
}


def duration_for(kind: NotificationType) -> int:
    """How long a notification of this kind stays, in milliseconds."""
    return _DURATIONS_MS.get(kind, 0)


@dataclass(eq=False)
class Notification:
    message: str
    kind: NotificationType
    icon: bool
    width: int
    height: int
    expires_at: float
    position: tuple[int, int] = field(default=(0, 0))


class NotificationManager:
    """Keeps active notifications stacked upward from the parent's bottom-right corner."""

    def __init__(
        self,
        notification_size: tuple[int, int] = (300, 80),
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.notification_size = notification_size
        self.parent_size: tuple[int, int] = (0, 0)
        self._clock = clock
        self.active: list[Notification] = []

    def show_message(
        self,
        parent_size: tuple[int, int],
        kind: NotificationType,
        message: str,
        icon: bool = True,
    ) -> Notification:
        """Add a notification above the ones already shown."""
        self.parent_size = parent_size
        width, height = self.notification_size
        notification = Notification(
            message=message,
            kind=kind,
            icon=icon,
            width=width,
            height=height,
            expires_at=self._clock() + duration_for(kind) / 1000,
        )
        self.active.append(notification)
        self.positions()
        return notification

    def positions(self) -> list[tuple[int, int]]:
        """Place every active notification and return their top-left corners."""
        parent_width, parent_height = self.parent_size
        result = []
        for slot, notification in enumerate(self.active, start=1):
            x = parent_width - (notification.width + _MARGIN)
            y = parent_height - slot * (notification.height + _MARGIN)
            notification.position = (x, y)
            result.append((x, y))
        return result

    def resize(self, parent_size: tuple[int, int]) -> list[tuple[int, int]]:
        """Follow a resized parent window."""
        self.parent_size = parent_size
        return self.positions()

    def remove(self, notification: Notification) -> bool:
        """Close a notification and close the gap it leaves; False if it was not active."""
        try:
            self.active.remove(notification)
        except ValueError:
            return False
        self.positions()
        return True

    def expire(self, now: float | None = None) -> list[Notification]:
        """Remove and return the notifications whose time is up."""
        if now is None:
            now = self._clock()
        expired = [n for n in self.active if n.expires_at <= now]
        for notification in expired:
            self.remove(notification)
        return expired