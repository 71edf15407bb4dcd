"""
Transient user notifications (toasts).
"""
import logging
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Deque, List

logger = logging.getLogger(__name__)

TOAST_LIMIT = 5


class Variant(str, Enum):
    DEFAULT = "default"
    DESTRUCTIVE = "destructive"


@dataclass(frozen=True)
class Notification:
    title: str
    description: str
    variant: Variant = Variant.DEFAULT


# Fire-and-forget: the return value of a sink is never used.
NotificationSink = Callable[[Notification], None]


class ToastQueue:
    """In-memory sink keeping the most recent notifications on screen."""

    def __init__(self, limit: int = TOAST_LIMIT) -> None:
        self._visible: Deque[Notification] = deque(maxlen=limit)

    def __call__(self, notification: Notification) -> None:
        level = logging.WARNING if notification.variant == Variant.DESTRUCTIVE else logging.INFO
        logger.log(level, "%s: %s", notification.title, notification.description)
        self._visible.append(notification)

    @property
    def visible(self) -> List[Notification]:
        return list(self._visible)

    def dismiss(self) -> None:
        self._visible.clear()
