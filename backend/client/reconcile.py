"""
Reconciliation: line the displayed state up with the server's answer once a
mutation settles.
"""
import inspect
import logging
from typing import Any, Awaitable, Callable, Optional, Protocol, Union

from client.notifications import Notification, NotificationSink, Variant
from domain.models import Entity, Failure, MutationAction, MutationResult, Success

logger = logging.getLogger(__name__)


class EditingSurface(Protocol):
    """The modal or panel holding a form."""

    def open(self, values: Optional[Entity] = None) -> None: ...

    def close(self) -> None: ...


class RollbackTarget(Protocol):
    def rollback(self, values: Optional[Entity]) -> None: ...


Refresh = Callable[[], Union[None, Awaitable[Any]]]


class Modal:
    """Minimal editing surface: remembers whether it is open and with what."""

    def __init__(self) -> None:
        self.is_open = False
        self.values: Optional[Entity] = None

    def open(self, values: Optional[Entity] = None) -> None:
        self.is_open = True
        self.values = values

    def close(self) -> None:
        self.is_open = False


def notification_for(action: MutationAction, result: MutationResult, label: str) -> Notification:
    if isinstance(result, Failure):
        return Notification(
            title=f"Failed to {action.value}",
            description=result.message or "Error",
            variant=Variant.DESTRUCTIVE,
        )
    return Notification(title="Success", description=f"{label} {action.value}d!", variant=Variant.DEFAULT)


async def reconcile(
    action: MutationAction,
    result: MutationResult,
    *,
    label: str,
    store: Optional[RollbackTarget] = None,
    surface: Optional[EditingSurface] = None,
    refresh: Optional[Refresh] = None,
    notify: Optional[NotificationSink] = None,
    post_success: Optional[Callable[[], None]] = None,
) -> Notification:
    """
    Apply the outcome of a settled mutation.

    Success closes the editing surface, refreshes from the source of truth and
    reports success. Failure rolls the store back to `result.values`, reopens
    the surface with what the user attempted and reports the error. Holds no
    state of its own.
    """
    if isinstance(result, Success):
        if surface is not None:
            surface.close()
        if refresh is not None:
            # Mutation is confirmed; a failed reload only leaves the view stale
            try:
                pending = refresh()
                if inspect.isawaitable(pending):
                    await pending
            except Exception:
                logger.exception("refresh after %s %s failed", label, action.value)
        if post_success is not None:
            post_success()
    elif isinstance(result, Failure):
        if store is not None:
            store.rollback(result.values)
        if surface is not None:
            surface.open(result.attempted if result.attempted is not None else result.values)
    else:
        raise TypeError(f"Unknown mutation result: {result!r}")

    notification = notification_for(action, result, label)
    if notify is not None:
        notify(notification)
    return notification
