"""
Optimistic stores: single-owner observable cells holding what a view displays.

A store is only mutated through its own methods, and every value handed in or
out is a copy, so no entity is shared by reference between components.
"""
import logging
from copy import deepcopy
from dataclasses import fields, replace
from typing import Callable, Generic, List, Optional, TypeVar

from domain.models import OPTIMISTIC_ID, Entity, MutationAction, PendingMutation

logger = logging.getLogger(__name__)

T = TypeVar("T")
Subscriber = Callable[[T], None]


def merge_entity(previous: Optional[Entity], data: Entity) -> Entity:
    """`data` laid over `previous`; fields `data` does not have keep their old value."""
    if previous is None or not isinstance(data, type(previous)):
        return deepcopy(data)
    return replace(deepcopy(previous), **{f.name: deepcopy(getattr(data, f.name)) for f in fields(data)})


class _Observable(Generic[T]):
    def __init__(self) -> None:
        self._subscribers: List[Subscriber] = []

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register a callback for every new value; returns the unsubscribe function."""
        self._subscribers.append(callback)

        def _unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return _unsubscribe

    def _publish(self, value: T) -> None:
        for callback in list(self._subscribers):
            callback(deepcopy(value))


class OptimisticStore(_Observable[Optional[Entity]]):
    """
    Holds one entity as displayed.

    `base` is the last value confirmed by the server; `value` is what is shown,
    which differs from `base` while a mutation is in flight.
    """

    def __init__(self, base: Optional[Entity] = None) -> None:
        super().__init__()
        self._base = deepcopy(base)
        self._value = deepcopy(base)

    @property
    def value(self) -> Optional[Entity]:
        return deepcopy(self._value)

    @property
    def base(self) -> Optional[Entity]:
        return deepcopy(self._base)

    def apply(self, mutation: PendingMutation) -> Optional[Entity]:
        """Publish the next value for a pending mutation. Synchronous, no I/O."""
        if mutation.action == MutationAction.DELETE:
            # Shown during the deletion transition; the caller navigates away
            self._value = deepcopy(mutation.data)
        else:
            self._value = merge_entity(self._value, mutation.data)
        logger.debug("optimistic %s -> %s", mutation.action.value, self._value.id if self._value else None)
        self._publish(self._value)
        return self.value

    def set_base(self, entity: Optional[Entity]) -> None:
        """Replace the confirmed value, e.g. after a refresh from the server."""
        self._base = deepcopy(entity)
        self._value = deepcopy(entity)
        self._publish(self._value)

    def rollback(self, values: Optional[Entity]) -> None:
        """
        Show `values` again after the server rejected a mutation. A failed
        create has no previous value, so the confirmed base is shown instead.
        """
        self._value = deepcopy(values if values is not None else self._base)
        self._publish(self._value)


class OptimisticListStore(_Observable[List[Entity]]):
    """List-view counterpart of OptimisticStore, keyed by entity id."""

    def __init__(self, items: Optional[List[Entity]] = None) -> None:
        super().__init__()
        self._base: List[Entity] = deepcopy(list(items or []))
        self._items: List[Entity] = deepcopy(self._base)

    @property
    def items(self) -> List[Entity]:
        return deepcopy(self._items)

    @property
    def base(self) -> List[Entity]:
        return deepcopy(self._base)

    def apply(self, mutation: PendingMutation) -> List[Entity]:
        data = mutation.data
        if mutation.action == MutationAction.CREATE:
            pending = deepcopy(data)
            if not pending.id:
                pending = replace(pending, id=OPTIMISTIC_ID)
            self._items = self._items + [pending]
        elif mutation.action == MutationAction.UPDATE:
            self._items = [merge_entity(item, data) if item.id == data.id else item for item in self._items]
        else:
            self._items = [item for item in self._items if item.id != data.id]
        self._publish(self._items)
        return self.items

    def set_base(self, items: List[Entity]) -> None:
        self._base = deepcopy(list(items))
        self._items = deepcopy(self._base)
        self._publish(self._items)

    def rollback(self, values: Optional[Entity]) -> None:
        """Back to the confirmed list, with `values` restored in its slot when given."""
        items = deepcopy(self._base)
        if values is not None:
            if any(item.id == values.id for item in items):
                items = [deepcopy(values) if item.id == values.id else item for item in items]
            else:
                items.append(deepcopy(values))
        self._items = items
        self._publish(self._items)
