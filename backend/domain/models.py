"""
Core domain models for the reading journal.
These are framework-agnostic and shared by the API, the actions and the client.
"""
from dataclasses import dataclass, field, fields
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional, Union
import uuid


# Placeholder id carried by records the server has not persisted yet.
OPTIMISTIC_ID = "optimistic"


def utcnow() -> datetime:
    """Naive UTC timestamp, matching what the DateTime columns store."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class MutationAction(str, Enum):
    """Kind of change a form submits."""
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


@dataclass
class Entity:
    """Fields every stored record has."""
    id: str
    user_id: str = ""
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

    @staticmethod
    def generate_id() -> str:
        return str(uuid.uuid4())

    @property
    def is_optimistic(self) -> bool:
        return self.id == OPTIMISTIC_ID

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Entity":
        known = {f.name for f in fields(cls)}
        values = {k: v for k, v in data.items() if k in known}
        for key in ("created_at", "updated_at"):
            if isinstance(values.get(key), str):
                values[key] = datetime.fromisoformat(values[key])
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            data[f.name] = value.isoformat() if isinstance(value, datetime) else value
        return data


@dataclass
class Author(Entity):
    name: str = ""


@dataclass
class Book(Entity):
    """A book on the reader's shelf, written by one author."""
    title: str = ""
    completed: bool = False
    author_id: str = ""


@dataclass
class Review(Entity):
    """The reader's review of a finished book."""
    content: str = ""
    book_id: str = ""


@dataclass
class Quote(Entity):
    content: str = ""
    page: Optional[int] = None
    book_id: str = ""


@dataclass
class Reflection(Entity):
    content: str = ""
    book_id: str = ""


@dataclass
class PendingMutation:
    """
    A tentative change, applied to an optimistic store exactly once.

    For create/update `data` is the tentative entity; for delete it is the
    last known value of the record being removed.
    """
    action: MutationAction
    data: Entity


@dataclass(frozen=True)
class Success:
    """The server accepted the mutation."""


@dataclass(frozen=True)
class Failure:
    """
    The server rejected the mutation.

    `values` is what the display rolls back to (None when there was nothing
    before, i.e. a create). `attempted` is what the user submitted and is used
    to re-populate the editing surface.
    """
    message: str
    values: Optional[Entity] = None
    attempted: Optional[Entity] = None


MutationResult = Union[Success, Failure]
