"""
View helpers for optimistic entities.
"""
import html
import json
from typing import Optional

from domain.models import Entity

PENDING_CLASS = "animate-pulse"
ENTITY_BLOCK_CLASS = "bg-secondary p-4 rounded-lg break-all text-wrap"


def is_pending(entity: Optional[Entity]) -> bool:
    """True only for records still carrying the placeholder id."""
    return entity is not None and entity.is_optimistic


def pending_class(entity: Optional[Entity]) -> str:
    return PENDING_CLASS if is_pending(entity) else ""


def render_entity(entity: Optional[Entity]) -> str:
    """The entity as a JSON block; unconfirmed records get the pulsing treatment."""
    classes = " ".join(c for c in (ENTITY_BLOCK_CLASS, pending_class(entity)) if c)
    body = json.dumps(entity.to_dict() if entity else None, indent=2)
    return f'<pre class="{classes}">{html.escape(body)}</pre>'
