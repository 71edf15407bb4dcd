"""
Per-entity wiring: which dataclass, schemas and labels belong to each resource.
"""
from dataclasses import dataclass
from typing import Dict, Optional, Tuple, Type

from pydantic import BaseModel

from domain.models import Author, Book, Entity, Quote, Reflection, Review
from domain import schemas


@dataclass(frozen=True)
class Resource:
    name: str  # "book"
    plural: str  # "books", also the URL segment
    label: str  # "Book", used in notifications
    entity_cls: Type[Entity]
    insert_schema: Type[BaseModel]
    update_schema: Type[BaseModel]
    parent_field: Optional[str] = None
    parent: Optional[str] = None  # plural of the parent resource
    # Checkbox inputs: an HTML form omits them entirely when unchecked
    checkboxes: Tuple[str, ...] = ()


AUTHORS = Resource(
    "author", "authors", "Author", Author,
    schemas.InsertAuthorParams, schemas.UpdateAuthorParams,
)
BOOKS = Resource(
    "book", "books", "Book", Book,
    schemas.InsertBookParams, schemas.UpdateBookParams, parent_field="author_id", parent="authors",
    checkboxes=("completed",),
)
REVIEWS = Resource(
    "review", "reviews", "Review", Review,
    schemas.InsertReviewParams, schemas.UpdateReviewParams, parent_field="book_id", parent="books",
)
QUOTES = Resource(
    "quote", "quotes", "Quote", Quote,
    schemas.InsertQuoteParams, schemas.UpdateQuoteParams, parent_field="book_id", parent="books",
)
REFLECTIONS = Resource(
    "reflection", "reflections", "Reflection", Reflection,
    schemas.InsertReflectionParams, schemas.UpdateReflectionParams, parent_field="book_id", parent="books",
)

RESOURCES: Dict[str, Resource] = {
    r.plural: r for r in (AUTHORS, BOOKS, REVIEWS, QUOTES, REFLECTIONS)
}


def get_resource(plural: str) -> Optional[Resource]:
    return RESOURCES.get(plural)
