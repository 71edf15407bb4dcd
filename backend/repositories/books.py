"""
Book repository backed by SQLAlchemy/SQLite.
"""
from typing import List, Optional
from sqlalchemy.orm import Session

from domain.models import Book
from repositories.base import UserScopedRepository
from repositories.models import BookORM


class BooksRepository(UserScopedRepository[Book]):
    """CRUD operations for books."""

    orm_cls = BookORM
    entity_cls = Book
    label = "Book"

    def list_books(self, session: Session, user_id: str, author_id: Optional[str] = None) -> List[Book]:
        return self.list(session, user_id, author_id=author_id)

