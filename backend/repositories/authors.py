"""
Author repository backed by SQLAlchemy/SQLite.
"""
from typing import Optional
from sqlalchemy.orm import Session

from domain.models import Author
from repositories.base import UserScopedRepository
from repositories.models import AuthorORM


class AuthorsRepository(UserScopedRepository[Author]):
    """CRUD operations for authors."""

    orm_cls = AuthorORM
    entity_cls = Author
    label = "Author"

    def find_by_name(self, session: Session, user_id: str, name: str) -> Optional[Author]:
        orm = self._query(session, user_id).filter(AuthorORM.name == name).first()
        return self._from_orm(orm) if orm else None
