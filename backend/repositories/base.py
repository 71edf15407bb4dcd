"""
Shared CRUD for user-owned tables.

Entity dataclass fields and ORM columns share their names, so conversion is
a field-by-field copy.
"""
from dataclasses import fields
from typing import Generic, List, Optional, Type, TypeVar

from sqlalchemy.orm import Session

from domain.models import OPTIMISTIC_ID, Entity, utcnow

E = TypeVar("E", bound=Entity)

# Never overwritten by an update
_IMMUTABLE_FIELDS = ("id", "user_id", "created_at")


class UserScopedRepository(Generic[E]):
    """CRUD operations on one table, always filtered by owning user."""

    orm_cls: type
    entity_cls: Type[E]
    label: str = "Record"

    def _from_orm(self, orm) -> E:
        return self.entity_cls(**{f.name: getattr(orm, f.name) for f in fields(self.entity_cls)})

    def _query(self, session: Session, user_id: str):
        return session.query(self.orm_cls).filter(self.orm_cls.user_id == user_id)

    def _get_orm(self, session: Session, user_id: str, entity_id: str):
        return self._query(session, user_id).filter(self.orm_cls.id == entity_id).first()

    def list(self, session: Session, user_id: str, **filters) -> List[E]:
        query = self._query(session, user_id)
        for column, value in filters.items():
            if value is not None:
                query = query.filter(getattr(self.orm_cls, column) == value)
        rows = query.order_by(self.orm_cls.created_at.asc()).all()
        return [self._from_orm(r) for r in rows]

    def get(self, session: Session, user_id: str, entity_id: str) -> Optional[E]:
        orm = self._get_orm(session, user_id, entity_id)
        if not orm:
            return None
        return self._from_orm(orm)

    def create(self, session: Session, entity: E) -> E:
        now = utcnow()
        values = {f.name: getattr(entity, f.name) for f in fields(self.entity_cls)}
        if not values["id"] or values["id"] == OPTIMISTIC_ID:
            values["id"] = Entity.generate_id()
        values["created_at"] = values.get("created_at") or now
        values["updated_at"] = now
        orm = self.orm_cls(**values)
        session.add(orm)
        session.commit()
        session.refresh(orm)
        return self._from_orm(orm)

    def update(self, session: Session, entity: E) -> E:
        orm = self._get_orm(session, entity.user_id, entity.id)
        if not orm:
            raise ValueError(f"{self.label} not found")
        for f in fields(self.entity_cls):
            if f.name in _IMMUTABLE_FIELDS:
                continue
            setattr(orm, f.name, getattr(entity, f.name))
        orm.updated_at = utcnow()
        session.add(orm)
        session.commit()
        session.refresh(orm)
        return self._from_orm(orm)

    def delete(self, session: Session, user_id: str, entity_id: str) -> bool:
        orm = self._get_orm(session, user_id, entity_id)
        if not orm:
            return False
        session.delete(orm)
        session.commit()
        return True
