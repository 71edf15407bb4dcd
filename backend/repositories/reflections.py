"""
Reflection repository backed by SQLAlchemy/SQLite.
"""
from domain.models import Reflection
from repositories.base import UserScopedRepository
from repositories.models import ReflectionORM


class ReflectionsRepository(UserScopedRepository[Reflection]):
    """CRUD operations for reflections, listed per book."""

    orm_cls = ReflectionORM
    entity_cls = Reflection
    label = "Reflection"
