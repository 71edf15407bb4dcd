"""
Quote repository backed by SQLAlchemy/SQLite.
"""
from domain.models import Quote
from repositories.base import UserScopedRepository
from repositories.models import QuoteORM


class QuotesRepository(UserScopedRepository[Quote]):
    """CRUD operations for quotes, listed per book."""

    orm_cls = QuoteORM
    entity_cls = Quote
    label = "Quote"
