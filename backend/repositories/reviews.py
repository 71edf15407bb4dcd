"""
Review repository backed by SQLAlchemy/SQLite.
"""
from domain.models import Review
from repositories.base import UserScopedRepository
from repositories.models import ReviewORM


class ReviewsRepository(UserScopedRepository[Review]):
    """CRUD operations for reviews, listed per book."""

    orm_cls = ReviewORM
    entity_cls = Review
    label = "Review"
