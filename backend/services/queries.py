"""
Read path. Every query is scoped to the signed-in user; a missing record is
returned as None so callers can answer "not found".
"""
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from db import SessionLocal
from domain.models import Author, Book, Entity, Quote, Reflection, Review
from domain.resources import AUTHORS, BOOKS, QUOTES, REFLECTIONS, REVIEWS, Resource
from repositories import (
    AuthorsRepository,
    BooksRepository,
    QuotesRepository,
    ReflectionsRepository,
    ReviewsRepository,
)
from repositories.base import UserScopedRepository
from services.auth import AuthSession

authors_repo = AuthorsRepository()
books_repo = BooksRepository()
reviews_repo = ReviewsRepository()
quotes_repo = QuotesRepository()
reflections_repo = ReflectionsRepository()

_REPOSITORIES: Dict[str, UserScopedRepository] = {
    AUTHORS.plural: authors_repo,
    BOOKS.plural: books_repo,
    REVIEWS.plural: reviews_repo,
    QUOTES.plural: quotes_repo,
    REFLECTIONS.plural: reflections_repo,
}


def repository_for(resource: Resource) -> UserScopedRepository:
    return _REPOSITORIES[resource.plural]


@dataclass
class BookWithRelations:
    book: Optional[Book]
    quotes: List[Quote] = field(default_factory=list)
    reflections: List[Reflection] = field(default_factory=list)
    reviews: List[Review] = field(default_factory=list)

    @property
    def has_review(self) -> bool:
        return len(self.reviews) > 0


@dataclass
class AuthorWithBooks:
    author: Optional[Author]
    books: List[Book] = field(default_factory=list)


def get_entities(resource: Resource, auth: AuthSession, **filters) -> List[Entity]:
    with SessionLocal() as session:
        return repository_for(resource).list(session, auth.user_id, **filters)


def get_entity_by_id(resource: Resource, auth: AuthSession, entity_id: str) -> Optional[Entity]:
    with SessionLocal() as session:
        return repository_for(resource).get(session, auth.user_id, entity_id)


def get_authors(auth: AuthSession) -> List[Author]:
    return get_entities(AUTHORS, auth)


def get_books(auth: AuthSession, author_id: Optional[str] = None) -> List[Book]:
    return get_entities(BOOKS, auth, author_id=author_id)


def get_reviews(auth: AuthSession) -> List[Review]:
    return get_entities(REVIEWS, auth)


def get_review_by_id(auth: AuthSession, review_id: str) -> Optional[Review]:
    return get_entity_by_id(REVIEWS, auth, review_id)


def get_book_by_id_with_quotes_and_reflections(auth: AuthSession, book_id: str) -> BookWithRelations:
    with SessionLocal() as session:
        book = books_repo.get(session, auth.user_id, book_id)
        if book is None:
            return BookWithRelations(book=None)
        return BookWithRelations(
            book=book,
            quotes=quotes_repo.list(session, auth.user_id, book_id=book_id),
            reflections=reflections_repo.list(session, auth.user_id, book_id=book_id),
            reviews=reviews_repo.list(session, auth.user_id, book_id=book_id),
        )


def get_author_by_id_with_books(auth: AuthSession, author_id: str) -> AuthorWithBooks:
    with SessionLocal() as session:
        author = authors_repo.get(session, auth.user_id, author_id)
        if author is None:
            return AuthorWithBooks(author=None)
        return AuthorWithBooks(
            author=author,
            books=books_repo.list_books(session, auth.user_id, author_id=author_id),
        )
