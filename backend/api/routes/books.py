"""
Book pages.
"""
from fastapi import APIRouter, Depends, HTTPException, Request

from api.deps import require_auth
from api.schemas import (
    AuthorOut,
    BookListResponse,
    BookOut,
    BookPageResponse,
    QuoteOut,
    ReflectionOut,
    ReviewOut,
)
from domain.models import Book
from domain.nav import back_path
from services import queries
from services.auth import AuthSession

router = APIRouter()


def review_prompt_for(book: Book, has_review: bool) -> str | None:
    """A completed book without a review invites one."""
    if book.completed and not has_review:
        return f"Write a review about {book.title}"
    return None


def build_book_page(request: Request, book_id: str, auth: AuthSession) -> BookPageResponse:
    data = queries.get_book_by_id_with_quotes_and_reflections(auth, book_id)
    if not data.book:
        raise HTTPException(status_code=404, detail="Book not found")
    authors = queries.get_authors(auth)
    return BookPageResponse(
        book=BookOut.model_validate(data.book),
        authors=[AuthorOut.model_validate(a) for a in authors],
        quotes=[QuoteOut.model_validate(q) for q in data.quotes],
        reflections=[ReflectionOut.model_validate(r) for r in data.reflections],
        reviews=[ReviewOut.model_validate(r) for r in data.reviews],
        has_review=data.has_review,
        review_prompt=review_prompt_for(data.book, data.has_review),
        back_path=back_path(request.url.path, "books"),
    )


@router.get("", response_model=BookListResponse)
async def list_books(auth: AuthSession = Depends(require_auth)):
    """List the caller's books with the authors the book form offers."""
    return BookListResponse(
        books=[BookOut.model_validate(b) for b in queries.get_books(auth)],
        authors=[AuthorOut.model_validate(a) for a in queries.get_authors(auth)],
    )


@router.get("/{book_id}", response_model=BookPageResponse)
async def get_book_page(book_id: str, request: Request, auth: AuthSession = Depends(require_auth)):
    """A book with its quotes, reflections and review."""
    return build_book_page(request, book_id, auth)
