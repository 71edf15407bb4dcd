"""
Author pages, including the book page nested under its author.
"""
from fastapi import APIRouter, Depends, HTTPException, Request

from api.deps import require_auth
from api.routes.books import build_book_page
from api.schemas import AuthorListResponse, AuthorOut, AuthorPageResponse, BookOut, BookPageResponse
from domain.nav import back_path
from services import queries
from services.auth import AuthSession

router = APIRouter()


@router.get("", response_model=AuthorListResponse)
async def list_authors(auth: AuthSession = Depends(require_auth)):
    return AuthorListResponse(authors=[AuthorOut.model_validate(a) for a in queries.get_authors(auth)])


@router.get("/{author_id}", response_model=AuthorPageResponse)
async def get_author_page(author_id: str, request: Request, auth: AuthSession = Depends(require_auth)):
    data = queries.get_author_by_id_with_books(auth, author_id)
    if not data.author:
        raise HTTPException(status_code=404, detail="Author not found")
    return AuthorPageResponse(
        author=AuthorOut.model_validate(data.author),
        books=[BookOut.model_validate(b) for b in data.books],
        back_path=back_path(request.url.path, "authors"),
    )


@router.get("/{author_id}/books/{book_id}", response_model=BookPageResponse)
async def get_author_book_page(
    author_id: str, book_id: str, request: Request, auth: AuthSession = Depends(require_auth)
):
    page = build_book_page(request, book_id, auth)
    # The URL names the author; a book filed under someone else is not here
    if page.book.author_id != author_id:
        raise HTTPException(status_code=404, detail="Book not found")
    return page
