"""
Response models shared by the API routers.
"""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class _EntityOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    created_at: datetime
    updated_at: datetime


class AuthorOut(_EntityOut):
    name: str


class BookOut(_EntityOut):
    title: str
    completed: bool
    author_id: str


class ReviewOut(_EntityOut):
    content: str
    book_id: str


class QuoteOut(_EntityOut):
    content: str
    page: Optional[int] = None
    book_id: str


class ReflectionOut(_EntityOut):
    content: str
    book_id: str


class MutationResponse(BaseModel):
    """Outcome of a mutation action: `error` is null on success."""
    error: Optional[str] = None


class BookPageResponse(BaseModel):
    book: BookOut
    authors: List[AuthorOut]
    quotes: List[QuoteOut]
    reflections: List[ReflectionOut]
    reviews: List[ReviewOut]
    has_review: bool
    # Only a finished book without a review asks for one
    review_prompt: Optional[str] = None
    back_path: str


class BookListResponse(BaseModel):
    books: List[BookOut]
    authors: List[AuthorOut]


class AuthorPageResponse(BaseModel):
    author: AuthorOut
    books: List[BookOut]
    back_path: str


class AuthorListResponse(BaseModel):
    authors: List[AuthorOut]


class ReviewPageResponse(BaseModel):
    review: ReviewOut
    books: List[BookOut]
    back_path: str


class ReviewListResponse(BaseModel):
    reviews: List[ReviewOut]
    books: List[BookOut]


class SidebarLinkOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    href: str
    title: str
    icon: str


class LinkGroupOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    title: str
    links: List[SidebarLinkOut]


class NavResponse(BaseModel):
    default_links: List[SidebarLinkOut]
    additional_links: List[LinkGroupOut]
