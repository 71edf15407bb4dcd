"""
Review pages.
"""
from fastapi import APIRouter, Depends, HTTPException, Request

from api.deps import require_auth
from api.schemas import BookOut, ReviewListResponse, ReviewOut, ReviewPageResponse
from domain.nav import back_path
from services import queries
from services.auth import AuthSession

router = APIRouter()


@router.get("", response_model=ReviewListResponse)
async def list_reviews(auth: AuthSession = Depends(require_auth)):
    return ReviewListResponse(
        reviews=[ReviewOut.model_validate(r) for r in queries.get_reviews(auth)],
        books=[BookOut.model_validate(b) for b in queries.get_books(auth)],
    )


@router.get("/{review_id}", response_model=ReviewPageResponse)
async def get_review_page(review_id: str, request: Request, auth: AuthSession = Depends(require_auth)):
    review = queries.get_review_by_id(auth, review_id)
    if review is None:
        raise HTTPException(status_code=404, detail="Review not found")
    return ReviewPageResponse(
        review=ReviewOut.model_validate(review),
        books=[BookOut.model_validate(b) for b in queries.get_books(auth)],
        back_path=back_path(request.url.path, "reviews"),
    )
