"""
JSON API over the mutation actions and the read path, one set of endpoints per
resource (authors, books, reviews, quotes, reflections).

Mutations always answer 200 with `{"error": null | str}`; the error string is
part of the action contract, not a transport failure.
"""
import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException

from api.deps import require_auth
from api.schemas import MutationResponse
from domain.resources import Resource, get_resource
from services import actions, queries
from services.auth import AuthSession

router = APIRouter()
logger = logging.getLogger(__name__)


def _resource_or_404(resource: str) -> Resource:
    found = get_resource(resource)
    if found is None:
        raise HTTPException(status_code=404, detail=f"Unknown resource: {resource}")
    return found


@router.get("/{resource}", response_model=List[Dict[str, Any]])
async def list_entities(
    resource: str,
    author_id: Optional[str] = None,
    book_id: Optional[str] = None,
    auth: AuthSession = Depends(require_auth),
):
    """List the caller's records, optionally narrowed to one parent."""
    res = _resource_or_404(resource)
    filters = {}
    if res.parent_field == "author_id" and author_id:
        filters["author_id"] = author_id
    if res.parent_field == "book_id" and book_id:
        filters["book_id"] = book_id
    return [e.to_dict() for e in queries.get_entities(res, auth, **filters)]


@router.get("/{resource}/{entity_id}", response_model=Dict[str, Any])
async def get_entity(resource: str, entity_id: str, auth: AuthSession = Depends(require_auth)):
    res = _resource_or_404(resource)
    entity = queries.get_entity_by_id(res, auth, entity_id)
    if entity is None:
        raise HTTPException(status_code=404, detail=f"{res.label} not found")
    return entity.to_dict()


@router.post("/{resource}", response_model=MutationResponse)
def create_entity(
    resource: str,
    values: Dict[str, Any] = Body(...),
    auth: AuthSession = Depends(require_auth),
):
    res = _resource_or_404(resource)
    error = actions.create_entity_action(res, values, auth)
    if error:
        logger.info("create %s returned error: %s", res.name, error)
    return MutationResponse(error=error)


@router.put("/{resource}/{entity_id}", response_model=MutationResponse)
def update_entity(
    resource: str,
    entity_id: str,
    values: Dict[str, Any] = Body(...),
    auth: AuthSession = Depends(require_auth),
):
    res = _resource_or_404(resource)
    error = actions.update_entity_action(res, {**values, "id": entity_id}, auth)
    if error:
        logger.info("update %s %s returned error: %s", res.name, entity_id, error)
    return MutationResponse(error=error)


@router.delete("/{resource}/{entity_id}", response_model=MutationResponse)
def delete_entity(resource: str, entity_id: str, auth: AuthSession = Depends(require_auth)):
    res = _resource_or_404(resource)
    error = actions.delete_entity_action(res, entity_id, auth)
    if error:
        logger.info("delete %s %s returned error: %s", res.name, entity_id, error)
    return MutationResponse(error=error)
