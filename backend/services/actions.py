"""
Server-side mutation actions.

Each action re-validates its input with the schema the form used, writes
through the repository, and answers None on success or an error message the
client shows to the user. Actions never raise for expected failures.
"""
import logging
from dataclasses import replace
from functools import partial
from typing import Any, Mapping, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from db import SessionLocal
from domain.models import OPTIMISTIC_ID
from domain.resources import AUTHORS, BOOKS, QUOTES, REFLECTIONS, REVIEWS, RESOURCES, Resource
from domain.schemas import summarize_errors, validate_params
from services.auth import AuthSession
from services.queries import authors_repo, repository_for

logger = logging.getLogger(__name__)

GENERIC_ERROR = "Error, please try again"


class ActionError(Exception):
    """An expected rejection whose message is safe to show to the user."""


def _check_parent(session, resource: Resource, auth: AuthSession, values: Mapping[str, Any]) -> None:
    if not resource.parent:
        return
    parent = RESOURCES[resource.parent]
    parent_id = values.get(resource.parent_field)
    if repository_for(parent).get(session, auth.user_id, parent_id) is None:
        raise ActionError(f"{parent.label} not found")


def _check_unique_author(session, auth: AuthSession, name: str, exclude_id: Optional[str] = None) -> None:
    existing = authors_repo.find_by_name(session, auth.user_id, name)
    if existing is not None and existing.id != exclude_id:
        raise ActionError(f"Author '{name}' already exists")


def _run(resource: Resource, verb: str, fn) -> Optional[str]:
    with SessionLocal() as session:
        try:
            fn(session)
        except ActionError as e:
            session.rollback()
            logger.info("%s %s rejected: %s", resource.name, verb, e)
            return str(e)
        except ValueError as e:
            session.rollback()
            logger.info("%s %s failed: %s", resource.name, verb, e)
            return str(e)
        except IntegrityError as e:
            session.rollback()
            logger.warning("%s %s violated a constraint: %s", resource.name, verb, e)
            return GENERIC_ERROR
        except SQLAlchemyError:
            session.rollback()
            logger.exception("%s %s failed", resource.name, verb)
            return GENERIC_ERROR
    logger.debug("%s %s succeeded", resource.name, verb)
    return None


def create_entity_action(resource: Resource, values: Mapping[str, Any], auth: AuthSession) -> Optional[str]:
    """Insert a new record owned by the caller."""
    payload, errors = validate_params(resource.insert_schema, values)
    if errors:
        return summarize_errors(errors)

    def _create(session):
        _check_parent(session, resource, auth, payload)
        if resource is AUTHORS:
            _check_unique_author(session, auth, payload["name"])
        entity = resource.entity_cls(id=OPTIMISTIC_ID, user_id=auth.user_id, **payload)
        repository_for(resource).create(session, entity)

    return _run(resource, "create", _create)


def update_entity_action(resource: Resource, values: Mapping[str, Any], auth: AuthSession) -> Optional[str]:
    """Overwrite the submitted fields of an existing record; `values` must carry its id."""
    payload, errors = validate_params(resource.update_schema, values, partial=True)
    if errors:
        return summarize_errors(errors)

    def _update(session):
        repo = repository_for(resource)
        entity_id = payload.pop("id")
        existing = repo.get(session, auth.user_id, entity_id)
        if existing is None:
            raise ActionError(f"{resource.label} not found")
        _check_parent(session, resource, auth, payload)
        if resource is AUTHORS:
            _check_unique_author(session, auth, payload["name"], exclude_id=entity_id)
        repo.update(session, replace(existing, **payload))

    return _run(resource, "update", _update)


def delete_entity_action(resource: Resource, entity_id: str, auth: AuthSession) -> Optional[str]:
    """Delete a record and, through the schema's cascades, everything under it."""

    def _delete(session):
        if not repository_for(resource).delete(session, auth.user_id, entity_id):
            raise ActionError(f"{resource.label} not found")

    return _run(resource, "delete", _delete)


create_author_action = partial(create_entity_action, AUTHORS)
update_author_action = partial(update_entity_action, AUTHORS)
delete_author_action = partial(delete_entity_action, AUTHORS)

create_book_action = partial(create_entity_action, BOOKS)
update_book_action = partial(update_entity_action, BOOKS)
delete_book_action = partial(delete_entity_action, BOOKS)

create_review_action = partial(create_entity_action, REVIEWS)
update_review_action = partial(update_entity_action, REVIEWS)
delete_review_action = partial(delete_entity_action, REVIEWS)

create_quote_action = partial(create_entity_action, QUOTES)
update_quote_action = partial(update_entity_action, QUOTES)
delete_quote_action = partial(delete_entity_action, QUOTES)

create_reflection_action = partial(create_entity_action, REFLECTIONS)
update_reflection_action = partial(update_entity_action, REFLECTIONS)
delete_reflection_action = partial(delete_entity_action, REFLECTIONS)
