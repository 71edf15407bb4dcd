"""
Authentication gate.

Sign-in itself happens upstream; this module only reads the identity the auth
proxy forwards and refuses requests that carry none.
"""
from dataclasses import dataclass
from typing import Optional

from fastapi import Request

from settings import settings


class NotAuthenticatedError(Exception):
    """Raised when a request reaches a page or action without a signed-in user."""


@dataclass(frozen=True)
class AuthSession:
    user_id: str


def get_user_auth(request: Request) -> Optional[AuthSession]:
    user_id = request.headers.get(settings.AUTH_HEADER) or request.cookies.get(settings.AUTH_COOKIE)
    if not user_id or not user_id.strip():
        return None
    return AuthSession(user_id=user_id.strip())


def check_auth(request: Request) -> AuthSession:
    """Return the caller's session or raise NotAuthenticatedError."""
    auth = get_user_auth(request)
    if auth is None:
        raise NotAuthenticatedError("Not authenticated")
    return auth
