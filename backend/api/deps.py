"""
Shared route dependencies.
"""
from fastapi import HTTPException, Request

from services.auth import AuthSession, NotAuthenticatedError, check_auth


def require_auth(request: Request) -> AuthSession:
    """Abort the request with 401 before any data is read."""
    try:
        return check_auth(request)
    except NotAuthenticatedError as e:
        raise HTTPException(status_code=401, detail=str(e))
