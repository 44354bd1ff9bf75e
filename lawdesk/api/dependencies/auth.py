"""Bearer-token authentication and firm scope resolution.

``get_current_user_id`` is attached to every protected router, so it runs
before any handler body. ``get_current_user`` then loads the caller's own user
record, and the firm in the scope always comes from that record, never from the
request.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from lawdesk.api.dependencies.services import get_user_repo
from lawdesk.application.dtos.user import UserResult
from lawdesk.core.firm_context import set_firm_id
from lawdesk.domain.exceptions import (
    AuthenticationException,
    InvalidTokenException,
    ResourceNotFoundException,
)
from lawdesk.domain.value_objects import FirmScope
from lawdesk.infrastructure.firebase.repositories import FirestoreUserRepository
from lawdesk.infrastructure.security.jwt import verify_token

_http_bearer = HTTPBearer(auto_error=False)


async def get_current_user_id(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
) -> str:
    """Return the user ID from the bearer token.

    Raises AuthenticationException (401) if no token is sent and
    InvalidTokenException (403) if it is malformed, forged or expired.
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationException("Access token required")
    user_id = verify_token(credentials.credentials)
    if user_id is None:
        raise InvalidTokenException()
    request.state.user_id = user_id
    return user_id


async def get_current_user(
    user_id: Annotated[str, Depends(get_current_user_id)],
    user_repo: Annotated[FirestoreUserRepository, Depends(get_user_repo)],
) -> UserResult:
    """Load the caller's user record; 404 if it no longer exists."""
    user = await user_repo.get_by_id(user_id)
    if user is None:
        raise ResourceNotFoundException("User not found", resource_type="user")
    set_firm_id(user.firm_id)
    return user


async def get_firm_scope(
    user: Annotated[UserResult, Depends(get_current_user)],
) -> FirmScope:
    """Tenant scope for repository calls: the caller's firm and user ID."""
    return FirmScope(firm_id=user.firm_id, user_id=user.id)


CurrentUser = Annotated[UserResult, Depends(get_current_user)]
Scope = Annotated[FirmScope, Depends(get_firm_scope)]
