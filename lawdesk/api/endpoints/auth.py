"""Auth API: firm sign up, sign in and current user.

Sign up and sign in are public and rate limited; /me requires a bearer token.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from lawdesk.api.dependencies import CurrentUser, get_auth_service
from lawdesk.application.dtos.firm import FirmCreate
from lawdesk.application.services import AuthService
from lawdesk.core.limiter import limit_auth
from lawdesk.schemas.auth import (
    AuthResponse,
    AuthUserResponse,
    MeResponse,
    SigninRequest,
    SignupRequest,
)

router = APIRouter()

AuthSvc = Annotated[AuthService, Depends(get_auth_service)]


@router.post("/signup", response_model=AuthResponse)
@limit_auth
async def signup(request: Request, body: SignupRequest, service: AuthSvc) -> AuthResponse:
    """Register a firm and its founding partner; return the partner's session."""
    session = await service.signup(
        FirmCreate(
            name=body.firm_name,
            email=str(body.email),
            phone=body.phone,
            website=body.website,
            address=body.address,
            specializations=body.specializations,
        ),
        admin_email=str(body.admin_email),
        password=body.password,
        admin_name=body.admin_name,
        admin_phone=body.admin_phone,
    )
    return AuthResponse(user=AuthUserResponse.from_profile(session), token=session.token)


@router.post("/signin", response_model=AuthResponse)
@limit_auth
async def signin(request: Request, body: SigninRequest, service: AuthSvc) -> AuthResponse:
    """Authenticate with email and password; return a session token."""
    session = await service.signin(str(body.email), body.password)
    return AuthResponse(user=AuthUserResponse.from_profile(session), token=session.token)


@router.get("/me", response_model=MeResponse)
async def me(user: CurrentUser, service: AuthSvc) -> MeResponse:
    """Return the signed-in user with a summary of their firm."""
    profile = await service.get_profile(user)
    return MeResponse(user=AuthUserResponse.from_profile(profile))
