"""Repository and service providers (composition root).

Routes depend only on these providers; nothing in an endpoint constructs a
repository or touches the document client directly. The backend is chosen
by DATABASE_BACKEND when the document client is first created.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends

from lawdesk.application.services import (
    AuthService,
    CalendarService,
    CaseService,
    TeamService,
)
from lawdesk.application.use_cases import GetDashboardUseCase
from lawdesk.core.config import get_settings
from lawdesk.infrastructure.firebase.client import DocumentClient, get_document_client
from lawdesk.infrastructure.firebase.repositories import (
    FirestoreCalendarEventRepository,
    FirestoreCaseRepository,
    FirestoreFirmRepository,
    FirestoreUserRepository,
)
from lawdesk.infrastructure.security.jwt import create_access_token


def get_db() -> DocumentClient:
    """Document client for the configured backend (initialized on first use)."""
    return get_document_client()


def get_firm_repo(
    db: Annotated[DocumentClient, Depends(get_db)],
) -> FirestoreFirmRepository:
    return FirestoreFirmRepository(db)


def get_user_repo(
    db: Annotated[DocumentClient, Depends(get_db)],
) -> FirestoreUserRepository:
    return FirestoreUserRepository(db)


def get_case_repo(
    db: Annotated[DocumentClient, Depends(get_db)],
) -> FirestoreCaseRepository:
    return FirestoreCaseRepository(db)


def get_event_repo(
    db: Annotated[DocumentClient, Depends(get_db)],
) -> FirestoreCalendarEventRepository:
    return FirestoreCalendarEventRepository(db)


def get_auth_service(
    firm_repo: Annotated[FirestoreFirmRepository, Depends(get_firm_repo)],
    user_repo: Annotated[FirestoreUserRepository, Depends(get_user_repo)],
) -> AuthService:
    """Sign up / sign in service with JWT issuance (composition root)."""
    return AuthService(
        firm_repo=firm_repo,
        user_repo=user_repo,
        issue_token=create_access_token,
    )


def get_team_service(
    user_repo: Annotated[FirestoreUserRepository, Depends(get_user_repo)],
) -> TeamService:
    return TeamService(
        user_repo=user_repo,
        temp_password_length=get_settings().temp_password_length,
    )


def get_case_service(
    case_repo: Annotated[FirestoreCaseRepository, Depends(get_case_repo)],
    user_repo: Annotated[FirestoreUserRepository, Depends(get_user_repo)],
) -> CaseService:
    return CaseService(case_repo=case_repo, user_repo=user_repo)


def get_calendar_service(
    event_repo: Annotated[FirestoreCalendarEventRepository, Depends(get_event_repo)],
    case_repo: Annotated[FirestoreCaseRepository, Depends(get_case_repo)],
    user_repo: Annotated[FirestoreUserRepository, Depends(get_user_repo)],
) -> CalendarService:
    return CalendarService(event_repo=event_repo, case_repo=case_repo, user_repo=user_repo)


def get_dashboard_use_case(
    case_repo: Annotated[FirestoreCaseRepository, Depends(get_case_repo)],
    user_repo: Annotated[FirestoreUserRepository, Depends(get_user_repo)],
    event_repo: Annotated[FirestoreCalendarEventRepository, Depends(get_event_repo)],
) -> GetDashboardUseCase:
    return GetDashboardUseCase(case_repo=case_repo, user_repo=user_repo, event_repo=event_repo)
