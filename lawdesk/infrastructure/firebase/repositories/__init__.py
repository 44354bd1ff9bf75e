"""Firestore repositories (firm-scoped CRUD plus firm and email registry)."""

from lawdesk.infrastructure.firebase.repositories.calendar_event_repo_firestore import (
    FirestoreCalendarEventRepository,
)
from lawdesk.infrastructure.firebase.repositories.case_repo_firestore import (
    FirestoreCaseRepository,
)
from lawdesk.infrastructure.firebase.repositories.email_registry_firestore import (
    FirestoreEmailRegistry,
)
from lawdesk.infrastructure.firebase.repositories.firm_repo_firestore import (
    FirestoreFirmRepository,
)
from lawdesk.infrastructure.firebase.repositories.user_repo_firestore import (
    FirestoreUserRepository,
)

__all__ = [
    "FirestoreCalendarEventRepository",
    "FirestoreCaseRepository",
    "FirestoreEmailRegistry",
    "FirestoreFirmRepository",
    "FirestoreUserRepository",
]
