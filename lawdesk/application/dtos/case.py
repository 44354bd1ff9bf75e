"""DTOs for cases."""

from dataclasses import dataclass, field
from datetime import datetime

from lawdesk.application.dtos.user import UserRef
from lawdesk.domain.enums import CaseStatus, Priority


@dataclass(frozen=True)
class CaseCreate:
    """Input for creating a case in the caller's firm."""

    title: str
    client_name: str
    case_type: str
    status: CaseStatus = CaseStatus.PENDING
    priority: Priority = Priority.MEDIUM
    summary: str | None = None
    due_date: datetime | None = None
    billable_hours: float = 0
    assigned_to: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class CaseResult:
    """Case read-model."""

    id: str
    firm_id: str
    title: str
    client_name: str
    case_type: str
    status: CaseStatus
    priority: Priority
    summary: str | None
    due_date: datetime | None
    billable_hours: float
    assigned_to: list[str]
    created_by: str | None
    created_at: datetime | None
    updated_at: datetime | None


@dataclass(frozen=True)
class CaseRef:
    """Minimal case reference embedded in calendar events (caseId)."""

    id: str
    title: str
    client_name: str


@dataclass(frozen=True)
class PopulatedCase:
    """Case with its creator resolved."""

    case: CaseResult
    created_by: UserRef | None
