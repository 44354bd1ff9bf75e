"""Case API schemas."""

from pydantic import Field

from lawdesk.application.dtos.case import CaseCreate, CaseResult, PopulatedCase
from lawdesk.domain.enums import CaseStatus, Priority
from lawdesk.schemas.common import CamelModel, CamelResponse, UserRefResponse, UtcDatetime


class CaseCreateRequest(CamelModel):
    """Request body for creating a case."""

    title: str = Field(..., min_length=1, max_length=300)
    client_name: str = Field(..., min_length=1, max_length=200)
    case_type: str = Field(..., min_length=1, max_length=100)
    status: CaseStatus = CaseStatus.PENDING
    priority: Priority = Priority.MEDIUM
    summary: str | None = None
    due_date: UtcDatetime | None = None
    billable_hours: float = Field(default=0, ge=0)
    assigned_to: list[str] = Field(default_factory=list)

    def to_dto(self) -> CaseCreate:
        return CaseCreate(
            title=self.title,
            client_name=self.client_name,
            case_type=self.case_type,
            status=self.status,
            priority=self.priority,
            summary=self.summary,
            due_date=self.due_date,
            billable_hours=self.billable_hours,
            assigned_to=self.assigned_to,
        )


class CaseUpdateRequest(CamelModel):
    """Request body for PUT (only supplied fields change)."""

    title: str | None = Field(default=None, min_length=1, max_length=300)
    client_name: str | None = Field(default=None, min_length=1, max_length=200)
    case_type: str | None = Field(default=None, min_length=1, max_length=100)
    status: CaseStatus | None = None
    priority: Priority | None = None
    summary: str | None = None
    due_date: UtcDatetime | None = None
    billable_hours: float | None = Field(default=None, ge=0)
    assigned_to: list[str] | None = None

    def changes(self) -> dict:
        """Supplied fields as storage keys. Required fields cannot be cleared."""
        data = self.model_dump(exclude_unset=True)
        for key in ("title", "client_name", "case_type", "status", "priority", "billable_hours", "assigned_to"):
            if key in data and data[key] is None:
                del data[key]
        return data


class CaseSummaryResponse(CamelResponse):
    """Case record without resolved references (dashboard)."""

    id: str = Field(alias="_id")
    title: str
    client_name: str
    case_type: str
    status: CaseStatus
    priority: Priority
    summary: str | None = None
    due_date: UtcDatetime | None = None
    billable_hours: float = 0
    assigned_to: list[str] = Field(default_factory=list)
    firm_id: str
    created_at: UtcDatetime | None = None
    updated_at: UtcDatetime | None = None

    @staticmethod
    def _fields(case: CaseResult) -> dict:
        return {
            "id": case.id,
            "title": case.title,
            "client_name": case.client_name,
            "case_type": case.case_type,
            "status": case.status,
            "priority": case.priority,
            "summary": case.summary,
            "due_date": case.due_date,
            "billable_hours": case.billable_hours,
            "assigned_to": case.assigned_to,
            "firm_id": case.firm_id,
            "created_at": case.created_at,
            "updated_at": case.updated_at,
        }

    @classmethod
    def from_result(cls, case: CaseResult) -> "CaseSummaryResponse":
        return cls(**cls._fields(case))


class CaseResponse(CaseSummaryResponse):
    """Case record with its creator resolved."""

    created_by: UserRefResponse | None = None

    @classmethod
    def from_populated(cls, populated: PopulatedCase) -> "CaseResponse":
        ref = populated.created_by
        return cls(
            **cls._fields(populated.case),
            created_by=(
                UserRefResponse(id=ref.id, name=ref.name, email=ref.email) if ref else None
            ),
        )


class CaseListResponse(CamelResponse):
    cases: list[CaseResponse]


class CaseMutationResponse(CamelResponse):
    success: bool = True
    case: CaseResponse
