"""DTOs for firms (tenants)."""

from dataclasses import dataclass, field
from datetime import datetime

from lawdesk.domain.enums import SubscriptionPlan


@dataclass(frozen=True)
class FirmCreate:
    """Input for creating a firm at signup."""

    name: str
    email: str
    phone: str | None = None
    website: str | None = None
    address: str | None = None
    specializations: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class FirmResult:
    """Firm read-model."""

    id: str
    name: str
    email: str
    phone: str | None
    website: str | None
    address: str | None
    specializations: list[str]
    subscription_plan: SubscriptionPlan
    max_users: int
    created_at: datetime | None
    updated_at: datetime | None
