"""Domain enumerations for lawdesk.

Enums represent fixed sets of domain values (roles, case status, event type).
Stored and serialized by value.
"""

from enum import Enum


class _ValuesMixin:
    @classmethod
    def values(cls) -> list[str]:
        """Return all valid values as strings (e.g. for validation messages)."""
        return [member.value for member in cls]  # type: ignore[attr-defined]


class UserRole(_ValuesMixin, str, Enum):
    """Role of a user within their firm."""

    PARTNER = "partner"
    SENIOR_ASSOCIATE = "senior_associate"
    ASSOCIATE = "associate"
    PARALEGAL = "paralegal"
    ADMIN = "admin"


class UserStatus(_ValuesMixin, str, Enum):
    """Whether the user may sign in."""

    ACTIVE = "active"
    INACTIVE = "inactive"


class SubscriptionPlan(_ValuesMixin, str, Enum):
    """Firm subscription tier."""

    BASIC = "basic"
    PROFESSIONAL = "professional"
    ENTERPRISE = "enterprise"


class CaseStatus(_ValuesMixin, str, Enum):
    """Case lifecycle status. New cases start as pending."""

    ACTIVE = "active"
    PENDING = "pending"
    CLOSED = "closed"
    ON_HOLD = "on_hold"


class Priority(_ValuesMixin, str, Enum):
    """Priority shared by cases, events and dashboard alerts."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class EventType(_ValuesMixin, str, Enum):
    """Calendar event type."""

    MEETING = "meeting"
    COURT_HEARING = "court_hearing"
    DEADLINE = "deadline"
    CONSULTATION = "consultation"
    OTHER = "other"

    @property
    def label(self) -> str:
        """Human-readable label used in dashboard alerts."""
        return _EVENT_TYPE_LABELS[self]


_EVENT_TYPE_LABELS: dict[EventType, str] = {
    EventType.MEETING: "Client Meeting",
    EventType.COURT_HEARING: "Court Hearing",
    EventType.DEADLINE: "Deadline",
    EventType.CONSULTATION: "Consultation",
    EventType.OTHER: "Other",
}


class EventStatus(_ValuesMixin, str, Enum):
    """Calendar event status."""

    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class PermissionCategory(_ValuesMixin, str, Enum):
    """Grouping for user permissions."""

    CASES = "cases"
    DOCUMENTS = "documents"
    TEAM = "team"
    CALENDAR = "calendar"
    SETTINGS = "settings"
