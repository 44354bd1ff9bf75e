"""DTOs for users and team members (no password hash ever leaves the repository)."""

from dataclasses import dataclass, field
from datetime import datetime

from lawdesk.application.dtos.firm import FirmResult
from lawdesk.domain.enums import PermissionCategory, UserRole, UserStatus


@dataclass(frozen=True)
class Permission:
    """A named capability granted to a user."""

    name: str
    description: str
    category: PermissionCategory


@dataclass(frozen=True)
class UserCreate:
    """Input for creating a user (founding partner or team member)."""

    name: str
    email: str
    role: UserRole = UserRole.ASSOCIATE
    department: str | None = None
    phone: str | None = None
    specializations: list[str] = field(default_factory=list)
    status: UserStatus = UserStatus.ACTIVE
    permissions: list[Permission] = field(default_factory=list)


@dataclass(frozen=True)
class UserResult:
    """User read-model."""

    id: str
    firm_id: str
    name: str
    email: str
    role: UserRole
    department: str | None
    phone: str | None
    specializations: list[str]
    status: UserStatus
    permissions: list[Permission]
    join_date: datetime | None
    created_at: datetime | None
    updated_at: datetime | None

    @property
    def is_active(self) -> bool:
        return self.status == UserStatus.ACTIVE


@dataclass(frozen=True)
class UserRef:
    """Minimal user reference embedded in other records (createdBy)."""

    id: str
    name: str
    email: str


@dataclass(frozen=True)
class AuthSession:
    """Result of signup/signin: the user, their firm view and a bearer token."""

    user: UserResult
    firm: FirmResult
    current_users: int
    token: str


@dataclass(frozen=True)
class UserProfile:
    """Current user with firm view (GET /auth/me)."""

    user: UserResult
    firm: FirmResult
    current_users: int


@dataclass(frozen=True)
class TeamMemberCreated:
    """New team member plus the one-time plaintext temporary password."""

    member: UserResult
    temp_password: str
