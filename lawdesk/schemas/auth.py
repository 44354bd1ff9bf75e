"""Auth API schemas."""

from pydantic import EmailStr, Field

from lawdesk.application.dtos.user import AuthSession, Permission, UserProfile
from lawdesk.domain.enums import PermissionCategory, UserRole
from lawdesk.schemas.common import CamelModel, CamelResponse


class SignupRequest(CamelModel):
    """Request body for firm registration. ``email`` is the firm's contact address."""

    firm_name: str = Field(..., min_length=1, max_length=200)
    email: EmailStr
    admin_email: EmailStr
    password: str = Field(..., min_length=1)
    admin_name: str | None = Field(default=None, max_length=200)
    admin_phone: str | None = None
    phone: str | None = None
    website: str | None = None
    address: str | None = None
    specializations: list[str] = Field(default_factory=list)


class SigninRequest(CamelModel):
    """Request body for sign in."""

    email: EmailStr
    password: str = Field(..., min_length=1)


class PermissionSchema(CamelResponse):
    name: str = Field(..., min_length=1)
    description: str = ""
    category: PermissionCategory

    @classmethod
    def from_dto(cls, permission: Permission) -> "PermissionSchema":
        return cls(
            name=permission.name,
            description=permission.description,
            category=permission.category,
        )


class FirmSummaryResponse(CamelResponse):
    id: str
    name: str
    email: str
    current_users: int
    max_users: int


class AuthUserResponse(CamelResponse):
    """Signed-in user as seen by the client (no password hash)."""

    id: str
    name: str
    email: str
    role: UserRole
    firm_id: str
    firm: FirmSummaryResponse
    department: str | None = None
    phone: str | None = None
    specializations: list[str] = Field(default_factory=list)
    permissions: list[PermissionSchema] = Field(default_factory=list)

    @classmethod
    def from_profile(cls, profile: AuthSession | UserProfile) -> "AuthUserResponse":
        user, firm = profile.user, profile.firm
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            role=user.role,
            firm_id=user.firm_id,
            firm=FirmSummaryResponse(
                id=firm.id,
                name=firm.name,
                email=firm.email,
                current_users=profile.current_users,
                max_users=firm.max_users,
            ),
            department=user.department,
            phone=user.phone,
            specializations=user.specializations,
            permissions=[PermissionSchema.from_dto(p) for p in user.permissions],
        )


class AuthResponse(CamelResponse):
    """Response for sign up and sign in."""

    success: bool = True
    user: AuthUserResponse
    token: str


class MeResponse(CamelResponse):
    user: AuthUserResponse
