"""Team member API schemas."""

from pydantic import AliasChoices, EmailStr, Field

from lawdesk.application.dtos.user import Permission, UserCreate, UserResult
from lawdesk.domain.enums import PermissionCategory, UserRole, UserStatus
from lawdesk.schemas.auth import PermissionSchema
from lawdesk.schemas.common import CamelModel, CamelResponse, UtcDatetime


class PermissionInput(CamelModel):
    name: str = Field(..., min_length=1)
    description: str = ""
    category: PermissionCategory

    def to_dto(self) -> Permission:
        return Permission(
            name=self.name, description=self.description, category=self.category
        )


class TeamMemberCreateRequest(CamelModel):
    """Request body for adding a member. The password is generated server-side."""

    name: str = Field(..., min_length=1, max_length=200)
    email: EmailStr
    role: UserRole = UserRole.ASSOCIATE
    department: str | None = None
    phone: str | None = None
    specializations: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("specializations", "specialization"),
    )
    permissions: list[PermissionInput] = Field(default_factory=list)
    status: UserStatus = UserStatus.ACTIVE

    def to_dto(self) -> UserCreate:
        return UserCreate(
            name=self.name,
            email=str(self.email),
            role=self.role,
            department=self.department,
            phone=self.phone,
            specializations=self.specializations,
            status=self.status,
            permissions=[p.to_dto() for p in self.permissions],
        )


class TeamMemberUpdateRequest(CamelModel):
    """Request body for PUT (only supplied fields change; password cannot be set here)."""

    name: str | None = Field(default=None, min_length=1, max_length=200)
    email: EmailStr | None = None
    role: UserRole | None = None
    department: str | None = None
    phone: str | None = None
    specializations: list[str] | None = Field(
        default=None,
        validation_alias=AliasChoices("specializations", "specialization"),
    )
    permissions: list[PermissionInput] | None = None
    status: UserStatus | None = None

    def changes(self) -> dict:
        data = self.model_dump(exclude_unset=True)
        for key in ("name", "email", "role", "status", "specializations", "permissions"):
            if key in data and data[key] is None:
                del data[key]
        if "email" in data:
            data["email"] = str(data["email"])
        return data


class TeamMemberResponse(CamelResponse):
    """Firm member (never includes the password hash)."""

    id: str = Field(alias="_id")
    name: str
    email: str
    role: UserRole
    firm_id: str
    department: str | None = None
    phone: str | None = None
    specializations: list[str] = Field(default_factory=list)
    status: UserStatus
    permissions: list[PermissionSchema] = Field(default_factory=list)
    join_date: UtcDatetime | None = None
    created_at: UtcDatetime | None = None
    updated_at: UtcDatetime | None = None

    @classmethod
    def from_result(cls, user: UserResult) -> "TeamMemberResponse":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            role=user.role,
            firm_id=user.firm_id,
            department=user.department,
            phone=user.phone,
            specializations=user.specializations,
            status=user.status,
            permissions=[PermissionSchema.from_dto(p) for p in user.permissions],
            join_date=user.join_date,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class TeamListResponse(CamelResponse):
    team_members: list[TeamMemberResponse]


class TeamMemberCreatedResponse(CamelResponse):
    success: bool = True
    member: TeamMemberResponse
    temp_password: str


class TeamMemberUpdatedResponse(CamelResponse):
    success: bool = True
    member: TeamMemberResponse
