"""Permission catalogue granted to the founding partner of a firm."""

from lawdesk.domain.enums import PermissionCategory

# (name, description, category)
ADMIN_PERMISSIONS: tuple[tuple[str, str, PermissionCategory], ...] = (
    ("view_cases", "Can view all cases", PermissionCategory.CASES),
    ("edit_cases", "Can create and edit cases", PermissionCategory.CASES),
    ("delete_cases", "Can delete cases", PermissionCategory.CASES),
    ("manage_team", "Can add/remove team members", PermissionCategory.TEAM),
    ("view_documents", "Can view documents", PermissionCategory.DOCUMENTS),
    ("upload_documents", "Can upload documents", PermissionCategory.DOCUMENTS),
    ("manage_calendar", "Can create/edit calendar events", PermissionCategory.CALENDAR),
    ("system_settings", "Can modify system settings", PermissionCategory.SETTINGS),
)

FOUNDER_DEPARTMENT = "Administration"
