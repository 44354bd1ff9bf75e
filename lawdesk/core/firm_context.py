"""Firm context for the current request.

The auth dependency sets the caller's firm_id here once the user is resolved,
so log records and spans can be tagged with the tenant without threading it
through every call.
"""

from contextvars import ContextVar

# Current firm ID for the request (set by get_current_user, read by logging).
current_firm_id: ContextVar[str | None] = ContextVar("current_firm_id", default=None)


def set_firm_id(firm_id: str | None) -> None:
    """Set the current firm ID for this context (e.g. request)."""
    current_firm_id.set(firm_id)


def get_firm_id() -> str | None:
    """Return the current firm ID if set."""
    return current_firm_id.get()
