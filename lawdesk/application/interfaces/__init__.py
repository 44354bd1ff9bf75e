"""Ports implemented by the infrastructure layer."""

from lawdesk.application.interfaces.repositories import (
    ICalendarEventRepository,
    ICaseRepository,
    IFirmRepository,
    IUserRepository,
)

__all__ = [
    "ICalendarEventRepository",
    "ICaseRepository",
    "IFirmRepository",
    "IUserRepository",
]
