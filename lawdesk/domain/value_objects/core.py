"""Domain value objects for lawdesk.

Value objects are immutable types that represent domain concepts with
self-validation. They have no identity, only value.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class FirmScope:
    """Tenant context required by every firm-scoped repository call.

    Built only from the authenticated user's own record (never from request
    input). ``user_id`` is the acting user, stamped as creator on new records;
    it is None while the founding user of a firm is being created.
    """

    firm_id: str
    user_id: str | None = None

    def __post_init__(self) -> None:
        if not self.firm_id or not isinstance(self.firm_id, str):
            raise ValueError("FirmScope requires a non-empty firm_id")
