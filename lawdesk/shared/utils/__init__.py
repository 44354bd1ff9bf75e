"""Shared utilities: datetime, generators."""

from lawdesk.shared.utils.datetime import ensure_utc, isoformat_utc, utc_now
from lawdesk.shared.utils.generators import (
    generate_cuid,
    generate_temporary_password,
)

__all__ = [
    "generate_cuid",
    "generate_temporary_password",
    "utc_now",
    "ensure_utc",
    "isoformat_utc",
]
