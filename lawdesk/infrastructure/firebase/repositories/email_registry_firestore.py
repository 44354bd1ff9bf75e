"""Global email uniqueness for firms and users.

Firestore has no unique indexes. Each claimed address gets a document in
``unique_emails`` whose ID is derived from the address; creating it with
create() fails atomically when the address is already taken.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal
from urllib.parse import quote

from lawdesk.domain.exceptions import ConflictException
from lawdesk.infrastructure.exceptions import DocumentExistsError
from lawdesk.infrastructure.firebase.collections import COLLECTION_UNIQUE_EMAILS
from lawdesk.shared.utils.datetime import utc_now

if TYPE_CHECKING:
    from lawdesk.infrastructure.firebase.client import DocumentClient

EmailKind = Literal["firm", "user"]

CONFLICT_MESSAGES: dict[str, str] = {
    "firm": "Firm already exists with this email",
    "user": "User already exists with this email",
}


def normalize_email(email: str) -> str:
    return email.strip().lower()


def _claim_doc_id(kind: EmailKind, email: str) -> str:
    """Firestore document ID for a claim.

    The address is percent-escaped (keeping "@") so the ID never holds "/"
    and one escaping rule covers every character an address may contain.
    """
    return f"{kind}:{quote(normalize_email(email), safe='@')}"


class FirestoreEmailRegistry:
    """Claims and releases email addresses per kind (firm contact vs user login)."""

    def __init__(self, client: DocumentClient) -> None:
        self._coll = client.collection(COLLECTION_UNIQUE_EMAILS)

    async def is_claimed(self, kind: EmailKind, email: str) -> bool:
        return await self._coll.document(_claim_doc_id(kind, email)).get() is not None

    async def claim(
        self, kind: EmailKind, email: str, owner_id: str, field: str = "email"
    ) -> None:
        """Reserve email for owner_id; raise ConflictException if already taken."""
        try:
            await self._coll.create(
                _claim_doc_id(kind, email),
                {
                    "kind": kind,
                    "email": normalize_email(email),
                    "owner_id": owner_id,
                    "created_at": utc_now(),
                },
            )
        except DocumentExistsError:
            raise ConflictException(CONFLICT_MESSAGES[kind], field=field) from None

    async def release(self, kind: EmailKind, email: str) -> None:
        """Free the address. Idempotent."""
        await self._coll.document(_claim_doc_id(kind, email)).delete()
