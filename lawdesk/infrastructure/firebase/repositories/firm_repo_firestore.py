"""Firestore-backed firm repository (implements IFirmRepository)."""

from __future__ import annotations

import logging
from dataclasses import asdict
from typing import TYPE_CHECKING, Any

from lawdesk.application.dtos.firm import FirmCreate, FirmResult
from lawdesk.domain.enums import SubscriptionPlan
from lawdesk.infrastructure.firebase.collections import COLLECTION_FIRMS, is_valid_document_id
from lawdesk.infrastructure.firebase.repositories.email_registry_firestore import (
    FirestoreEmailRegistry,
    normalize_email,
)
from lawdesk.shared.utils.datetime import utc_now
from lawdesk.shared.utils.generators import generate_cuid

if TYPE_CHECKING:
    from lawdesk.infrastructure.firebase.client import DocumentClient

logger = logging.getLogger(__name__)

DEFAULT_MAX_USERS = 5


class FirestoreFirmRepository:
    """Firm repository using Firestore. Firms are created at signup and never updated here."""

    def __init__(
        self,
        client: DocumentClient,
        email_registry: FirestoreEmailRegistry | None = None,
    ) -> None:
        self._client = client
        self._coll = client.collection(COLLECTION_FIRMS)
        self._emails = email_registry or FirestoreEmailRegistry(client)

    def _to_result(self, doc_id: str, data: dict[str, Any]) -> FirmResult:
        return FirmResult(
            id=doc_id,
            name=data.get("name", ""),
            email=data.get("email", ""),
            phone=data.get("phone"),
            website=data.get("website"),
            address=data.get("address"),
            specializations=list(data.get("specializations") or []),
            subscription_plan=SubscriptionPlan(
                data.get("subscription_plan", SubscriptionPlan.BASIC)
            ),
            max_users=int(data.get("max_users", DEFAULT_MAX_USERS)),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )

    async def get_by_id(self, firm_id: str) -> FirmResult | None:
        """Return firm by ID."""
        if not is_valid_document_id(firm_id):
            return None
        doc = await self._coll.document(firm_id).get()
        if not doc:
            return None
        return self._to_result(doc.id, doc.to_dict())

    async def email_exists(self, email: str) -> bool:
        return await self._emails.is_claimed("firm", email)

    async def create_firm(self, data: FirmCreate) -> FirmResult:
        """Claim the firm email, then write the firm document.

        Raises ConflictException if the email is taken. The claim is released
        if the firm write fails.
        """
        firm_id = generate_cuid()
        await self._emails.claim("firm", data.email, firm_id)
        now = utc_now()
        doc = {
            **asdict(data),
            "email": normalize_email(data.email),
            "subscription_plan": SubscriptionPlan.BASIC.value,
            "max_users": DEFAULT_MAX_USERS,
            "created_at": now,
            "updated_at": now,
        }
        try:
            await self._coll.create(firm_id, doc)
        except Exception:
            logger.exception("Firm write failed for %s; releasing email claim", firm_id)
            await self._emails.release("firm", data.email)
            raise
        return self._to_result(firm_id, doc)

    async def delete_firm(self, firm_id: str) -> None:
        """Delete the firm and release its email. Used to undo a failed signup."""
        doc = await self._coll.document(firm_id).get()
        if not doc:
            return
        await self._coll.document(firm_id).delete()
        email = doc.to_dict().get("email")
        if email:
            await self._emails.release("firm", email)
