"""Firestore-backed user repository (implements IUserRepository).

Users double as team members: the team endpoints are firm-scoped views of
this collection. Emails are unique across all firms (they are the login
identity) and are enforced through the email registry.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import asdict
from typing import TYPE_CHECKING, Any

from lawdesk.application.dtos.user import Permission, UserCreate, UserRef, UserResult
from lawdesk.domain.enums import PermissionCategory, UserRole, UserStatus
from lawdesk.infrastructure.firebase.collections import COLLECTION_USERS, is_valid_document_id
from lawdesk.infrastructure.firebase.repositories.base import FirestoreScopedRepository
from lawdesk.infrastructure.firebase.repositories.email_registry_firestore import (
    FirestoreEmailRegistry,
    normalize_email,
)
from lawdesk.infrastructure.security.password import get_password_hash, verify_password
from lawdesk.shared.utils.datetime import utc_now

if TYPE_CHECKING:
    from lawdesk.domain.value_objects import FirmScope
    from lawdesk.infrastructure.firebase.client import DocumentClient

logger = logging.getLogger(__name__)

_dummy_hash_cache: str | None = None


async def _get_dummy_hash() -> str:
    """Return a valid bcrypt hash for dummy comparison (timing-attack mitigation)."""
    global _dummy_hash_cache
    if _dummy_hash_cache is None:
        _dummy_hash_cache = await asyncio.to_thread(
            get_password_hash, "not-a-real-password"
        )
    return _dummy_hash_cache


def _to_permission(raw: dict[str, Any]) -> Permission:
    return Permission(
        name=raw.get("name", ""),
        description=raw.get("description", ""),
        category=PermissionCategory(raw.get("category", PermissionCategory.CASES)),
    )


class FirestoreUserRepository(FirestoreScopedRepository[UserResult]):
    """User repository using Firestore."""

    collection_name = COLLECTION_USERS

    def __init__(
        self,
        client: DocumentClient,
        email_registry: FirestoreEmailRegistry | None = None,
    ) -> None:
        super().__init__(client)
        self._emails = email_registry or FirestoreEmailRegistry(client)

    def _to_result(self, doc_id: str, data: dict[str, Any]) -> UserResult:
        return UserResult(
            id=doc_id,
            firm_id=data.get("firm_id", ""),
            name=data.get("name", ""),
            email=data.get("email", ""),
            role=UserRole(data.get("role", UserRole.ASSOCIATE)),
            department=data.get("department"),
            phone=data.get("phone"),
            specializations=list(data.get("specializations") or []),
            status=UserStatus(data.get("status", UserStatus.ACTIVE)),
            permissions=[_to_permission(p) for p in data.get("permissions") or []],
            join_date=data.get("join_date"),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )

    async def get_by_id(self, user_id: str) -> UserResult | None:
        """Return user by ID (unscoped; used to resolve the token subject)."""
        if not is_valid_document_id(user_id):
            return None
        doc = await self._coll.document(user_id).get()
        if not doc:
            return None
        return self._to_result(doc.id, doc.to_dict())

    async def _find_by_email(self, email: str) -> tuple[str, dict[str, Any]] | None:
        q = self._coll.where("email", "==", normalize_email(email)).limit(1)
        async for snapshot in q.stream():
            return snapshot.id, snapshot.to_dict()
        return None

    async def get_by_email(self, email: str) -> UserResult | None:
        """Return user by email (unscoped; emails are globally unique)."""
        found = await self._find_by_email(email)
        if found is None:
            return None
        return self._to_result(*found)

    async def authenticate(self, email: str, password: str) -> UserResult | None:
        """Verify email/password; return the active user or None.

        Unknown emails still run one bcrypt comparison so response time
        does not reveal whether an account exists.
        """
        found = await self._find_by_email(email)
        if found is None:
            dummy_hash = await _get_dummy_hash()
            await asyncio.to_thread(verify_password, password, dummy_hash)
            return None
        doc_id, data = found
        stored_hash = data.get("password_hash", "")
        if not await asyncio.to_thread(verify_password, password, stored_hash):
            return None
        if data.get("status", UserStatus.ACTIVE.value) != UserStatus.ACTIVE.value:
            return None
        return self._to_result(doc_id, data)

    async def list_by_firm(
        self, scope: FirmScope, *, status: UserStatus | None = None
    ) -> list[UserResult]:
        """Return firm members, newest first."""
        filters = [("status", "==", status.value)] if status else None
        return await self._list(scope, filters)

    async def create_user(
        self, scope: FirmScope, data: UserCreate, password: str
    ) -> UserResult:
        """Claim the email, hash the password, then write the user.

        Raises ConflictException if the email belongs to any user in any firm.
        The claim is released if the write fails.
        """
        email = normalize_email(data.email)
        await self._emails.claim("user", email, scope.firm_id)
        try:
            hashed = await asyncio.to_thread(get_password_hash, password)
            user = await self._insert(
                scope,
                {**asdict(data), "email": email},
                server_fields={"password_hash": hashed, "join_date": utc_now()},
            )
        except Exception:
            logger.exception("User write failed in firm %s; releasing email claim", scope.firm_id)
            await self._emails.release("user", email)
            raise
        return user

    async def update_scoped(
        self, scope: FirmScope, record_id: str, changes: dict[str, Any]
    ) -> UserResult | None:
        """Update a member of scope's firm. A new email is claimed before the write
        and the old one released after it."""
        current = await self.get_scoped(scope, record_id)
        if current is None:
            return None
        new_email = changes.get("email")
        if new_email is not None:
            new_email = normalize_email(new_email)
            changes = {**changes, "email": new_email}
        email_changed = new_email is not None and new_email != current.email
        if email_changed:
            await self._emails.claim("user", new_email, scope.firm_id)
        try:
            updated = await super().update_scoped(scope, record_id, changes)
        except Exception:
            if email_changed:
                await self._emails.release("user", new_email)
            raise
        if updated is None:
            if email_changed:
                await self._emails.release("user", new_email)
            return None
        if email_changed:
            await self._emails.release("user", current.email)
        return updated

    async def delete_scoped(self, scope: FirmScope, record_id: str) -> bool:
        """Delete a member of scope's firm and free their email."""
        current = await self.get_scoped(scope, record_id)
        if current is None:
            return False
        deleted = await super().delete_scoped(scope, record_id)
        if deleted:
            await self._emails.release("user", current.email)
        return deleted

    async def get_refs(self, scope: FirmScope, ids: set[str]) -> dict[str, UserRef]:
        """Return name/email for the given IDs that belong to scope's firm."""
        wanted = sorted(i for i in ids if i)
        found = await asyncio.gather(*(self.get_scoped(scope, i) for i in wanted))
        return {
            user.id: UserRef(id=user.id, name=user.name, email=user.email)
            for user in found
            if user is not None
        }
