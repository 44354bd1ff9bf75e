"""Tests for sign-up rollback when the founding partner cannot be written."""

import pytest

from lawdesk.application.dtos.firm import FirmCreate
from lawdesk.application.services import AuthService
from lawdesk.domain.exceptions import ConflictException
from lawdesk.infrastructure.firebase._memory_client import MemoryDocumentClient
from lawdesk.infrastructure.firebase.collections import COLLECTION_FIRMS
from lawdesk.infrastructure.firebase.repositories import (
    FirestoreFirmRepository,
    FirestoreUserRepository,
)


class FailingUserRepository(FirestoreUserRepository):
    """User repository whose writes fail with a preset error."""

    def __init__(self, client: MemoryDocumentClient, error: Exception) -> None:
        super().__init__(client)
        self.error = error

    async def create_user(self, scope, data, password):
        raise self.error


@pytest.fixture
def db() -> MemoryDocumentClient:
    return MemoryDocumentClient()


def _service(db: MemoryDocumentClient, error: Exception) -> AuthService:
    return AuthService(
        FirestoreFirmRepository(db),
        FailingUserRepository(db, error),
        issue_token=lambda user_id: f"token-{user_id}",
    )


async def _firm_count(db: MemoryDocumentClient) -> int:
    return await db.collection(COLLECTION_FIRMS).where("name", "==", "Doe & Co").count()


async def test_failed_founder_write_removes_firm_and_email_claim(db) -> None:
    service = _service(db, RuntimeError("store unavailable"))

    with pytest.raises(RuntimeError):
        await service.signup(
            FirmCreate(name="Doe & Co", email="office@doe.test"),
            admin_email="jane@doe.test",
            password="pw",
        )

    assert await _firm_count(db) == 0
    assert not await FirestoreFirmRepository(db).email_exists("office@doe.test")


async def test_founder_conflict_is_reported_on_admin_email(db) -> None:
    service = _service(
        db, ConflictException("User already exists with this email", field="email")
    )

    with pytest.raises(ConflictException) as exc:
        await service.signup(
            FirmCreate(name="Doe & Co", email="office@doe.test"),
            admin_email="jane@doe.test",
            password="pw",
        )

    assert exc.value.to_dict() == {
        "error": "User already exists with this email",
        "field": "adminEmail",
    }
    assert await _firm_count(db) == 0
    assert not await FirestoreFirmRepository(db).email_exists("office@doe.test")


async def test_firm_email_can_be_reused_after_rollback(db) -> None:
    failing = _service(db, RuntimeError("store unavailable"))
    with pytest.raises(RuntimeError):
        await failing.signup(
            FirmCreate(name="Doe & Co", email="office@doe.test"),
            admin_email="jane@doe.test",
            password="pw",
        )

    working = AuthService(
        FirestoreFirmRepository(db),
        FirestoreUserRepository(db),
        issue_token=lambda user_id: f"token-{user_id}",
    )
    session = await working.signup(
        FirmCreate(name="Doe & Co", email="office@doe.test"),
        admin_email="jane@doe.test",
        password="pw",
    )
    assert session.token == f"token-{session.user.id}"
    assert session.current_users == 1
    assert await _firm_count(db) == 1
