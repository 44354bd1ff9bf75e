"""Repository tests against the in-memory document store.

Covers firm scoping and global email uniqueness for firms and users.
"""

import pytest

from lawdesk.application.dtos.firm import FirmCreate
from lawdesk.application.dtos.user import UserCreate
from lawdesk.domain.enums import UserStatus
from lawdesk.domain.exceptions import ConflictException
from lawdesk.domain.value_objects import FirmScope
from lawdesk.infrastructure.firebase._memory_client import MemoryDocumentClient
from lawdesk.infrastructure.firebase.repositories import (
    FirestoreFirmRepository,
    FirestoreUserRepository,
)


@pytest.fixture
def db() -> MemoryDocumentClient:
    return MemoryDocumentClient()


@pytest.fixture
def firms(db: MemoryDocumentClient) -> FirestoreFirmRepository:
    return FirestoreFirmRepository(db)


@pytest.fixture
def users(db: MemoryDocumentClient) -> FirestoreUserRepository:
    return FirestoreUserRepository(db)


async def _scope(firms: FirestoreFirmRepository, email: str) -> FirmScope:
    firm = await firms.create_firm(FirmCreate(name="Firm", email=email))
    return FirmScope(firm.id)


async def test_firm_email_is_unique(firms: FirestoreFirmRepository) -> None:
    await firms.create_firm(FirmCreate(name="One", email="Office@Firm.test"))
    assert await firms.email_exists("office@firm.test")
    with pytest.raises(ConflictException) as exc:
        await firms.create_firm(FirmCreate(name="Two", email="office@firm.test"))
    assert exc.value.message == "Firm already exists with this email"


async def test_delete_firm_releases_email(firms: FirestoreFirmRepository) -> None:
    firm = await firms.create_firm(FirmCreate(name="One", email="office@firm.test"))
    await firms.delete_firm(firm.id)
    assert await firms.get_by_id(firm.id) is None
    assert not await firms.email_exists("office@firm.test")


async def test_create_user_normalizes_email(
    firms: FirestoreFirmRepository, users: FirestoreUserRepository
) -> None:
    scope = await _scope(firms, "a@firm.test")
    user = await users.create_user(scope, UserCreate(name="Ann", email=" Ann@Firm.Test "), "pw")
    assert user.email == "ann@firm.test"
    assert user.firm_id == scope.firm_id
    assert user.join_date is not None

    found = await users.get_by_email("ANN@firm.test")
    assert found is not None
    assert found.id == user.id


async def test_user_email_unique_across_firms(
    firms: FirestoreFirmRepository, users: FirestoreUserRepository
) -> None:
    scope_a = await _scope(firms, "a@firm.test")
    scope_b = await _scope(firms, "b@firm.test")
    await users.create_user(scope_a, UserCreate(name="Ann", email="ann@x.io"), "pw")
    with pytest.raises(ConflictException) as exc:
        await users.create_user(scope_b, UserCreate(name="Ann", email="ann@x.io"), "pw")
    assert exc.value.to_dict() == {
        "error": "User already exists with this email",
        "field": "email",
    }


async def test_authenticate(
    firms: FirestoreFirmRepository, users: FirestoreUserRepository
) -> None:
    scope = await _scope(firms, "a@firm.test")
    user = await users.create_user(scope, UserCreate(name="Ann", email="ann@x.io"), "s3cret")

    assert (await users.authenticate("ann@x.io", "s3cret")).id == user.id
    assert await users.authenticate("ann@x.io", "wrong") is None
    assert await users.authenticate("nobody@x.io", "s3cret") is None

    await users.update_scoped(scope, user.id, {"status": UserStatus.INACTIVE})
    assert await users.authenticate("ann@x.io", "s3cret") is None


async def test_password_hash_never_in_result(
    firms: FirestoreFirmRepository, users: FirestoreUserRepository
) -> None:
    scope = await _scope(firms, "a@firm.test")
    user = await users.create_user(scope, UserCreate(name="Ann", email="ann@x.io"), "pw")
    assert not hasattr(user, "password_hash")
    updated = await users.update_scoped(scope, user.id, {"password_hash": "x", "name": "Anne"})
    assert updated.name == "Anne"
    assert (await users.authenticate("ann@x.io", "pw")) is not None


async def test_email_change_moves_claim(
    firms: FirestoreFirmRepository, users: FirestoreUserRepository
) -> None:
    scope = await _scope(firms, "a@firm.test")
    ann = await users.create_user(scope, UserCreate(name="Ann", email="ann@x.io"), "pw")
    bob = await users.create_user(scope, UserCreate(name="Bob", email="bob@x.io"), "pw")

    with pytest.raises(ConflictException):
        await users.update_scoped(scope, ann.id, {"email": "bob@x.io"})

    updated = await users.update_scoped(scope, ann.id, {"email": "Anne@X.io"})
    assert updated.email == "anne@x.io"
    # The old address is free again.
    await users.update_scoped(scope, bob.id, {"email": "ann@x.io"})
    assert (await users.get_by_email("ann@x.io")).id == bob.id


async def test_delete_releases_email(
    firms: FirestoreFirmRepository, users: FirestoreUserRepository
) -> None:
    scope = await _scope(firms, "a@firm.test")
    ann = await users.create_user(scope, UserCreate(name="Ann", email="ann@x.io"), "pw")
    assert await users.delete_scoped(scope, ann.id)
    assert await users.get_by_id(ann.id) is None
    assert not await users.delete_scoped(scope, ann.id)
    await users.create_user(scope, UserCreate(name="Ann", email="ann@x.io"), "pw")


async def test_scoped_access_hides_other_firms(
    firms: FirestoreFirmRepository, users: FirestoreUserRepository
) -> None:
    scope_a = await _scope(firms, "a@firm.test")
    scope_b = await _scope(firms, "b@firm.test")
    ann = await users.create_user(scope_a, UserCreate(name="Ann", email="ann@x.io"), "pw")

    assert await users.get_scoped(scope_b, ann.id) is None
    assert await users.update_scoped(scope_b, ann.id, {"name": "X"}) is None
    assert not await users.delete_scoped(scope_b, ann.id)
    assert await users.get_refs(scope_b, {ann.id}) == {}
    assert await users.count_by_firm(scope_a) == 1
    assert await users.count_by_firm(scope_b) == 0
    assert (await users.get_scoped(scope_a, ann.id)).name == "Ann"


async def test_list_by_firm_filters_status(
    firms: FirestoreFirmRepository, users: FirestoreUserRepository
) -> None:
    scope = await _scope(firms, "a@firm.test")
    await users.create_user(scope, UserCreate(name="Ann", email="ann@x.io"), "pw")
    await users.create_user(
        scope,
        UserCreate(name="Bob", email="bob@x.io", status=UserStatus.INACTIVE),
        "pw",
    )
    inactive = await users.list_by_firm(scope, status=UserStatus.INACTIVE)
    assert [u.name for u in inactive] == ["Bob"]
    assert len(await users.list_by_firm(scope)) == 2
