"""Pytest configuration and fixtures for lawdesk.

The app runs against the in-memory document store with a fixed signing key,
cheap bcrypt rounds and rate limiting off. Env is set before lawdesk.main is
imported because the app is built at import time.
"""

import os

os.environ["DATABASE_BACKEND"] = "memory"
os.environ["ENVIRONMENT"] = "test"
os.environ["SECRET_KEY"] = "test-secret-key-not-for-production"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["TELEMETRY_ENABLED"] = "false"

import uuid  # noqa: E402
from collections.abc import Awaitable, Callable  # noqa: E402
from dataclasses import dataclass  # noqa: E402
from typing import Any  # noqa: E402

import email_validator  # noqa: E402
import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from lawdesk.core.config import get_settings  # noqa: E402

get_settings.cache_clear()

# Test fixtures use addresses on the reserved "test" domain, which
# email-validator only accepts in its documented test-environment mode.
email_validator.TEST_ENVIRONMENT = True

from lawdesk.infrastructure.firebase.client import close_document_store  # noqa: E402
from lawdesk.main import app  # noqa: E402

ADMIN_PASSWORD = "secret1"


@dataclass
class SignedUpFirm:
    """A firm registered through the API plus its founding partner's session."""

    token: str
    user: dict[str, Any]
    admin_email: str
    firm_email: str

    @property
    def headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"}

    @property
    def firm_id(self) -> str:
        return self.user["firmId"]

    @property
    def user_id(self) -> str:
        return self.user["id"]


@pytest.fixture(autouse=True)
async def fresh_store():
    """Every test starts with an empty in-memory store."""
    await close_document_store()
    yield
    await close_document_store()


@pytest.fixture
async def client() -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def admin_password() -> str:
    return ADMIN_PASSWORD


@pytest.fixture
def make_firm(client: AsyncClient) -> Callable[[str], Awaitable[SignedUpFirm]]:
    """Factory: register a firm with unique emails and return its partner's session."""

    async def _make(name: str = "Smith & Co") -> SignedUpFirm:
        suffix = uuid.uuid4().hex[:8]
        firm_email = f"office-{suffix}@firm.test"
        admin_email = f"partner-{suffix}@firm.test"
        response = await client.post(
            "/api/auth/signup",
            json={
                "firmName": name,
                "email": firm_email,
                "adminEmail": admin_email,
                "adminName": "Pat Partner",
                "password": ADMIN_PASSWORD,
            },
        )
        assert response.status_code == 200, response.text
        body = response.json()
        return SignedUpFirm(
            token=body["token"],
            user=body["user"],
            admin_email=admin_email,
            firm_email=firm_email,
        )

    return _make


@pytest.fixture
async def firm_a(make_firm) -> SignedUpFirm:
    return await make_firm("Alpha Legal")


@pytest.fixture
async def firm_b(make_firm) -> SignedUpFirm:
    return await make_firm("Beta Law")
