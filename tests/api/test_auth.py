"""Tests for sign up, sign in and /auth/me."""

from datetime import timedelta

from httpx import AsyncClient

from lawdesk.infrastructure.security.jwt import create_access_token


async def test_signup_creates_firm_and_founding_partner(client: AsyncClient) -> None:
    response = await client.post(
        "/api/auth/signup",
        json={
            "firmName": "Smith & Co",
            "email": "office@smith.test",
            "adminEmail": "a@x.io",
            "password": "secret1",
        },
    )
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["token"]
    user = body["user"]
    assert user["role"] == "partner"
    assert user["email"] == "a@x.io"
    assert user["name"] == "a"
    assert user["department"] == "Administration"
    assert len(user["permissions"]) == 8
    assert {p["category"] for p in user["permissions"]} == {
        "cases", "documents", "team", "calendar", "settings",
    }
    assert user["firm"]["name"] == "Smith & Co"
    assert user["firm"]["currentUsers"] == 1
    assert user["firm"]["maxUsers"] == 5
    assert user["firmId"] == user["firm"]["id"]
    assert "password" not in user
    assert "passwordHash" not in user


async def test_signup_missing_field_returns_400(client: AsyncClient) -> None:
    response = await client.post(
        "/api/auth/signup",
        json={"firmName": "X", "email": "x@x.test", "password": "secret1"},
    )
    assert response.status_code == 400
    assert response.json()["error"].startswith("adminEmail")


async def test_signup_malformed_json_returns_400(client: AsyncClient) -> None:
    response = await client.post(
        "/api/auth/signup",
        content=b'{"firmName": "X", "email": ',
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid JSON body"}


async def test_signup_duplicate_admin_email_leaves_no_firm(
    client: AsyncClient, firm_a
) -> None:
    response = await client.post(
        "/api/auth/signup",
        json={
            "firmName": "Copycat",
            "email": "copycat@firm.test",
            "adminEmail": firm_a.admin_email,
            "password": "secret1",
        },
    )
    assert response.status_code == 400
    assert response.json()["error"] == "User already exists with this email"

    # The firm email was never claimed, so it is still free.
    retry = await client.post(
        "/api/auth/signup",
        json={
            "firmName": "Copycat",
            "email": "copycat@firm.test",
            "adminEmail": "someone-new@firm.test",
            "password": "secret1",
        },
    )
    assert retry.status_code == 200


async def test_signup_duplicate_firm_email_returns_400(client: AsyncClient, firm_a) -> None:
    response = await client.post(
        "/api/auth/signup",
        json={
            "firmName": "Other",
            "email": firm_a.firm_email,
            "adminEmail": "fresh@firm.test",
            "password": "secret1",
        },
    )
    assert response.status_code == 400
    assert response.json() == {
        "error": "Firm already exists with this email",
        "field": "email",
    }
    signin = await client.post(
        "/api/auth/signin", json={"email": "fresh@firm.test", "password": "secret1"}
    )
    assert signin.status_code == 401


async def test_signup_email_is_case_insensitive(client: AsyncClient, firm_a) -> None:
    response = await client.post(
        "/api/auth/signup",
        json={
            "firmName": "Shouty",
            "email": "shouty@firm.test",
            "adminEmail": firm_a.admin_email.upper(),
            "password": "secret1",
        },
    )
    assert response.status_code == 400


async def test_signin_success(client: AsyncClient, firm_a, admin_password) -> None:
    response = await client.post(
        "/api/auth/signin",
        json={"email": firm_a.admin_email, "password": admin_password},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["user"]["id"] == firm_a.user_id
    assert body["user"]["firm"]["currentUsers"] == 1


async def test_signin_wrong_password_returns_401(client: AsyncClient, firm_a) -> None:
    response = await client.post(
        "/api/auth/signin",
        json={"email": firm_a.admin_email, "password": "wrong-password"},
    )
    assert response.status_code == 401
    assert response.json() == {"error": "Invalid credentials"}


async def test_signin_unknown_email_returns_401(client: AsyncClient) -> None:
    response = await client.post(
        "/api/auth/signin",
        json={"email": "nobody@nowhere.test", "password": "whatever"},
    )
    assert response.status_code == 401
    assert response.json() == {"error": "Invalid credentials"}


async def test_signin_missing_password_returns_400(client: AsyncClient) -> None:
    response = await client.post("/api/auth/signin", json={"email": "a@x.io"})
    assert response.status_code == 400
    assert "password" in response.json()["error"]


async def test_signin_inactive_member_returns_401(client: AsyncClient, firm_a) -> None:
    created = await client.post(
        "/api/team",
        json={"name": "Ina Active", "email": "ina@firm.test"},
        headers=firm_a.headers,
    )
    member = created.json()["member"]
    temp_password = created.json()["tempPassword"]
    await client.put(
        f"/api/team/{member['_id']}",
        json={"status": "inactive"},
        headers=firm_a.headers,
    )
    response = await client.post(
        "/api/auth/signin",
        json={"email": "ina@firm.test", "password": temp_password},
    )
    assert response.status_code == 401


async def test_me_returns_profile(client: AsyncClient, firm_a) -> None:
    response = await client.get("/api/auth/me", headers=firm_a.headers)
    assert response.status_code == 200
    user = response.json()["user"]
    assert user["id"] == firm_a.user_id
    assert user["firm"]["email"] == firm_a.firm_email


async def test_me_without_token_returns_401(client: AsyncClient) -> None:
    response = await client.get("/api/auth/me")
    assert response.status_code == 401
    assert response.json() == {"error": "Access token required"}


async def test_me_with_garbage_token_returns_403(client: AsyncClient) -> None:
    response = await client.get(
        "/api/auth/me", headers={"Authorization": "Bearer not-a-jwt"}
    )
    assert response.status_code == 403
    assert response.json() == {"error": "Invalid token"}


async def test_me_with_expired_token_returns_403(client: AsyncClient, firm_a) -> None:
    token = create_access_token(firm_a.user_id, expires_delta=timedelta(seconds=-5))
    response = await client.get(
        "/api/auth/me", headers={"Authorization": f"Bearer {token}"}
    )
    assert response.status_code == 403
    assert response.json() == {"error": "Invalid token"}


async def test_token_for_deleted_user_returns_404(client: AsyncClient, firm_a) -> None:
    created = await client.post(
        "/api/team",
        json={"name": "Short Stay", "email": "short@firm.test"},
        headers=firm_a.headers,
    )
    member_id = created.json()["member"]["_id"]
    member_token = create_access_token(member_id)
    await client.delete(f"/api/team/{member_id}", headers=firm_a.headers)

    response = await client.get(
        "/api/auth/me", headers={"Authorization": f"Bearer {member_token}"}
    )
    assert response.status_code == 404
    assert response.json() == {"error": "User not found"}
