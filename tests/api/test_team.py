"""Tests for the team API."""

from httpx import AsyncClient


async def _add(client: AsyncClient, headers: dict, **fields) -> dict:
    payload = {"name": "Alex Associate", "email": "alex@firm.test", **fields}
    response = await client.post("/api/team", json=payload, headers=headers)
    assert response.status_code == 200, response.text
    return response.json()


async def test_list_includes_founder(client: AsyncClient, firm_a) -> None:
    response = await client.get("/api/team", headers=firm_a.headers)
    assert response.status_code == 200
    members = response.json()["teamMembers"]
    assert [m["_id"] for m in members] == [firm_a.user_id]
    assert members[0]["role"] == "partner"


async def test_add_member_returns_temp_password_once(client: AsyncClient, firm_a) -> None:
    body = await _add(client, firm_a.headers, role="paralegal", specialization=["Tax"])
    assert body["success"] is True
    temp = body["tempPassword"]
    assert len(temp) == 8
    assert temp.isalnum()
    member = body["member"]
    assert member["role"] == "paralegal"
    assert member["status"] == "active"
    assert member["specializations"] == ["Tax"]
    assert member["firmId"] == firm_a.firm_id
    assert member["joinDate"]
    assert not {"password", "passwordHash", "tempPassword"} & set(member)

    listed = await client.get("/api/team", headers=firm_a.headers)
    assert all("tempPassword" not in m for m in listed.json()["teamMembers"])

    signin = await client.post(
        "/api/auth/signin", json={"email": "alex@firm.test", "password": temp}
    )
    assert signin.status_code == 200
    assert signin.json()["user"]["firm"]["currentUsers"] == 2


async def test_add_member_duplicate_email_returns_400(
    client: AsyncClient, firm_a, firm_b
) -> None:
    response = await client.post(
        "/api/team",
        json={"name": "Dup", "email": firm_b.admin_email},
        headers=firm_a.headers,
    )
    assert response.status_code == 400
    assert response.json()["error"] == "User already exists with this email"


async def test_add_member_requires_name(client: AsyncClient, firm_a) -> None:
    response = await client.post(
        "/api/team", json={"email": "noname@firm.test"}, headers=firm_a.headers
    )
    assert response.status_code == 400


async def test_update_member(client: AsyncClient, firm_a) -> None:
    member = (await _add(client, firm_a.headers))["member"]
    response = await client.put(
        f"/api/team/{member['_id']}",
        json={"department": "Litigation", "role": "senior_associate"},
        headers=firm_a.headers,
    )
    assert response.status_code == 200
    updated = response.json()["member"]
    assert updated["department"] == "Litigation"
    assert updated["role"] == "senior_associate"


async def test_change_email_releases_old_address(client: AsyncClient, firm_a) -> None:
    member = (await _add(client, firm_a.headers))["member"]
    moved = await client.put(
        f"/api/team/{member['_id']}",
        json={"email": "alex.new@firm.test"},
        headers=firm_a.headers,
    )
    assert moved.status_code == 200
    assert moved.json()["member"]["email"] == "alex.new@firm.test"

    reuse = await client.post(
        "/api/team",
        json={"name": "Second Alex", "email": "alex@firm.test"},
        headers=firm_a.headers,
    )
    assert reuse.status_code == 200


async def test_change_email_to_taken_address_returns_400(client: AsyncClient, firm_a) -> None:
    member = (await _add(client, firm_a.headers))["member"]
    response = await client.put(
        f"/api/team/{member['_id']}",
        json={"email": firm_a.admin_email},
        headers=firm_a.headers,
    )
    assert response.status_code == 400
    assert response.json()["error"] == "User already exists with this email"


async def test_cannot_delete_self(client: AsyncClient, firm_a) -> None:
    response = await client.delete(f"/api/team/{firm_a.user_id}", headers=firm_a.headers)
    assert response.status_code == 400
    assert response.json() == {"error": "Cannot delete your own account"}


async def test_member_cannot_delete_self_whatever_the_role(client: AsyncClient, firm_a) -> None:
    created = await _add(client, firm_a.headers, role="paralegal")
    signin = await client.post(
        "/api/auth/signin",
        json={"email": "alex@firm.test", "password": created["tempPassword"]},
    )
    assert signin.status_code == 200
    assert signin.json()["user"]["role"] == "paralegal"
    headers = {"Authorization": f"Bearer {signin.json()['token']}"}

    response = await client.delete(f"/api/team/{created['member']['_id']}", headers=headers)
    assert response.status_code == 400
    assert response.json() == {"error": "Cannot delete your own account"}

    team = await client.get("/api/team", headers=firm_a.headers)
    assert len(team.json()["teamMembers"]) == 2


async def test_delete_member_frees_seat_and_email(client: AsyncClient, firm_a) -> None:
    member = (await _add(client, firm_a.headers))["member"]
    response = await client.delete(f"/api/team/{member['_id']}", headers=firm_a.headers)
    assert response.status_code == 200
    assert response.json()["message"] == "Team member deleted successfully"

    me = await client.get("/api/auth/me", headers=firm_a.headers)
    assert me.json()["user"]["firm"]["currentUsers"] == 1

    again = await _add(client, firm_a.headers)
    assert again["member"]["email"] == "alex@firm.test"


async def test_delete_missing_member_returns_404(client: AsyncClient, firm_a) -> None:
    response = await client.delete("/api/team/nope", headers=firm_a.headers)
    assert response.status_code == 404
    assert response.json() == {"error": "Team member not found"}


async def test_list_filters(client: AsyncClient, firm_a) -> None:
    await _add(client, firm_a.headers, department="Tax")
    await _add(
        client, firm_a.headers, name="Ivy", email="ivy@firm.test", status="inactive"
    )
    tax = await client.get("/api/team?search=tax", headers=firm_a.headers)
    assert [m["name"] for m in tax.json()["teamMembers"]] == ["Alex Associate"]

    inactive = await client.get("/api/team?status=inactive", headers=firm_a.headers)
    assert [m["name"] for m in inactive.json()["teamMembers"]] == ["Ivy"]
