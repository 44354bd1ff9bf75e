"""Cross-firm isolation: records of one firm are invisible to another.

A foreign ID behaves exactly like a missing one (404) and the record is left
untouched.
"""

from httpx import AsyncClient


async def test_foreign_case_cannot_be_updated_or_deleted(
    client: AsyncClient, firm_a, firm_b
) -> None:
    created = await client.post(
        "/api/cases",
        json={"title": "Secret", "clientName": "A", "caseType": "B"},
        headers=firm_a.headers,
    )
    case_id = created.json()["case"]["_id"]

    update = await client.put(
        f"/api/cases/{case_id}", json={"title": "Hijacked"}, headers=firm_b.headers
    )
    assert update.status_code == 404
    assert update.json() == {"error": "Case not found"}

    delete = await client.delete(f"/api/cases/{case_id}", headers=firm_b.headers)
    assert delete.status_code == 404

    listed_b = await client.get("/api/cases", headers=firm_b.headers)
    assert listed_b.json()["cases"] == []

    listed_a = await client.get("/api/cases", headers=firm_a.headers)
    assert [c["title"] for c in listed_a.json()["cases"]] == ["Secret"]


async def test_foreign_event_cannot_be_updated_or_deleted(
    client: AsyncClient, firm_a, firm_b
) -> None:
    created = await client.post(
        "/api/calendar",
        json={
            "title": "Board meeting",
            "startDate": "2030-01-10",
            "startTime": "08:00",
            "endTime": "09:00",
        },
        headers=firm_a.headers,
    )
    event_id = created.json()["event"]["_id"]

    update = await client.put(
        f"/api/calendar/{event_id}", json={"title": "Moved"}, headers=firm_b.headers
    )
    assert update.status_code == 404
    assert update.json() == {"error": "Calendar event not found"}
    assert (await client.delete(f"/api/calendar/{event_id}", headers=firm_b.headers)).status_code == 404

    listed_b = await client.get("/api/calendar", headers=firm_b.headers)
    assert listed_b.json()["events"] == []
    listed_a = await client.get("/api/calendar", headers=firm_a.headers)
    assert [e["title"] for e in listed_a.json()["events"]] == ["Board meeting"]


async def test_foreign_member_cannot_be_updated_or_deleted(
    client: AsyncClient, firm_a, firm_b
) -> None:
    update = await client.put(
        f"/api/team/{firm_a.user_id}", json={"name": "Renamed"}, headers=firm_b.headers
    )
    assert update.status_code == 404
    assert update.json() == {"error": "Team member not found"}

    delete = await client.delete(f"/api/team/{firm_a.user_id}", headers=firm_b.headers)
    assert delete.status_code == 404

    team_b = await client.get("/api/team", headers=firm_b.headers)
    assert [m["_id"] for m in team_b.json()["teamMembers"]] == [firm_b.user_id]

    me = await client.get("/api/auth/me", headers=firm_a.headers)
    assert me.json()["user"]["name"] == "Pat Partner"


async def test_foreign_case_cannot_be_linked_on_update(
    client: AsyncClient, firm_a, firm_b
) -> None:
    foreign = await client.post(
        "/api/cases",
        json={"title": "B case", "clientName": "B", "caseType": "B"},
        headers=firm_b.headers,
    )
    event = await client.post(
        "/api/calendar",
        json={"title": "A event", "startDate": "2030-02-01", "startTime": "10:00", "endTime": "11:00"},
        headers=firm_a.headers,
    )
    response = await client.put(
        f"/api/calendar/{event.json()['event']['_id']}",
        json={"caseId": foreign.json()["case"]["_id"]},
        headers=firm_a.headers,
    )
    assert response.status_code == 404
    assert response.json() == {"error": "Case not found"}
