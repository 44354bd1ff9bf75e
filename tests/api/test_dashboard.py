"""Tests for the dashboard API (aggregation over the caller's firm only)."""

from datetime import UTC, datetime, timedelta

from httpx import AsyncClient


def _iso(dt: datetime) -> str:
    return dt.isoformat().replace("+00:00", "Z")


async def test_empty_dashboard(client: AsyncClient, firm_a) -> None:
    response = await client.get("/api/dashboard", headers=firm_a.headers)
    assert response.status_code == 200
    body = response.json()
    assert body["stats"] == {
        "activeCases": 0,
        "teamMembers": 1,
        "upcomingDeadlines": 0,
        "totalBillableHours": 0,
    }
    assert body["recentCases"] == []
    assert body["upcomingEvents"] == []
    assert body["alerts"] == []


async def test_dashboard_aggregates(client: AsyncClient, firm_a, firm_b) -> None:
    now = datetime.now(UTC)
    urgent = await client.post(
        "/api/cases",
        json={
            "title": "Urgent filing",
            "clientName": "Acme",
            "caseType": "Corporate",
            "priority": "high",
            "dueDate": _iso(now + timedelta(days=1)),
            "billableHours": 3,
        },
        headers=firm_a.headers,
    )
    assert urgent.status_code == 200
    await client.post(
        "/api/cases",
        json={
            "title": "Ongoing matter",
            "clientName": "Beta",
            "caseType": "Civil",
            "status": "active",
            "dueDate": _iso(now + timedelta(days=5)),
            "billableHours": 4.5,
        },
        headers=firm_a.headers,
    )
    tomorrow = (now + timedelta(days=1)).date().isoformat()
    await client.post(
        "/api/calendar",
        json={
            "title": "Client call",
            "startDate": f"{tomorrow}T12:00:00Z",
            "startTime": "12:00",
            "endTime": "13:00",
            "priority": "high",
        },
        headers=firm_a.headers,
    )
    # Another firm's records never leak in.
    await client.post(
        "/api/cases",
        json={"title": "Foreign", "clientName": "X", "caseType": "Y", "status": "active"},
        headers=firm_b.headers,
    )

    response = await client.get("/api/dashboard", headers=firm_a.headers)
    assert response.status_code == 200
    body = response.json()
    assert body["stats"] == {
        "activeCases": 1,
        "teamMembers": 1,
        "upcomingDeadlines": 2,
        "totalBillableHours": 7.5,
    }
    assert [c["title"] for c in body["recentCases"]] == ["Ongoing matter", "Urgent filing"]
    assert [e["title"] for e in body["upcomingEvents"]] == ["Client call"]

    alerts = {(a["type"], a["title"]) for a in body["alerts"]}
    assert alerts == {
        ("deadline", "Case deadline approaching"),
        ("case", "High priority case pending"),
        ("event", "Client Meeting"),
    }
    event_alert = next(a for a in body["alerts"] if a["type"] == "event")
    assert event_alert["priority"] == "high"
    assert event_alert["description"].endswith("at 12:00")
