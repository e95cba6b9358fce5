"""Weekly, monthly and ranged time summaries over HTTP."""

from datetime import datetime
from decimal import Decimal

import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from tests.factories import TimeEntryFactory
from tests.helpers import create_assignee, create_project

pytestmark = pytest.mark.integration


@pytest.fixture
async def logged_week(db_session: AsyncSession):
    """Hours logged around the week of Monday 2024-06-10."""
    _, _, hourly = await create_project(db_session, hourly_rate=Decimal("50"))
    _, _, fixed = await create_project(db_session)
    alice = await create_assignee(db_session, name="Alice")
    bob = await create_assignee(db_session, name="Bob")

    def entry(project, assignee, when, hours):
        return TimeEntryFactory.build(
            project_id=project.id, assignee_id=assignee.id, date=when, hours=Decimal(hours)
        )

    db_session.add_all(
        [
            entry(hourly, alice, datetime(2024, 6, 10, 0, 0), "2"),
            entry(hourly, bob, datetime(2024, 6, 12, 14, 0), "1.5"),
            entry(fixed, alice, datetime(2024, 6, 16, 23, 59, 59), "3"),
            # Outside the week
            entry(hourly, alice, datetime(2024, 6, 9, 23, 59, 59), "8"),
            entry(hourly, bob, datetime(2024, 6, 17, 0, 0), "8"),
        ]
    )
    await db_session.commit()
    return {"hourly": hourly, "fixed": fixed, "alice": alice, "bob": bob}


class TestWeekly:
    async def test_week_containing_reference_date(self, client: AsyncClient, logged_week):
        response = await client.get(
            "/api/v1/time-summary/weekly", params={"date": "2024-06-12T10:00:00"}
        )

        assert response.status_code == 200
        body = response.json()
        assert body["period_start"] == "2024-06-10T00:00:00"
        assert body["period_end"] == "2024-06-16T23:59:59.999000"
        assert body["overall_total"] == {"total_hours": 6.5, "total_amount": 175.0}
        assert len(body["entries"]) == 3

        projects = {p["project"]["id"]: p for p in body["project_totals"]}
        hourly = projects[str(logged_week["hourly"].id)]
        assert hourly["total_hours"] == 3.5
        assert hourly["total_amount"] == 175.0
        fixed = projects[str(logged_week["fixed"].id)]
        assert fixed["total_hours"] == 3.0
        assert fixed["total_amount"] == 0.0

        assignees = {a["assignee"]["name"]: a["total_hours"] for a in body["assignee_totals"]}
        assert assignees == {"Alice": 5.0, "Bob": 1.5}

    async def test_summary_is_not_cached(self, client: AsyncClient, logged_week):
        response = await client.get(
            "/api/v1/time-summary/weekly", params={"date": "2024-06-12T10:00:00"}
        )

        assert response.headers["cache-control"] == "no-store"


class TestMonthly:
    async def test_whole_month(self, client: AsyncClient, logged_week):
        response = await client.get(
            "/api/v1/time-summary/monthly", params={"date": "2024-06-30T12:00:00"}
        )

        body = response.json()
        assert body["period_start"] == "2024-06-01T00:00:00"
        assert body["period_end"] == "2024-06-30T23:59:59.999000"
        assert body["overall_total"]["total_hours"] == 22.5

    async def test_empty_month(self, client: AsyncClient, logged_week):
        response = await client.get(
            "/api/v1/time-summary/monthly", params={"date": "2024-02-10T00:00:00"}
        )

        body = response.json()
        assert body["period_end"] == "2024-02-29T23:59:59.999000"
        assert body["project_totals"] == []
        assert body["assignee_totals"] == []
        assert body["overall_total"] == {"total_hours": 0.0, "total_amount": 0.0}


class TestRange:
    async def test_explicit_range(self, client: AsyncClient, logged_week):
        response = await client.get(
            "/api/v1/time-summary",
            params={"start": "2024-06-12T00:00:00", "end": "2024-06-17T00:00:00"},
        )

        assert response.json()["overall_total"]["total_hours"] == 12.5

    async def test_start_after_end_rejected(self, client: AsyncClient):
        response = await client.get(
            "/api/v1/time-summary",
            params={"start": "2024-06-20T00:00:00", "end": "2024-06-10T00:00:00"},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "Validation error"
