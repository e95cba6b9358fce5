"""Milestone endpoints and the overdue listing."""

from decimal import Decimal

import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from tests.factories import PaymentFactory
from tests.helpers import create_milestone, create_project

pytestmark = pytest.mark.integration

MISSING_ID = "00000000-0000-4000-8000-000000000000"


class TestMilestones:
    async def test_create_keeps_supplied_status(
        self, client: AsyncClient, db_session: AsyncSession
    ):
        _, _, project = await create_project(db_session)

        response = await client.post(
            "/api/v1/milestones",
            json={
                "name": "Kickoff",
                "project_id": str(project.id),
                "amount": "1000",
                "due_date": "2020-01-01T00:00:00",
            },
        )

        assert response.status_code == 201, response.text
        body = response.json()
        # Past due, but status is only derived when payments change
        assert body["status"] == "pending"
        assert body["payments"] == []
        assert body["total_paid"] == 0.0
        assert body["remaining"] == 1000.0

    async def test_create_for_unknown_project_rejected(self, client: AsyncClient):
        response = await client.post(
            "/api/v1/milestones",
            json={
                "name": "Orphan",
                "project_id": MISSING_ID,
                "amount": "10",
                "due_date": "2030-01-01T00:00:00",
            },
        )

        assert response.status_code == 400
        assert response.json()["error"] == "Validation error"

    async def test_aware_due_date_stored_as_utc(
        self, client: AsyncClient, db_session: AsyncSession
    ):
        _, _, project = await create_project(db_session)

        response = await client.post(
            "/api/v1/milestones",
            json={
                "name": "Offset",
                "project_id": str(project.id),
                "amount": "10",
                "due_date": "2030-01-01T02:00:00+02:00",
            },
        )

        assert response.json()["due_date"] == "2030-01-01T00:00:00"

    async def test_list_includes_project_and_client(
        self, client: AsyncClient, db_session: AsyncSession
    ):
        owner, _, project = await create_project(db_session)
        await create_milestone(db_session, project)

        (item,) = (await client.get("/api/v1/milestones")).json()

        assert item["project"]["id"] == str(project.id)
        assert item["project"]["client"]["id"] == str(owner.id)

    async def test_delete_removes_payments(self, client: AsyncClient, db_session: AsyncSession):
        _, _, project = await create_project(db_session)
        milestone = await create_milestone(db_session, project)
        db_session.add(PaymentFactory.build(milestone_id=milestone.id))
        await db_session.commit()

        response = await client.delete(f"/api/v1/milestones/{milestone.id}")

        assert response.status_code == 204
        assert (await client.get("/api/v1/payments")).json() == []


class TestRecomputeStatus:
    async def test_past_due_unpaid_becomes_overdue(
        self, client: AsyncClient, db_session: AsyncSession
    ):
        _, _, project = await create_project(db_session)
        milestone = await create_milestone(db_session, project, past_due=True)

        response = await client.post(f"/api/v1/milestones/{milestone.id}/recompute-status")

        assert response.status_code == 200
        assert response.json() == {"id": str(milestone.id), "status": "overdue"}
        stored = (await client.get(f"/api/v1/milestones/{milestone.id}")).json()
        assert stored["status"] == "overdue"

    async def test_fully_paid_overrides_manual_status(
        self, client: AsyncClient, db_session: AsyncSession
    ):
        _, _, project = await create_project(db_session)
        milestone = await create_milestone(
            db_session, project, amount=Decimal("200"), status="overdue"
        )
        db_session.add(PaymentFactory.build(milestone_id=milestone.id, amount=Decimal("200")))
        await db_session.commit()

        response = await client.post(f"/api/v1/milestones/{milestone.id}/recompute-status")

        assert response.json()["status"] == "paid"

    async def test_unknown_milestone_is_404(self, client: AsyncClient):
        response = await client.post(f"/api/v1/milestones/{MISSING_ID}/recompute-status")

        assert response.status_code == 404
        assert response.json()["error"] == "Not found"


class TestOverdue:
    async def test_lists_past_due_pending_and_overdue_only(
        self, client: AsyncClient, db_session: AsyncSession
    ):
        _, _, project = await create_project(db_session)
        late = await create_milestone(db_session, project, past_due=True, amount=Decimal("500"))
        flagged = await create_milestone(db_session, project, status="overdue")
        await create_milestone(db_session, project)
        paid = await create_milestone(db_session, project, past_due=True, status="paid")
        db_session.add(PaymentFactory.build(milestone_id=late.id, amount=Decimal("150")))
        await db_session.commit()

        response = await client.get("/api/v1/overdue")

        assert response.status_code == 200
        body = response.json()
        assert [m["id"] for m in body] == [str(late.id), str(flagged.id)]
        assert str(paid.id) not in {m["id"] for m in body}
        assert body[0]["total_paid"] == 150.0
        assert body[0]["remaining"] == 350.0
        assert body[0]["project"]["project_type"]["id"] == str(project.project_type_id)
        assert response.headers["cache-control"] == "no-store"
