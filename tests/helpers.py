"""Test helper functions for common data creation patterns."""

from decimal import Decimal

from sqlalchemy.ext.asyncio import AsyncSession
from structlog.testing import CapturingLogger

from src.ledger.models import Assignee, Client, Milestone, Project, ProjectType
from tests.factories import (
    AssigneeFactory,
    ClientFactory,
    MilestoneFactory,
    ProjectFactory,
    ProjectTypeFactory,
)


async def create_project(
    session: AsyncSession, hourly_rate: Decimal | None = None, **project_kwargs
) -> tuple[Client, ProjectType, Project]:
    """Create a client, a project type and a project for them.

    The project is hourly when ``hourly_rate`` is given, fixed otherwise.
    """
    client = ClientFactory.build()
    project_type = ProjectTypeFactory.build()
    session.add_all([client, project_type])
    await session.flush()

    refs = {"client_id": client.id, "project_type_id": project_type.id, **project_kwargs}
    if hourly_rate is not None:
        project = ProjectFactory.hourly(hourly_rate, **refs)
    else:
        project = ProjectFactory.build(**refs)
    session.add(project)
    await session.commit()
    return client, project_type, project


async def create_milestone(
    session: AsyncSession, project: Project, past_due: bool = False, **kwargs
) -> Milestone:
    """Create a milestone on ``project``; due next week unless ``past_due``."""
    if past_due:
        milestone = MilestoneFactory.past_due(project_id=project.id, **kwargs)
    else:
        milestone = MilestoneFactory.build(project_id=project.id, **kwargs)
    session.add(milestone)
    await session.commit()
    return milestone


async def create_assignee(session: AsyncSession, **kwargs) -> Assignee:
    assignee = AssigneeFactory.build(**kwargs)
    session.add(assignee)
    await session.commit()
    return assignee


def logged_events(cap_logger: CapturingLogger) -> list[str]:
    """Event names captured so far, in order."""
    return [call.kwargs["event"] for call in cap_logger.calls]
