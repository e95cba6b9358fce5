"""Repository factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.ledger.api.dependencies.db import DBSession
from src.ledger.repositories import (
    AssigneeRepository,
    ClientRepository,
    MilestoneRepository,
    PaymentRepository,
    ProjectRepository,
    ProjectTypeRepository,
    TimeEntryRepository,
)


def get_client_repository(session: DBSession) -> ClientRepository:
    return ClientRepository(session)


def get_project_type_repository(session: DBSession) -> ProjectTypeRepository:
    return ProjectTypeRepository(session)


def get_project_repository(session: DBSession) -> ProjectRepository:
    return ProjectRepository(session)


def get_milestone_repository(session: DBSession) -> MilestoneRepository:
    return MilestoneRepository(session)


def get_payment_repository(session: DBSession) -> PaymentRepository:
    return PaymentRepository(session)


def get_assignee_repository(session: DBSession) -> AssigneeRepository:
    return AssigneeRepository(session)


def get_time_entry_repository(session: DBSession) -> TimeEntryRepository:
    return TimeEntryRepository(session)


ClientRepo = Annotated[ClientRepository, Depends(get_client_repository)]
ProjectTypeRepo = Annotated[ProjectTypeRepository, Depends(get_project_type_repository)]
ProjectRepo = Annotated[ProjectRepository, Depends(get_project_repository)]
MilestoneRepo = Annotated[MilestoneRepository, Depends(get_milestone_repository)]
PaymentRepo = Annotated[PaymentRepository, Depends(get_payment_repository)]
AssigneeRepo = Annotated[AssigneeRepository, Depends(get_assignee_repository)]
TimeEntryRepo = Annotated[TimeEntryRepository, Depends(get_time_entry_repository)]
