"""Service factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.ledger.api.dependencies.db import DBSession
from src.ledger.api.dependencies.repositories import (
    AssigneeRepo,
    ClientRepo,
    MilestoneRepo,
    PaymentRepo,
    ProjectRepo,
    ProjectTypeRepo,
    TimeEntryRepo,
)
from src.ledger.services import (
    AssigneeService,
    ClientService,
    MilestoneService,
    PaymentService,
    ProjectService,
    ProjectTypeService,
    TimeEntryService,
    TimeSummaryService,
)


def get_client_service(client_repo: ClientRepo, session: DBSession) -> ClientService:
    return ClientService(client_repo, session)


def get_project_type_service(
    project_type_repo: ProjectTypeRepo, session: DBSession
) -> ProjectTypeService:
    return ProjectTypeService(project_type_repo, session)


def get_project_service(
    project_repo: ProjectRepo,
    client_repo: ClientRepo,
    project_type_repo: ProjectTypeRepo,
    session: DBSession,
) -> ProjectService:
    """Get project service with the repositories used for reference checks."""
    return ProjectService(project_repo, client_repo, project_type_repo, session)


def get_milestone_service(
    milestone_repo: MilestoneRepo, project_repo: ProjectRepo, session: DBSession
) -> MilestoneService:
    return MilestoneService(milestone_repo, project_repo, session)


def get_payment_service(
    payment_repo: PaymentRepo,
    milestone_repo: MilestoneRepo,
    milestone_service: Annotated[MilestoneService, Depends(get_milestone_service)],
    session: DBSession,
) -> PaymentService:
    """Get payment service sharing the request session with its milestone service."""
    return PaymentService(payment_repo, milestone_repo, milestone_service, session)


def get_assignee_service(assignee_repo: AssigneeRepo, session: DBSession) -> AssigneeService:
    return AssigneeService(assignee_repo, session)


def get_time_entry_service(
    time_entry_repo: TimeEntryRepo,
    project_repo: ProjectRepo,
    assignee_repo: AssigneeRepo,
    session: DBSession,
) -> TimeEntryService:
    return TimeEntryService(time_entry_repo, project_repo, assignee_repo, session)


def get_time_summary_service(time_entry_repo: TimeEntryRepo) -> TimeSummaryService:
    return TimeSummaryService(time_entry_repo)


ClientServiceDep = Annotated[ClientService, Depends(get_client_service)]
ProjectTypeServiceDep = Annotated[ProjectTypeService, Depends(get_project_type_service)]
ProjectServiceDep = Annotated[ProjectService, Depends(get_project_service)]
MilestoneServiceDep = Annotated[MilestoneService, Depends(get_milestone_service)]
PaymentServiceDep = Annotated[PaymentService, Depends(get_payment_service)]
AssigneeServiceDep = Annotated[AssigneeService, Depends(get_assignee_service)]
TimeEntryServiceDep = Annotated[TimeEntryService, Depends(get_time_entry_service)]
TimeSummaryServiceDep = Annotated[TimeSummaryService, Depends(get_time_summary_service)]
