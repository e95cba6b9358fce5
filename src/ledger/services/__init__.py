from src.ledger.services.assignee_service import AssigneeService
from src.ledger.services.client_service import ClientService
from src.ledger.services.milestone_service import MilestoneService, resolve_milestone_status
from src.ledger.services.payment_service import PaymentDeletion, PaymentOutcome, PaymentService
from src.ledger.services.project_service import ProjectService
from src.ledger.services.project_type_service import ProjectTypeService
from src.ledger.services.time_entry_service import TimeEntryService, hours_from_parts
from src.ledger.services.time_summary_service import (
    PeriodSummary,
    TimeSummaryService,
    aggregate_time_entries,
    month_range,
    week_range,
)

__all__ = [
    "AssigneeService",
    "ClientService",
    "MilestoneService",
    "PaymentDeletion",
    "PaymentOutcome",
    "PaymentService",
    "PeriodSummary",
    "ProjectService",
    "ProjectTypeService",
    "TimeEntryService",
    "TimeSummaryService",
    "aggregate_time_entries",
    "hours_from_parts",
    "month_range",
    "resolve_milestone_status",
    "week_range",
]
