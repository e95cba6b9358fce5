from fastapi import APIRouter

from src.ledger.api.v1 import (
    assignees,
    clients,
    dashboard,
    milestones,
    payments,
    project_types,
    projects,
    time_entries,
)

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(clients.router)
api_router.include_router(project_types.router)
api_router.include_router(projects.router)
api_router.include_router(milestones.router)
api_router.include_router(payments.router)
api_router.include_router(assignees.router)
api_router.include_router(time_entries.router)
api_router.include_router(dashboard.router)
