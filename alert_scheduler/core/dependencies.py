# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
FastAPI dependency injection — wire repositories and services.
"""

from alert_scheduler.core.config import settings
from alert_scheduler.models.domain import parse_team_specs
from alert_scheduler.repositories.run_repository import RunRepository
from alert_scheduler.services.scheduling_service import SchedulingService

# ── Singleton instances ──
_run_repo = RunRepository()

_scheduling_service = SchedulingService(
    run_repo=_run_repo,
    default_teams=parse_team_specs(settings.DEFAULT_TEAMS),
)


# ── FastAPI dependency functions ──
def get_scheduling_service() -> SchedulingService:
    return _scheduling_service


def get_run_repo() -> RunRepository:
    return _run_repo
