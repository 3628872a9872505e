# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Scheduling endpoints.
Thin HTTP layer — delegates ALL logic to SchedulingService.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import PlainTextResponse

from alert_scheduler.core.dependencies import get_scheduling_service
from alert_scheduler.models.domain import TeamSpec
from alert_scheduler.schemas.scheduling import (
    BenchmarkRequest,
    BenchmarkRow,
    RandomScheduleRequest,
    ScheduleRequest,
    ScheduleRunResponse,
)
from alert_scheduler.services.scheduling_service import SchedulingService

router = APIRouter(prefix="/api/v1", tags=["Scheduling"])


@router.post("/schedule", status_code=201, response_model=ScheduleRunResponse)
def schedule_alerts(
    payload: ScheduleRequest,
    service: SchedulingService = Depends(get_scheduling_service),
):
    """Assign the given alerts to teams in one greedy pass."""
    try:
        return service.run(payload.alerts, payload.teams)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/schedule/random", status_code=201, response_model=ScheduleRunResponse)
def schedule_random_alerts(
    payload: RandomScheduleRequest,
    service: SchedulingService = Depends(get_scheduling_service),
):
    """Generate a random alert batch and schedule it."""
    try:
        return service.run_random(payload.count, seed=payload.seed, team_specs=payload.teams)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/runs", response_model=list[ScheduleRunResponse])
def list_runs(
    limit: Optional[int] = Query(default=None, ge=1, le=1000),
    service: SchedulingService = Depends(get_scheduling_service),
):
    """List stored scheduling runs, oldest first."""
    return service.list_runs(limit)


@router.get("/runs/{run_id}", response_model=ScheduleRunResponse)
def get_run(
    run_id: str,
    service: SchedulingService = Depends(get_scheduling_service),
):
    try:
        return service.get_run(run_id)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/runs/{run_id}/report", response_class=PlainTextResponse)
def get_run_report(
    run_id: str,
    service: SchedulingService = Depends(get_scheduling_service),
):
    """Fixed-width summary table for a stored run."""
    try:
        return service.render_report(run_id)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/benchmark", response_model=list[BenchmarkRow])
def run_benchmark(
    payload: BenchmarkRequest,
    service: SchedulingService = Depends(get_scheduling_service),
):
    """Time the scheduler over increasing random input sizes."""
    return service.benchmark(payload.sizes, seed=payload.seed)


@router.get("/teams/defaults", response_model=list[TeamSpec])
def default_teams(
    service: SchedulingService = Depends(get_scheduling_service),
):
    return service.default_teams
