# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Request / Response schemas — API contract definitions.
These are Pydantic models used ONLY at the controller (HTTP) boundary.
"""

from typing import Annotated, Any, Optional

from pydantic import BaseModel, Field

from alert_scheduler.core.config import settings
from alert_scheduler.models.domain import Alert, TeamSpec


# ── Scheduling Schemas ──

class AlertPayload(Alert):
    """Inbound alert: the domain Alert with length limits on its strings."""
    id: str = Field(..., min_length=1, max_length=255, description="Alert identifier")
    location: str = Field(default="", max_length=255, description="Originating branch")


class ScheduleRequest(BaseModel):
    alerts: list[AlertPayload] = Field(
        default_factory=list,
        max_length=settings.MAX_ALERTS_PER_RUN,
        description="Alerts to schedule",
    )
    teams: Optional[list[TeamSpec]] = Field(
        default=None, min_length=1, description="Teams to schedule onto (defaults if omitted)"
    )


class RandomScheduleRequest(BaseModel):
    count: int = Field(
        ..., ge=0, le=settings.MAX_ALERTS_PER_RUN, description="Number of alerts to generate"
    )
    seed: Optional[int] = Field(default=None, description="Seed for a reproducible batch")
    teams: Optional[list[TeamSpec]] = Field(default=None, min_length=1)


class TeamSummary(BaseModel):
    name: str
    skill_factor: float
    fatigue: float
    assigned_count: int
    total_utilization: float
    avg_interval_length: float
    assigned: list[dict[str, Any]]


class ScheduleRunResponse(BaseModel):
    run_id: str
    source: str
    created_at: str
    runtime_ms: float
    total_alerts: int
    total_assigned: int
    total_utilization: float
    unassigned: list[str]
    teams: list[TeamSummary]
    seed: Optional[int] = None


# ── Benchmark Schemas ──

class BenchmarkRequest(BaseModel):
    sizes: Optional[
        list[Annotated[int, Field(ge=1, le=settings.MAX_BENCHMARK_SIZE)]]
    ] = Field(default=None, min_length=1, max_length=20, description="Input sizes to time")
    seed: Optional[int] = None


class BenchmarkRow(BaseModel):
    size: int
    runtime_ms: float
    assigned: int
