# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Scheduling runs — business logic behind the HTTP API.
Builds a fresh team set per run, executes the greedy pass, records the
outcome with metrics and logging.
"""

import time
import uuid
from datetime import datetime, timezone
from typing import Any, Optional, Sequence

from alert_scheduler.core.config import settings
from alert_scheduler.core.logging import get_logger
from alert_scheduler.metrics.prometheus import (
    ALERTS_ASSIGNED,
    ALERTS_UNASSIGNED,
    RUNS_STORED,
    SCHEDULING_DURATION,
    SCHEDULING_RUNS,
)
from alert_scheduler.models.domain import Alert, TeamSpec
from alert_scheduler.repositories.run_repository import RunRepository
from alert_scheduler.services.benchmark import run_timing_experiment
from alert_scheduler.services.generator import generate_random_alerts
from alert_scheduler.services.report import build_summary, format_summary_table
from alert_scheduler.services.scheduler import GreedyScheduler
from alert_scheduler.services.team import Team

logger = get_logger(__name__)

# Caller-named teams share one metric label to keep cardinality bounded.
CUSTOM_TEAM_LABEL = "custom"


class SchedulingService:
    """Runs scheduling passes and keeps their results."""

    def __init__(self, run_repo: RunRepository, default_teams: Sequence[TeamSpec]) -> None:
        self._runs = run_repo
        self._default_teams = list(default_teams)

    @property
    def default_teams(self) -> list[TeamSpec]:
        return list(self._default_teams)

    # ── Commands ──

    def build_teams(self, specs: Optional[Sequence[TeamSpec]] = None) -> list[Team]:
        """Fresh Team objects for one run. Raises ValueError on bad team config."""
        specs = self._default_teams if specs is None else list(specs)
        if not specs:
            raise ValueError("At least one team is required")
        names = [s.name for s in specs]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"Duplicate team names: {', '.join(duplicates)}")
        return [Team.from_spec(s) for s in specs]

    def run(
        self,
        alerts: Sequence[Alert],
        team_specs: Optional[Sequence[TeamSpec]] = None,
        source: str = "manual",
    ) -> dict[str, Any]:
        """Schedule ``alerts`` over fresh teams and store the run record."""
        teams = self.build_teams(team_specs)
        scheduler = GreedyScheduler(alerts, teams)

        started = time.perf_counter()
        scheduler.schedule()
        elapsed = time.perf_counter() - started

        run_id = str(uuid.uuid4())
        record: dict[str, Any] = {
            "run_id": run_id,
            "source": source,
            "created_at": datetime.now(timezone.utc).isoformat(),
            "runtime_ms": elapsed * 1000.0,
            "total_alerts": len(alerts),
            **build_summary(alerts, teams),
        }
        self._runs.save(record)

        SCHEDULING_RUNS.labels(source=source).inc()
        SCHEDULING_DURATION.observe(elapsed)
        default_names = {s.name for s in self._default_teams}
        for team in teams:
            if team.assigned:
                label = team.name if team.name in default_names else CUSTOM_TEAM_LABEL
                ALERTS_ASSIGNED.labels(team=label).inc(len(team.assigned))
        if record["unassigned"]:
            ALERTS_UNASSIGNED.inc(len(record["unassigned"]))
        RUNS_STORED.set(self._runs.count())

        logger.info(
            "Run complete: source=%s, alerts=%d, assigned=%d, unassigned=%d, runtime_ms=%.3f",
            source, len(alerts), record["total_assigned"], len(record["unassigned"]),
            record["runtime_ms"],
            extra={"run_id": run_id},
        )
        return record

    def run_random(
        self,
        count: int,
        seed: Optional[int] = None,
        team_specs: Optional[Sequence[TeamSpec]] = None,
    ) -> dict[str, Any]:
        alerts = generate_random_alerts(count, seed=seed)
        record = self.run(alerts, team_specs, source="random")
        record["seed"] = seed
        return record

    def benchmark(
        self,
        sizes: Optional[Sequence[int]] = None,
        seed: Optional[int] = None,
    ) -> list[dict[str, Any]]:
        sizes = list(sizes) if sizes else list(settings.BENCHMARK_SIZES)
        return run_timing_experiment(sizes, self._default_teams, seed=seed)

    # ── Queries ──

    def list_runs(self, limit: Optional[int] = None) -> list[dict[str, Any]]:
        return self._runs.get_all(limit)

    def get_run(self, run_id: str) -> dict[str, Any]:
        run = self._runs.get_by_id(run_id)
        if run is None:
            raise KeyError(f"No run found with id '{run_id}'")
        return run

    def render_report(self, run_id: str) -> str:
        return format_summary_table(self.get_run(run_id))
