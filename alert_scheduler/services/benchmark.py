# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Timing experiment — scheduler runtime over growing input sizes.
"""

import random
import time
from typing import Any, Iterable, Optional, Sequence

from alert_scheduler.core.logging import get_logger
from alert_scheduler.models.domain import TeamSpec
from alert_scheduler.services.generator import generate_random_alerts
from alert_scheduler.services.scheduler import GreedyScheduler
from alert_scheduler.services.team import Team

logger = get_logger(__name__)


def run_timing_experiment(
    sizes: Iterable[int],
    team_specs: Sequence[TeamSpec],
    seed: Optional[int] = None,
) -> list[dict[str, Any]]:
    """
    Time one scheduling pass per size, each over fresh teams.
    Only the pass itself is timed, not alert generation.
    """
    rng = random.Random(seed)
    rows: list[dict[str, Any]] = []
    for size in sizes:
        alerts = generate_random_alerts(size, rng=rng)
        teams = [Team.from_spec(s) for s in team_specs]
        started = time.perf_counter()
        GreedyScheduler(alerts, teams).schedule()
        runtime_ms = (time.perf_counter() - started) * 1000.0
        assigned = sum(len(t.assigned) for t in teams)
        rows.append({"size": size, "runtime_ms": runtime_ms, "assigned": assigned})
        logger.info("Benchmark size=%d runtime_ms=%.3f assigned=%d", size, runtime_ms, assigned)
    return rows
