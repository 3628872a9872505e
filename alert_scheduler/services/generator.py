# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Random alert generation — test data for demos and benchmarks.
"""

import random
from typing import Optional

from alert_scheduler.models.domain import Alert

START_RANGE = 50
MAX_DURATION = 6
MAX_URGENCY = 5
SEVERITY_SPAN = 4.0
BRANCH_COUNT = 10


def generate_random_alerts(
    count: int,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> list[Alert]:
    """
    Build ``count`` alerts with ids A0..A{count-1}.

    start in [0, 50), duration in [1, 6], urgency in [1, 5], severity in [1, 5).
    Pass ``seed`` (or an ``rng``) for a reproducible batch.
    """
    if count < 0:
        raise ValueError("count must not be negative")
    rng = rng or random.Random(seed)

    alerts: list[Alert] = []
    for i in range(count):
        start = rng.randrange(START_RANGE)
        end = start + rng.randrange(MAX_DURATION) + 1
        alerts.append(
            Alert(
                id=f"A{i}",
                start=start,
                end=end,
                urgency=1 + rng.randrange(MAX_URGENCY),
                severity=1 + rng.random() * SEVERITY_SPAN,
                location=f"Branch{rng.randrange(BRANCH_COUNT)}",
            )
        )
    return alerts
