# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Greedy conflict-aware scheduler.

Alerts are taken heaviest first (stable for equal weights). Each one goes to
the conflict-free team with the strictly highest positive score; the first
team in iteration order wins ties. Nothing is ever moved once assigned, and
alerts that fit nowhere are left out silently.

A scheduler mutates the teams it is given. Build fresh teams for every run:
scheduling the same teams twice stacks fatigue and assignments.
"""

from enum import Enum
from typing import Iterable, Optional, Sequence

from alert_scheduler.core.logging import get_logger
from alert_scheduler.models.domain import Alert
from alert_scheduler.services.team import Team

logger = get_logger(__name__)


class SchedulerState(str, Enum):
    PENDING = "pending"
    RUNNING = "running"
    COMPLETE = "complete"


class GreedyScheduler:
    """Single-pass weighted greedy assignment of alerts to teams."""

    def __init__(self, alerts: Iterable[Alert], teams: Sequence[Team]) -> None:
        self._alerts = list(alerts)
        self._teams = list(teams)
        self._state = SchedulerState.PENDING
        self._order: list[Alert] = []
        self._unassigned: list[Alert] = []

    @property
    def state(self) -> SchedulerState:
        return self._state

    @property
    def order(self) -> list[Alert]:
        """Alerts in the order the last pass considered them."""
        return list(self._order)

    @property
    def unassigned(self) -> list[Alert]:
        """Alerts the last pass could not place, in processing order."""
        return list(self._unassigned)

    def schedule(self) -> None:
        if self._state is SchedulerState.COMPLETE:
            logger.warning(
                "Scheduler re-run on the same teams; fatigue and assignments will accumulate"
            )
        self._state = SchedulerState.RUNNING
        self._order = sorted(self._alerts, key=lambda a: a.weight, reverse=True)
        self._unassigned = []

        for alert in self._order:
            best = self.pick_team(alert)
            if best is None:
                self._unassigned.append(alert)
                logger.debug("Alert unassigned: id=%s", alert.id)
                continue
            best.assign(alert)
            logger.debug("Alert assigned: id=%s, team=%s", alert.id, best.name)

        self._state = SchedulerState.COMPLETE
        logger.info(
            "Scheduling pass complete: alerts=%d, teams=%d, unassigned=%d",
            len(self._order), len(self._teams), len(self._unassigned),
        )

    def pick_team(self, alert: Alert) -> Optional[Team]:
        """Best conflict-free team for the alert, or None. Does not mutate."""
        best: Optional[Team] = None
        best_score = 0.0
        for team in self._teams:
            if team.has_conflict(alert):
                continue
            score = team.score(alert)
            if score > best_score:
                best_score = score
                best = team
        return best


def find_unassigned(alerts: Iterable[Alert], teams: Iterable[Team]) -> list[Alert]:
    """Alerts held by no team, matched by identity, in input order."""
    held = {id(a) for team in teams for a in team.assigned}
    return [a for a in alerts if id(a) not in held]
