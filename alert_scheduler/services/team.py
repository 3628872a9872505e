# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Investigation team state and assignment scoring.

A Team is mutable and owned by exactly one scheduling run. Skill scales an
alert's weight; fatigue grows with every assigned minute and divides the
score, so busy teams look progressively less attractive.
"""

from alert_scheduler.models.domain import Alert, TeamSpec
from alert_scheduler.services.interval_tree import IntervalTree

INITIAL_FATIGUE = 1.0
FATIGUE_PER_UNIT = 0.05
CONFLICT_PENALTY = 5.0


class Team:
    """An investigation team with skill factor, fatigue, and assigned alerts."""

    def __init__(self, name: str, skill_factor: float) -> None:
        self._name = name
        self._skill_factor = skill_factor
        self._fatigue = INITIAL_FATIGUE
        self._assigned: list[Alert] = []
        self._tree = IntervalTree()

    @classmethod
    def from_spec(cls, spec: TeamSpec) -> "Team":
        return cls(spec.name, spec.skill_factor)

    # ── Accessors ──

    @property
    def name(self) -> str:
        return self._name

    @property
    def skill_factor(self) -> float:
        return self._skill_factor

    @property
    def fatigue(self) -> float:
        return self._fatigue

    @property
    def assigned(self) -> tuple[Alert, ...]:
        """Assigned alerts in assignment order."""
        return tuple(self._assigned)

    @property
    def tree(self) -> IntervalTree:
        return self._tree

    # ── Scoring ──

    def has_conflict(self, alert: Alert) -> bool:
        return self._tree.overlaps(alert)

    def score(self, alert: Alert) -> float:
        """
        weight * skill, divided by fatigue.
        A conflicting alert is additionally divided by CONFLICT_PENALTY; the
        greedy scheduler never scores conflicting teams, so that branch only
        shows up when score() is called directly.
        """
        base = alert.weight * self._skill_factor
        penalty = self._fatigue * (CONFLICT_PENALTY if self.has_conflict(alert) else 1.0)
        return base / penalty

    # ── Commands ──

    def assign(self, alert: Alert) -> None:
        self._assigned.append(alert)
        self._tree.insert(alert)
        self._fatigue += FATIGUE_PER_UNIT * alert.duration

    def utilization(self) -> float:
        """Total assigned interval length."""
        return float(sum(a.duration for a in self._assigned))

    def __repr__(self) -> str:
        return (
            f"Team({self._name} skill={self._skill_factor:.2f} fatigue={self._fatigue:.2f} "
            f"assigned={len(self._assigned)} utilization={self.utilization():.2f})"
        )
