# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Scheduling summary — per-team rows, totals, and a text table.
Pure functions over team state after a run.
"""

from typing import Any, Iterable, Sequence

from alert_scheduler.models.domain import Alert
from alert_scheduler.services.scheduler import find_unassigned
from alert_scheduler.services.team import Team

TABLE_TITLE = "=== FRAUD ALERT INVESTIGATION SUMMARY ==="


def team_summary(team: Team) -> dict[str, Any]:
    assigned = team.assigned
    utilization = team.utilization()
    return {
        "name": team.name,
        "skill_factor": team.skill_factor,
        "fatigue": team.fatigue,
        "assigned_count": len(assigned),
        "total_utilization": utilization,
        "avg_interval_length": utilization / len(assigned) if assigned else 0.0,
        "assigned": [a.model_dump() for a in assigned],
    }


def build_summary(alerts: Iterable[Alert], teams: Sequence[Team]) -> dict[str, Any]:
    rows = [team_summary(t) for t in teams]
    return {
        "teams": rows,
        "total_assigned": sum(r["assigned_count"] for r in rows),
        "total_utilization": sum(r["total_utilization"] for r in rows),
        "unassigned": [a.id for a in find_unassigned(alerts, teams)],
    }


def format_summary_table(summary: dict[str, Any]) -> str:
    """Render a summary (or a stored run record) as a fixed-width table."""
    lines = [
        TABLE_TITLE,
        f"{'Team':<10} {'Skill':<7} {'Fatigue':<8} {'Assigned':<10} "
        f"{'Total Utilization':<18} {'Avg Interval Length':<20}",
    ]
    for row in summary["teams"]:
        lines.append(
            f"{row['name']:<10} {row['skill_factor']:<7.2f} {row['fatigue']:<8.2f} "
            f"{row['assigned_count']:<10d} {row['total_utilization']:<18.2f} "
            f"{row['avg_interval_length']:<20.2f}"
        )
    lines.append(f"Max non-overlapping alerts: {summary['total_assigned']}")
    lines.append(f"Total utilization: {summary['total_utilization']:.2f}")
    if summary.get("unassigned"):
        lines.append(f"Unassigned alerts: {', '.join(summary['unassigned'])}")
    if "runtime_ms" in summary:
        lines.append(f"Runtime (ms): {summary['runtime_ms']:.3f}")
    return "\n".join(lines)
