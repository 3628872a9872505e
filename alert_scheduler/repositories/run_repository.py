# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Repository: Scheduling run records.
Bounded in-memory log; oldest runs are dropped first.
"""

from typing import Any, Optional

from alert_scheduler.core.config import settings


class RunRepository:
    """In-memory run log (bounded ring buffer) with id lookup."""

    def __init__(self, max_size: Optional[int] = None) -> None:
        self._runs: list[dict[str, Any]] = []
        self._index: dict[str, dict[str, Any]] = {}
        self._max_size = max_size or settings.MAX_RUN_HISTORY

    # ── Read ──

    def get_all(self, limit: Optional[int] = None) -> list[dict[str, Any]]:
        effective_limit = limit or settings.DEFAULT_RUN_LIMIT
        return self._runs[-effective_limit:]

    def get_by_id(self, run_id: str) -> Optional[dict[str, Any]]:
        return self._index.get(run_id)

    def count(self) -> int:
        return len(self._runs)

    # ── Write ──

    def save(self, run: dict[str, Any]) -> dict[str, Any]:
        self._runs.append(run)
        self._index[run["run_id"]] = run
        if len(self._runs) > self._max_size:
            dropped = self._runs[: len(self._runs) - self._max_size]
            del self._runs[: len(dropped)]
            for old in dropped:
                self._index.pop(old["run_id"], None)
        return run

    # ── Bulk / internal ──

    def clear(self) -> None:
        self._runs.clear()
        self._index.clear()
