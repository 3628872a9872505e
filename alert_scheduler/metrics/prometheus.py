# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Prometheus metrics — single source of truth for all metric objects.
Imported by services and middleware. Never instantiated in controllers.
"""

from prometheus_client import Counter, Gauge, Histogram

# ── HTTP Metrics (used by middleware) ──
REQUEST_COUNT = Counter(
    "scheduler_requests_total",
    "Total HTTP requests to alert-scheduler service",
    ["method", "endpoint", "status"],
)
REQUEST_LATENCY = Histogram(
    "scheduler_request_duration_seconds",
    "Request latency in seconds",
    ["method", "endpoint"],
)
HTTP_ERRORS = Counter(
    "scheduler_http_errors_total",
    "Total HTTP error responses",
    ["method", "endpoint", "status"],
)

# ── Business Metrics (updated by service layer only) ──
SCHEDULING_RUNS = Counter(
    "scheduler_runs_total",
    "Total scheduling runs executed",
    ["source"],
)
ALERTS_ASSIGNED = Counter(
    "scheduler_alerts_assigned_total",
    "Total alerts assigned, by team",
    ["team"],
)
ALERTS_UNASSIGNED = Counter(
    "scheduler_alerts_unassigned_total",
    "Total alerts left without a conflict-free team",
)
SCHEDULING_DURATION = Histogram(
    "scheduler_pass_duration_seconds",
    "Duration of a single greedy scheduling pass",
    buckets=[0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5],
)
RUNS_STORED = Gauge(
    "scheduler_runs_stored",
    "Number of run records held in memory",
)
