# type: ignore
# pyright: reportGeneralTypeIssues=false
# pyright: reportOptionalMemberAccess=false
"""
Alert Scheduler Service
=======================
Assigns weighted, time-bounded fraud alerts to investigation teams with a
conflict-aware greedy scheduler. Each team keeps an augmented interval tree
of its assignments so overlap checks stay cheap, and a fatigue score that
grows with every assigned interval.

Every request schedules onto a fresh set of teams; run outcomes are kept in
a bounded in-memory log.

Port: 8005
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from alert_scheduler.controllers import schedule_controller, system_controller
from alert_scheduler.core.config import settings
from alert_scheduler.core.dependencies import get_scheduling_service
from alert_scheduler.core.logging import get_logger
from alert_scheduler.middleware import MetricsMiddleware, RequestIDMiddleware

logger = get_logger(settings.SERVICE_NAME)


# ── Lifespan ──────────────────────────────────────────────────────────────
@asynccontextmanager
async def lifespan(application: FastAPI):
    teams = get_scheduling_service().default_teams
    logger.info(
        "Service starting: version=%s, default_teams=%s",
        settings.SERVICE_VERSION, ",".join(t.name for t in teams),
    )
    yield
    logger.info("Service shutting down")


# ── FastAPI App ───────────────────────────────────────────────────────────
app = FastAPI(
    title="Alert Scheduler Service",
    description="Greedy, conflict-aware assignment of fraud alerts to investigation teams.",
    version=settings.SERVICE_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(MetricsMiddleware)
app.add_middleware(RequestIDMiddleware)


# ── Global exception handler ─────────────────────────────────────────────
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    req_id = getattr(request.state, "request_id", None)
    logger.exception("Unhandled exception", extra={"request_id": req_id})
    return JSONResponse(
        status_code=500,
        content={"error": "internal_server_error", "detail": str(exc), "request_id": req_id},
    )


app.include_router(system_controller.router)
app.include_router(schedule_controller.router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.SERVICE_PORT, log_level="info")
