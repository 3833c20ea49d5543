# type: ignore
# pyright: reportGeneralTypeIssues=false
"""
Groups Service
==============
Group-membership management for one session: list, search and filter groups,
create and edit them, manage their members and ratings, and serve the
dashboard navigation table. All state is in memory and is lost on restart.

Port: 8005
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from groups_service.controllers import (
    group_controller,
    navigation_controller,
    session_controller,
    system_controller,
)
from groups_service.core.config import settings
from groups_service.core.dependencies import get_group_service
from groups_service.core.logging import get_logger
from groups_service.middleware import MetricsMiddleware, RequestIDMiddleware

logger = get_logger(settings.SERVICE_NAME)


# ── Lifespan ──────────────────────────────────────────────────────────────
@asynccontextmanager
async def lifespan(application: FastAPI):
    """Seed the session collection on startup."""
    if settings.SEED_DEFAULT_GROUPS:
        get_group_service().seed_defaults()
    logger.info("%s %s starting", settings.SERVICE_NAME, settings.SERVICE_VERSION)
    yield
    logger.info("%s shutting down", settings.SERVICE_NAME)


# ── FastAPI App ───────────────────────────────────────────────────────────
app = FastAPI(
    title="Groups Service",
    description="In-memory group and member management with search and status filters.",
    version=settings.SERVICE_VERSION,
    lifespan=lifespan,
)

app.add_middleware(MetricsMiddleware)
app.add_middleware(RequestIDMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(system_controller.router)
app.include_router(group_controller.router)
app.include_router(session_controller.router)
app.include_router(navigation_controller.router)


# ── Global exception handler ─────────────────────────────────────────────
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    req_id = getattr(request.state, "request_id", None)
    logger.exception("Unhandled exception", extra={"request_id": req_id})
    return JSONResponse(
        status_code=500,
        content={"error": "internal_server_error", "detail": str(exc), "request_id": req_id},
    )


# ── Entrypoint ────────────────────────────────────────────────────────────
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.SERVICE_PORT, log_level="info")
