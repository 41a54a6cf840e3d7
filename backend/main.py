# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20261018v1
# ---------------------------------------------------------------------------
"""
FastAPI application.

Responsibilities
----------------
* Instantiate the FastAPI app.
* Register CORS and request-logging middleware.
* Mount the feature routers (auth, farms, crops, livestock, employees).
* Turn store failures into an opaque 500 (logged server-side).
* Create missing tables on startup and expose /health for liveness checks.

Run with:
    uvicorn main:app --app-dir backend --port 9005
"""

import logging
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from sqlalchemy.exc import SQLAlchemyError
from starlette.middleware.base import BaseHTTPMiddleware

from auth.router import router as auth_router
from core.config import settings
from core.logger import logger
from core.security import get_client_ip
from crops.router import router as crops_router
from database import Base, engine
from employees.router import router as employees_router
from farms.router import router as farms_router
from livestock.router import router as livestock_router

# Every ORM model must be imported so that Base.metadata knows its table.
import models.crop        # noqa: F401, E402
import models.employee    # noqa: F401, E402
import models.farm        # noqa: F401, E402
import models.livestock   # noqa: F401, E402
import models.user        # noqa: F401, E402

app = FastAPI(title="Farm Manager 4U", version="1.0.0")

# ---------------------------------------------------------------------------
# CORS
# ---------------------------------------------------------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Accept", "Authorization", "Content-Type"],
)


# ---------------------------------------------------------------------------
# Request-logging middleware
# ---------------------------------------------------------------------------
# Logs every inbound request: method, path, client IP, status, latency.
# Bodies (passwords, reset codes) and the Authorization header are never
# recorded.


def _level_for(status_code: int) -> int:
    if status_code >= 500:
        return logging.ERROR
    if status_code in (401, 403):
        return logging.WARNING
    return logging.INFO


class _RequestLogMiddleware(BaseHTTPMiddleware):
    """One line per request; auth failures at WARNING, server errors at ERROR."""

    async def dispatch(self, request: Request, call_next) -> Response:
        started = time.perf_counter()
        response = await call_next(request)
        latency_ms = (time.perf_counter() - started) * 1000

        logger.log(
            _level_for(response.status_code),
            "%s %s -> %d in %.1fms (ip=%s)",
            request.method,
            request.url.path,
            response.status_code,
            latency_ms,
            get_client_ip(request),
        )
        return response


app.add_middleware(_RequestLogMiddleware)


# ---------------------------------------------------------------------------
# Store failures
# ---------------------------------------------------------------------------
# Typed service errors are HTTPExceptions and render themselves.  Anything the
# database raises is logged with its traceback and answered generically.


@app.exception_handler(SQLAlchemyError)
async def _store_error(request: Request, exc: SQLAlchemyError):
    logger.exception("Store failure on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"detail": "internal server error"})


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
app.include_router(auth_router)
app.include_router(farms_router)
app.include_router(crops_router)
app.include_router(livestock_router)
app.include_router(employees_router)


# ---------------------------------------------------------------------------
# Lifecycle & health check
# ---------------------------------------------------------------------------


@app.on_event("startup")
async def _on_startup():
    Base.metadata.create_all(bind=engine)
    logger.info("Farm Manager 4U service starting up")


@app.on_event("shutdown")
async def _on_shutdown():
    logger.info("Farm Manager 4U service shutting down")


@app.get("/health")
def health():
    return {"status": "ok"}
