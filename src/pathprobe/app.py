"""FastAPI application: welcome, permission report and synthetic load routes."""

from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import APIRouter, FastAPI, Request
from fastapi.responses import JSONResponse

from pathprobe.config import Settings
from pathprobe.exceptions import ReportError
from pathprobe.fs.report import default_report_paths, run_report
from pathprobe.load import run_synthetic_load
from pathprobe.schemas import (
    EndpointsInfo,
    ErrorResponse,
    LoadResponse,
    ReportResponse,
    WelcomeResponse,
)

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Awaitable, Callable

    from starlette.responses import Response

logger = logging.getLogger(__name__)

WELCOME_MESSAGE = "Welcome to the pathprobe demo service."

router = APIRouter()


@router.get("/", response_model=WelcomeResponse)
async def welcome() -> WelcomeResponse:
    """Describe the service and list the other routes."""
    return WelcomeResponse(
        message=WELCOME_MESSAGE,
        endpoints=EndpointsInfo(
            demo="/demo - concurrent file system permission report",
            cpu="/cpu - CPU-bound task that blocks the event loop",
        ),
    )


@router.get(
    "/demo",
    response_model=ReportResponse,
    response_model_exclude_none=True,
    responses={500: {"model": ErrorResponse}},
)
async def demo() -> ReportResponse:
    """Run the permission report over the default path set."""
    report = await run_report(default_report_paths())
    return ReportResponse.from_report(report)


@router.get("/cpu", response_model=LoadResponse)
async def cpu(request: Request) -> LoadResponse:
    """Run the synthetic load on the event loop thread.

    Nothing else is served until this returns.
    """
    settings: Settings = request.app.state.settings
    logger.warning(
        "Starting CPU-bound task (%d iterations); the event loop is blocked until it finishes",
        settings.cpu_iterations,
    )
    result = run_synthetic_load(settings.cpu_iterations)
    logger.info("CPU-bound task finished in %.3fs", result.duration_seconds)
    return LoadResponse.from_load(result)


async def _report_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Permission report failed for %s", request.url.path, exc_info=exc)
    details = exc.details if isinstance(exc, ReportError) else str(exc)
    body = ErrorResponse(error=str(exc), details=details)
    return JSONResponse(status_code=500, content=body.model_dump(by_alias=True))


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application. Settings default to :meth:`Settings.from_env`."""
    settings = settings or Settings.from_env()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info("Server is running at http://localhost:%d", settings.port)
        yield

    app = FastAPI(title="pathprobe", lifespan=lifespan)
    app.state.settings = settings

    @app.middleware("http")
    async def log_requests(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        start = time.perf_counter()
        response = await call_next(request)
        latency_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "%s %s %d %.1fms",
            request.method,
            request.url.path,
            response.status_code,
            latency_ms,
        )
        return response

    app.add_exception_handler(ReportError, _report_error_handler)
    app.include_router(router)
    return app
