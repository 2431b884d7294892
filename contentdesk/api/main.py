import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from contentdesk.api.deps import get_rules, get_settings
from contentdesk.domain.errors import (
    ContentDeskError,
    GenerationError,
    InvalidCalendarMonthError,
    InvalidIntervalError,
    InvalidSiteError,
    InvalidStartDateError,
    InvalidTransitionError,
    ItemNotFoundError,
    PublishError,
    SiteExistsError,
    SiteNotFoundError,
    UnauthorizedError,
)

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

ERROR_STATUS: dict[type[ContentDeskError], int] = {
    ItemNotFoundError: 404,
    SiteNotFoundError: 404,
    UnauthorizedError: 403,
    InvalidTransitionError: 409,
    SiteExistsError: 409,
    InvalidIntervalError: 422,
    InvalidStartDateError: 422,
    InvalidCalendarMonthError: 422,
    InvalidSiteError: 422,
    GenerationError: 502,
    PublishError: 502,
}


def status_for(error: ContentDeskError) -> int:
    for error_type, status_code in ERROR_STATUS.items():
        if isinstance(error, error_type):
            return status_code
    return 400


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    settings = get_settings()

    # Load rules and validate on startup (fail-fast)
    try:
        get_rules()
    except (FileNotFoundError, ValueError):
        logger.critical("Rules load failed from %s", settings.rules_path, exc_info=True)
        raise

    yield


app = FastAPI(
    title="Content Desk API",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)


@app.exception_handler(ContentDeskError)
async def content_desk_error_handler(request: Request, exc: ContentDeskError) -> JSONResponse:
    return JSONResponse(
        status_code=status_for(exc),
        content={"detail": str(exc), "code": exc.code},
    )


# --- Routers ---
from contentdesk.api.routes import content, session, sites  # noqa: E402

app.include_router(session.router, prefix="/api/session", tags=["Session"])
app.include_router(content.router, prefix="/api/content", tags=["Content"])
app.include_router(sites.router, prefix="/api/sites", tags=["Sites"])


@app.get("/health")
def health_check() -> dict[str, Any]:
    """Health check endpoint."""
    return {"status": "ok", "service": "api"}
