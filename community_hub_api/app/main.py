"""
Main entrypoint for the Community Hub API.

``create_app`` sets up logging, builds the seeded member directory and
hotseat store, wires the services onto ``app.state`` and includes the
versioned routers.  A module-level ``app`` is created at import time
so ASGI servers can find it::

    uvicorn community_hub_api.app.main:app --reload

Pass a fixed ``clock`` to ``create_app`` to get deterministic presence
and timestamps (tests do this).
"""

import logging
from datetime import timedelta
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.errors import Failure
from .core.logging_config import setup_logging
from .core.seed import seed_hotseats, seed_members
from .core.store import Clock, HotseatStore, MemberDirectory, utc_now
from .services.hotseat_service import HotseatService
from .services.member_service import MemberService

logger = logging.getLogger(__name__)


def _describe_validation_error(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg')}")
    return "; ".join(parts) or "Invalid request"


def create_app(settings: Optional[Settings] = None, clock: Optional[Clock] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use; defaults to the environment-derived
        ``settings``.
    clock : Optional[Clock]
        Time source for presence, seeding and ``created_at`` stamps.
        Defaults to the current UTC time.

    Returns
    -------
    FastAPI
        A configured application with freshly seeded state.
    """
    settings = settings or default_settings
    clock = clock or utc_now
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    now = clock()
    directory = MemberDirectory(
        seed_members(now),
        clock=clock,
        online_window=timedelta(minutes=settings.online_window_minutes),
    )
    store = HotseatStore(seed_hotseats(now))
    app.state.member_service = MemberService(directory, match_limit=settings.match_result_limit)
    app.state.hotseat_service = HotseatService(store, directory, clock=clock)
    logger.info("Seeded %d members and %d hotseats", len(directory), len(store))

    app.include_router(v1_router, prefix="/api/v1")

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        failure = Failure.invalid_input(_describe_validation_error(exc))
        logger.info("Rejected %s %s: %s", request.method, request.url.path, failure.message)
        return JSONResponse(status_code=failure.http_status, content={"detail": failure.as_detail()})

    @app.get("/health")
    async def health() -> Dict[str, Any]:
        return {
            "status": "healthy",
            "service": "community-hub-api",
            "timestamp": clock().isoformat(),
        }

    return app


app = create_app()
