"""
FastAPI application: exception mapping, request logging, CORS and routers.
"""
import logging
import traceback

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import ALLOWED_ORIGINS
from .dependencies import AppState, build_state
from .errors import ScholarHubError
from .routers import (
    admin_router,
    auth_router,
    bookmarks_router,
    health_router,
    search_router,
    summary_router,
)

logger = logging.getLogger(__name__)


async def scholarhub_error_handler(request: Request, exc: ScholarHubError):
    log = logger.error if exc.status_code >= 500 else logger.warning
    log(f"{type(exc).__name__} on {request.method} {request.url.path}: {exc.detail}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail, "type": type(exc).__name__}
    )


async def global_exception_handler(request: Request, exc: Exception):
    logger.error("=== UNHANDLED EXCEPTION ===")
    logger.error(f"Path: {request.url.path}")
    logger.error(f"Method: {request.method}")
    logger.error(f"Exception type: {type(exc).__name__}")
    logger.error(f"Exception message: {str(exc)}")
    logger.error(f"Traceback: {traceback.format_exc()}")
    return JSONResponse(
        status_code=500,
        content={"detail": str(exc), "type": type(exc).__name__}
    )


async def log_requests(request: Request, call_next):
    logger.debug(f"=== INCOMING REQUEST === {request.method} {request.url.path}")
    response = await call_next(request)
    logger.debug(f"=== RESPONSE === {request.method} {request.url.path} -> {response.status_code}")
    return response


def create_app(state: AppState | None = None) -> FastAPI:
    """Build the application around `state`, or freshly seeded stores."""
    app = FastAPI(title="ScholarHub", version="1.0.0")
    app.state.scholarhub = state or build_state()

    app.add_exception_handler(ScholarHubError, scholarhub_error_handler)
    app.add_exception_handler(Exception, global_exception_handler)
    app.middleware("http")(log_requests)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health_router)
    app.include_router(auth_router)
    app.include_router(search_router)
    app.include_router(bookmarks_router)
    app.include_router(admin_router)
    app.include_router(summary_router)

    logger.debug(f"Routes registered: {len(app.routes)}")
    return app


app = create_app()


def run():
    import uvicorn

    uvicorn.run("scholarhub.main:app", host="0.0.0.0", port=8000)
