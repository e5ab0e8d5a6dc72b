"""FastAPI application for the coach JSON API."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .. import __version__
from ..db.engine import init_db
from ..errors import ClientError, ValidationError
from .routers import dashboard, nutrition, profile, strength, training

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the schema on startup (idempotent)."""
    await init_db()
    yield


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="coach",
        description="Training plans, strength routines and macro targets",
        version=__version__,
        lifespan=lifespan,
    )

    app.include_router(profile.router)
    app.include_router(nutrition.router)
    app.include_router(training.router)
    app.include_router(strength.router)
    app.include_router(dashboard.router)

    @app.exception_handler(ValidationError)
    async def validation_error(request: Request, exc: ValidationError):
        return JSONResponse(status_code=422, content={"detail": str(exc)})

    @app.exception_handler(ClientError)
    async def client_error(request: Request, exc: ClientError):
        logger.warning("Upstream error on %s: %s", request.url.path, exc)
        status = 503 if exc.retryable else 502
        return JSONResponse(
            status_code=status,
            content={"detail": str(exc), "retryable": exc.retryable},
        )

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    return app
