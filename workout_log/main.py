"""FastAPI application factory and lifespan."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from workout_log import models  # noqa: F401 - register all models on Base.metadata
from workout_log.api.v1 import api_router
from workout_log.core.config import Settings, get_settings
from workout_log.core.errors import WorkoutLogError
from workout_log.core.logging import configure_logging
from workout_log.db.session import Database
from workout_log.repositories.workouts import INVALID_WORKOUT_DATA

logger = logging.getLogger(__name__)


def _cors_origins(settings: Settings) -> list[str]:
    # CORS: allow localhost in dev; in production use CORS_ORIGINS env (comma-separated)
    if settings.debug:
        return ["*"]
    if settings.environment == "development":
        return ["http://localhost:3000", "http://127.0.0.1:3000"]
    return [o.strip() for o in settings.cors_origins.split(",") if o.strip()]


def _register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(WorkoutLogError)
    async def handle_workout_log_error(request: Request, exc: WorkoutLogError):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        logger.warning("Invalid workout data received on %s %s: %s", request.method, request.url.path, exc.errors())
        return JSONResponse(status_code=400, content={"error": INVALID_WORKOUT_DATA})

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(status_code=500, content={"error": "Internal server error"})


def create_application(settings: Settings | None = None) -> FastAPI:
    """Build the app. Tests pass their own Settings; otherwise they come from the environment."""
    if settings is None:
        settings = get_settings()
    configure_logging(settings.log_level)

    database = Database.from_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup: optionally create tables (use Alembic in production); shutdown: dispose the pool."""
        if settings.create_tables:
            await database.create_all()
        yield
        await database.dispose()

    app = FastAPI(
        title=settings.app_name,
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.database = database
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=_cors_origins(settings),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    _register_exception_handlers(app)

    @app.get("/")
    def root():
        return {"status": "ok", "message": settings.app_name}

    app.include_router(api_router, prefix=settings.api_prefix)
    logger.info("%s configured (environment=%s)", settings.app_name, settings.environment)
    return app


app = create_application()
