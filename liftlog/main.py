"""
LiftLog FastAPI application entry point.

Routes: /api/user (signup, login) and /api/workouts (bearer-token CRUD).
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from liftlog import __version__
from liftlog.config import get_settings
from liftlog.db.session import check_db_connection, engine
from liftlog.services.errors import LiftLogError, ValidationError

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: startup and shutdown."""
    logger.info("LiftLog starting")
    try:
        try:
            check_db_connection()
            logger.info("Database connection verified")
        except Exception as e:
            logger.critical("Database unreachable: %s", e)
            raise

        if not get_settings().secret_key:
            logger.warning("SECRET_KEY is not set; session tokens are signed with an empty key")

        yield
    finally:
        logger.info("LiftLog shutting down")
        engine.dispose()
        logger.info("Database connection pool closed")


def _error_response(exc: LiftLogError) -> JSONResponse:
    content: dict = {"error": exc.message}
    if isinstance(exc, ValidationError) and exc.empty_fields is not None:
        content["emptyFields"] = exc.empty_fields
    return JSONResponse(status_code=exc.status_code, content=content)


def register_error_handlers(app: FastAPI) -> None:
    """Render every API error as {"error": message}."""

    @app.exception_handler(LiftLogError)
    async def handle_liftlog_error(request: Request, exc: LiftLogError) -> JSONResponse:
        return _error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logger.info("Malformed request to %s: %s", request.url.path, exc.errors())
        return JSONResponse(status_code=400, content={"error": "Invalid request body"})

    @app.exception_handler(SQLAlchemyError)
    async def handle_database_error(request: Request, exc: SQLAlchemyError) -> JSONResponse:
        logger.error("Database error on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(status_code=500, content={"error": "Internal server error"})


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    register_error_handlers(app)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        logger.info("%s %s", request.url.path, request.method)
        return await call_next(request)

    # Mount API routes
    from liftlog.api.auth import router as auth_router
    from liftlog.api.workouts import router as workouts_router

    app.include_router(auth_router, prefix="/api/user", tags=["user"])
    app.include_router(workouts_router, prefix="/api/workouts", tags=["workouts"])

    @app.get("/health")
    def health() -> dict:
        """Health check endpoint. Confirms DB connectivity."""
        from sqlalchemy import text

        try:
            with engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return {
                "status": "ok",
                "version": __version__,
                "database": "connected",
            }
        except Exception:
            return JSONResponse(
                status_code=503,
                content={
                    "status": "unhealthy",
                    "version": __version__,
                    "database": "disconnected",
                },
            )

    return app


app = create_app()
