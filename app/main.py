"""FastAPI application factory and lifespan."""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api import api_router
from app.core.config import Settings, get_settings
from app.core.exceptions import register_exception_handlers
from app.db.session import Database

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Root handler at LOG_LEVEL; a no-op when logging is already configured."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: optionally create tables; shutdown: dispose the engine."""
    settings: Settings = app.state.settings
    configure_logging(settings)
    if not settings.jwt_secret:
        logger.warning("JWT_SECRET is not set; authenticated routes will fail")
    if settings.is_sqlite:
        Path(settings.sqlite_path).parent.mkdir(parents=True, exist_ok=True)
    if settings.auto_create_tables:
        # Local dev and tests only; use Alembic in production
        await app.state.db.create_all()
    yield
    await app.state.db.dispose()


def create_application(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.settings = settings
    app.state.db = Database(settings)

    # CORS: open in dev; in production use CORS_ORIGINS env (comma-separated)
    if settings.debug or settings.environment != "production":
        cors_origins = ["*"]
    else:
        cors_origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    @app.get("/")
    def root():
        return {"status": "ok", "message": settings.app_name}

    app.include_router(api_router, prefix=settings.api_prefix)
    return app


app = create_application()


def run() -> None:
    """Serve the app with uvicorn on PORT."""
    import uvicorn

    settings = get_settings()
    configure_logging(settings)
    uvicorn.run("app.main:app", host="0.0.0.0", port=settings.port, reload=settings.debug)
