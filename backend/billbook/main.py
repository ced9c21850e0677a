from typing import Optional
import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi_jwt import JwtAccessBearer
from billbook.core.config import Settings
from billbook.core.errors import register_exception_handlers
from billbook.core.logging import configure_logging
from billbook.db.session import create_db_engine, create_tables

logger = structlog.get_logger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application.

    Run with ``uvicorn --factory billbook.main:create_app``; without an
    explicit ``settings`` the environment must provide SECRET_KEY and
    DATABASE_URL.
    """
    if settings is None:
        settings = Settings()

    configure_logging(settings)

    app = FastAPI(
        title="Billbook API",
        version="1.0.0"
    )

    app.state.settings = settings
    app.state.engine = create_db_engine(settings.DATABASE_URL)
    app.state.access_security = JwtAccessBearer(
        secret_key=settings.SECRET_KEY,
        auto_error=False,
        access_expires_delta=settings.jwt_expires_delta
    )
    create_tables(app.state.engine)

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    from billbook.api import (
        auth,
        users,
        orders,
        admin_stats,
        admin_orders,
        admin_users
    )

    app.include_router(auth.router)
    app.include_router(users.router)
    app.include_router(orders.router)
    app.include_router(admin_stats.router)
    app.include_router(admin_orders.router)
    app.include_router(admin_users.router)

    @app.get("/")
    def root():
        return {"status": "ok", "service": "billbook-api"}

    @app.get("/api/health")
    def health_check():
        return {
            "status": "healthy",
            "env": settings.ENV
        }

    logger.info("Application configured", env=settings.ENV)
    return app
