from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from app.config import get_settings
from app.infrastructure.database import initialize_database, engine
from app.infrastructure.notifications import (
    NotificationConnectionManager,
    NotificationPublisher,
)
from app.interfaces.api.errors import register_exception_handlers
from app.interfaces.api.routes import register_routes
from app.logging_config import configure_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Prepare logging and the database on startup and release resources on shutdown."""

    configure_logging(get_settings().log_level)
    initialize_database()
    yield
    engine.dispose()


def create_app() -> FastAPI:
    """Create and configure the DevVault notifications application."""

    settings = get_settings()
    app = FastAPI(title="DevVault Notifications", lifespan=lifespan)

    # One realtime registry per process; every producer publishes through it.
    manager = NotificationConnectionManager()
    app.state.notification_manager = manager
    app.state.notification_publisher = NotificationPublisher(manager)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    register_routes(app)
    return app


app = create_app()
