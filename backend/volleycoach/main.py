"""
Volleyball Training Planner Backend - FastAPI Application
"""
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from volleycoach.api import auth, notifications, templates, training_plans, workout_sessions, workouts
from volleycoach.core.config import Settings, settings as default_settings
from volleycoach.core.logging import get_logger, setup_logging
from volleycoach.services import NotificationService
from volleycoach.store import Store, create_store

logger = get_logger(__name__)

VERSION = "1.0.0"
DEFAULT_JWT_SECRET = Settings.model_fields["JWT_SECRET"].default


def create_app(config: Optional[Settings] = None, store: Optional[Store] = None) -> FastAPI:
    """
    Build the application.

    Args:
        config: Settings to run with (defaults to the environment)
        store: Store to use instead of the configured backend
    """
    config = config or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan events."""
        # Startup
        setup_logging()
        logger.info("Starting backend", version=VERSION, environment=config.ENVIRONMENT)

        if config.is_production and config.JWT_SECRET == DEFAULT_JWT_SECRET:
            logger.warning("JWT_SECRET is the development default; set it in production")

        app.state.store = store or create_store(config)
        await app.state.store.init()
        app.state.notifier = NotificationService(config)
        logger.info(
            "Store initialized",
            backend=app.state.store.name,
            mock_notifications=app.state.notifier.mock_mode,
        )

        yield

        # Shutdown
        await app.state.store.close()
        logger.info("Shutting down backend")

    app = FastAPI(
        title="Volleyball Training Planner API",
        description="Workouts, training plans and scheduled sessions for volleyball athletes",
        version=VERSION,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(auth.router, prefix="/api/v1/auth", tags=["auth"])
    app.include_router(workouts.router, prefix="/api/v1/workouts", tags=["workouts"])
    app.include_router(training_plans.router, prefix="/api/v1/training-plans", tags=["training-plans"])
    app.include_router(workout_sessions.router, prefix="/api/v1/workout-sessions", tags=["workout-sessions"])
    app.include_router(templates.router, prefix="/api/v1/templates", tags=["templates"])
    app.include_router(notifications.router, prefix="/api/v1/notifications", tags=["notifications"])

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "ok",
            "service": "volleycoach-backend",
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    return app


app = create_app()
