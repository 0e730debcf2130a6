"""
FastAPI Application Entry Point
Responsibilities:
- Create FastAPI instance
- Register routes
- Configure middleware
- Set up CORS
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from dotenv import load_dotenv

env_path = Path(__file__).parent.parent.parent / ".env"
if env_path.exists():
    load_dotenv(dotenv_path=env_path)

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pinapi.app_state import TrainerAppState
from pinapi.lifecycle import shutdown_event, startup_event
from pinapi.middleware.error_handler import add_error_handlers
from pinapi.middleware.logging_middleware import LoggingMiddleware
from pinapi.router import health, sensors, sessions
from pincore.util.config_manager import ConfigManager
from pincore.util.logger_config import setup_logging

logger = logging.getLogger("PinTrainerAPI")

# Configure logging
setup_logging(
    log_level=str(ConfigManager.parse_env_var_with_default("${PINTRAINER_LOG_LEVEL:-INFO}")),
    log_to_file=ConfigManager.parse_env_var_with_default("${PINTRAINER_LOG_TO_FILE:-false}") is True,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifecycle management"""
    await startup_event(app)
    try:
        yield
    finally:
        await shutdown_event(app)


def create_application(state: TrainerAppState | None = None) -> FastAPI:
    """
    Create and configure a FastAPI application

    Args:
        state: Pre-built application state (e.g., with an injected PinTrainer)

    Returns:
        FastAPI: Configured FastAPI application instance
    """
    app = FastAPI(
        title="Pin Trainer API",
        description="Sensor-to-microcontroller wiring trainer: connections, validation and layout",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.trainer = state or TrainerAppState()

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Restrict origins in production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register middleware
    app.add_middleware(LoggingMiddleware)

    # Register error handlers
    add_error_handlers(app)

    # Register routes
    app.include_router(health.router, prefix="/api", tags=["Health"])
    app.include_router(sensors.router, prefix="/api/sensors", tags=["Sensors"])
    app.include_router(sessions.router, prefix="/api/sessions", tags=["Sessions"])

    return app


app = create_application()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
