"""Startup and shutdown hooks for the FastAPI application."""

import logging

from fastapi import FastAPI

from pinapi.service.session_service import SessionService
from pincore.trainer import PinTrainer
from pincore.util.config_manager import ConfigManager

logger = logging.getLogger(__name__)


async def startup_event(app: FastAPI) -> None:
    """Load reference data; a ConfigError aborts startup."""
    logger.info("=" * 60)
    logger.info("Starting Pin Trainer API Service...")
    logger.info("=" * 60)

    state = app.state.trainer
    try:
        if state.trainer is None:
            catalog_path = ConfigManager.resolve_catalog_path()
            logger.info(f"Pin catalog: {catalog_path}")
            state.trainer = PinTrainer.from_config(str(catalog_path))
            state.catalog_path = str(catalog_path)
        else:
            logger.info("PinTrainer injected, skipping catalog load")

        if state.session_service is None:
            state.session_service = SessionService(state.trainer)

        logger.info(f"State: {state!r}")
        logger.info("API startup completed")

    except Exception as exc:
        logger.error("=" * 60)
        logger.error("STARTUP FAILED")
        logger.error("=" * 60)
        logger.error(f"Error: {exc}", exc_info=True)
        raise


async def shutdown_event(app: FastAPI) -> None:
    """Drop in-memory sessions; nothing is persisted."""
    state = app.state.trainer
    if state.session_service is not None:
        logger.info(f"Discarding {state.session_service.session_count()} session(s)")
    state.session_service = None
    logger.info("Shutdown completed")
