"""
Global Error Handling Middleware

Provides unified handling for all API error responses.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from pincore.exception import (
    ConflictError,
    PinTrainerError,
    SensorNotFoundError,
    SessionNotFoundError,
    UnknownGroupError,
    UnknownSensorPinError,
)

logger = logging.getLogger(__name__)


def add_error_handlers(app: FastAPI):
    """
    Register error handlers for the FastAPI application.

    Args:
        app: FastAPI application instance.
    """

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Handle request validation errors."""
        errors = []
        for error in exc.errors():
            errors.append(
                {"field": ".".join(str(loc) for loc in error["loc"]), "message": error["msg"], "type": error["type"]}
            )

        logger.warning(f"Validation error on {request.url.path}: {errors}")

        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"status": "error", "message": "Request validation failed", "errors": errors},
        )

    @app.exception_handler(ConflictError)
    async def conflict_error_handler(request: Request, exc: ConflictError):
        """Microcontroller pin already claimed: surfaced to the learner, state untouched."""
        logger.info(f"Conflict on {request.url.path}: {exc}")

        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content={
                "status": "error",
                "message": str(exc),
                "sensor_pin": exc.sensor_pin,
                "mcu_pin": exc.mcu_pin,
                "owner_pin": exc.owner_pin,
            },
        )

    @app.exception_handler(PinTrainerError)
    async def trainer_error_handler(request: Request, exc: PinTrainerError):
        """Handle domain errors: not-found lookups become 404, the rest 400."""
        if isinstance(exc, (SensorNotFoundError, SessionNotFoundError, UnknownGroupError, UnknownSensorPinError)):
            status_code = status.HTTP_404_NOT_FOUND
        else:
            status_code = status.HTTP_400_BAD_REQUEST

        logger.warning(f"{type(exc).__name__} on {request.url.path}: {exc}")

        return JSONResponse(status_code=status_code, content={"status": "error", "message": str(exc)})

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle unexpected errors."""
        logger.error(f"Unhandled exception on {request.url.path}: {str(exc)}", exc_info=True)

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "status": "error",
                "message": "An unexpected error occurred",
                "detail": str(exc) if logger.level == logging.DEBUG else None,
            },
        )
