"""FastAPI Dependency Injection

Centralized management of injectable services.
"""

from fastapi import Request

from pinapi.service.session_service import SessionService
from pincore.trainer import PinTrainer


def get_trainer(request: Request) -> PinTrainer:
    """Provide PinTrainer from app state."""
    return request.app.state.trainer.get_trainer()


def get_session_service(request: Request) -> SessionService:
    """Provide SessionService from app state."""
    return request.app.state.trainer.get_session_service()
