"""
Pin Trainer FastAPI Application State

Centralized state management with type safety and runtime validation.
"""

from pydantic import BaseModel, ConfigDict, Field

from pinapi.service.session_service import SessionService
from pincore.trainer import PinTrainer


class TrainerAppState(BaseModel):
    """
    Shared state of the FastAPI application.

    `trainer` may be injected before startup (tests, embedding); otherwise the
    lifecycle hook loads it from the catalog configuration.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, validate_assignment=True, extra="forbid")

    trainer: PinTrainer | None = Field(default=None, description="Loaded reference data and session factory")
    session_service: SessionService | None = Field(default=None, description="In-memory training sessions")
    catalog_path: str | None = Field(default=None, description="Path the catalog was loaded from")

    def get_trainer(self) -> PinTrainer:
        if self.trainer is None:
            raise RuntimeError("PinTrainer not initialized")
        return self.trainer

    def get_session_service(self) -> SessionService:
        if self.session_service is None:
            raise RuntimeError("SessionService not initialized")
        return self.session_service

    def __repr__(self) -> str:
        sensors = len(self.trainer.list_sensors()) if self.trainer else 0
        sessions = self.session_service.session_count() if self.session_service else 0
        return f"TrainerAppState(sensors={sensors}, sessions={sessions}, catalog={self.catalog_path})"
