"""
Training Session Service

In-memory registry of training sessions for the HTTP layer. One session wires one
sensor; changing the sensor means creating a new session.
"""

import logging
import uuid

from pincore.exception import SessionNotFoundError
from pincore.model.enum.pin_status_enum import ConflictPolicy
from pincore.session.training_session import TrainingSession
from pincore.trainer import PinTrainer

logger = logging.getLogger("SessionService")


class SessionService:

    def __init__(self, trainer: PinTrainer):
        self.trainer = trainer
        self._sessions: dict[str, TrainingSession] = {}

    def create_session(self, sensor_name: str, allow_pin_reuse: bool = False) -> tuple[str, TrainingSession]:
        policy = ConflictPolicy.ALLOW if allow_pin_reuse else ConflictPolicy.REJECT
        session = self.trainer.create_session(sensor_name, conflict_policy=policy)
        session_id = uuid.uuid4().hex
        self._sessions[session_id] = session
        logger.info(f"[SessionService] Created session {session_id} for {sensor_name}")
        return session_id, session

    def get_session(self, session_id: str) -> TrainingSession:
        session = self._sessions.get(session_id)
        if session is None:
            raise SessionNotFoundError(f"Session '{session_id}' not found")
        return session

    def delete_session(self, session_id: str) -> None:
        if self._sessions.pop(session_id, None) is None:
            raise SessionNotFoundError(f"Session '{session_id}' not found")
        logger.info(f"[SessionService] Deleted session {session_id}")

    def session_count(self) -> int:
        return len(self._sessions)
