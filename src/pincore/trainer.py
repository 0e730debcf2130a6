"""
Pin Trainer

Entry point for the presentation layer: reference data is loaded once, sessions
are created per selected sensor and discarded on sensor change.
"""

import logging

from pincore.catalog.pin_catalog import PinCatalog, SensorDefinition
from pincore.model.enum.pin_status_enum import ConflictPolicy
from pincore.session.training_session import TrainingSession
from pincore.util.config_manager import ConfigManager

logger = logging.getLogger("PinTrainer")


class PinTrainer:

    def __init__(self, catalog: PinCatalog):
        self.catalog = catalog

    @classmethod
    def from_config(cls, path: str | None = None) -> "PinTrainer":
        """
        Load reference data and build the trainer.

        Raises:
            ConfigError: Reference data is missing, malformed or inconsistent
        """
        schema = ConfigManager.load_pin_catalog(path)
        return cls(PinCatalog(schema))

    def list_sensors(self) -> list[SensorDefinition]:
        return self.catalog.list_sensors()

    def create_session(
        self,
        sensor: SensorDefinition | str,
        conflict_policy: ConflictPolicy = ConflictPolicy.REJECT,
    ) -> TrainingSession:
        if isinstance(sensor, str):
            sensor = self.catalog.get_sensor(sensor)

        logger.info(f"[PinTrainer] New session for {sensor.name} (conflict_policy={conflict_policy})")
        return TrainingSession(sensor, self.catalog, conflict_policy=conflict_policy)
