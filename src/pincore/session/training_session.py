import logging
import warnings

from pincore.catalog.pin_catalog import PinCatalog, SensorDefinition
from pincore.evaluator.connection_validator import ConnectionValidator
from pincore.exception import ConflictError, UnknownSensorPinError
from pincore.layout.group_layout_resolver import GroupLayoutResolver
from pincore.model.enum.pin_status_enum import ConflictPolicy, GroupState
from pincore.model.validation_model import LineGeometry, ValidationResult
from pincore.routing.line_router import route_all
from pincore.store.connection_store import ConnectionStore


class TrainingSession:
    """
    One learner wiring one sensor.

    Owns a fresh ConnectionStore and GroupLayoutResolver. Every mutation is
    followed by a full recomputation of validation and line geometry, so callers
    always observe the post-mutation state.
    """

    def __init__(
        self,
        sensor: SensorDefinition,
        catalog: PinCatalog,
        conflict_policy: ConflictPolicy = ConflictPolicy.REJECT,
        validator: ConnectionValidator | None = None,
    ):
        self.sensor = sensor
        self.catalog = catalog
        self.conflict_policy = conflict_policy
        self.validator = validator or ConnectionValidator()

        self.store = ConnectionStore()
        self.layout = GroupLayoutResolver(catalog, sensor)
        self.logger = logging.getLogger(__class__.__name__)

        if conflict_policy == ConflictPolicy.ALLOW:
            warnings.warn(
                "ConflictPolicy.ALLOW is deprecated; reused pins are only flagged by validation",
                DeprecationWarning,
                stacklevel=2,
            )

        self._result: ValidationResult = self.validator.validate(self.sensor, self.store, self.catalog)
        self._lines: dict[str, LineGeometry] = {}

    # ----------------------------
    # Mutations
    # ----------------------------

    def connect(self, sensor_pin: str, mcu_pin: str) -> None:
        """
        Assign a sensor pin to a microcontroller pin.

        Raises:
            UnknownSensorPinError: sensor_pin is not a pin of the active sensor
            ConflictError: mcu_pin is claimed by another sensor pin (REJECT policy);
                the store is left untouched
        """
        if sensor_pin not in self.sensor.pins:
            raise UnknownSensorPinError(
                f"Sensor '{self.sensor.name}' has no pin '{sensor_pin}'",
                sensor_name=self.sensor.name,
                sensor_pin=sensor_pin,
            )

        owner = self._other_owner(sensor_pin, mcu_pin)
        if owner is not None:
            if self.conflict_policy == ConflictPolicy.REJECT:
                self.logger.info(f"[Session] Rejected {sensor_pin} -> {mcu_pin}: already used by {owner}")
                raise ConflictError(sensor_pin=sensor_pin, mcu_pin=mcu_pin, owner_pin=owner)
            self.logger.warning(f"[Session] {mcu_pin} reused by {sensor_pin} (also connected to {owner})")

        self.store.set(sensor_pin, mcu_pin)
        self.logger.info(f"[Session] {self.sensor.name}: {sensor_pin} -> {mcu_pin}")
        self._refresh()

    def toggle_group(self, group: str) -> None:
        self.layout.toggle(group)
        self._refresh_lines()

    def reset(self) -> None:
        """Restore the initial state: no connections, every group collapsed"""
        self.store.clear()
        self.layout.reset()
        self.logger.info(f"[Session] {self.sensor.name}: reset")
        self._refresh()

    # ----------------------------
    # Queries
    # ----------------------------

    def validate(self) -> ValidationResult:
        self._result = self.validator.validate(self.sensor, self.store, self.catalog)
        return self._result

    def line_geometry(self) -> dict[str, LineGeometry]:
        self._lines = route_all(self.sensor, self.store, self.layout, self._result)
        return dict(self._lines)

    @property
    def result(self) -> ValidationResult:
        """Validation result of the latest mutation"""
        return self._result

    @property
    def connections(self) -> dict[str, str]:
        return dict(self.store.all_entries())

    @property
    def expanded_group(self) -> str | None:
        return self.layout.expanded_group

    def group_states(self) -> dict[str, GroupState]:
        return {group: self.layout.state_of(group) for group in self.catalog.groups()}

    # ----------------------------
    # Internals
    # ----------------------------

    def _other_owner(self, sensor_pin: str, mcu_pin: str) -> str | None:
        others = [pin for pin in self.store.owners_of(mcu_pin) if pin != sensor_pin]
        return others[0] if others else None

    def _refresh(self) -> None:
        self.validate()
        self._refresh_lines()

    def _refresh_lines(self) -> None:
        self._lines = route_all(self.sensor, self.store, self.layout, self._result)
