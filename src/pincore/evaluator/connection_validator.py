"""
Connection Validator

Full-pass validation of a session's connections against the sensor definition
and the pin catalog. Outcomes are data (ValidationResult), never exceptions;
only inconsistent reference data raises (ConfigError).

Per-pin rules:
- no connection                                   -> not-connected
- unknown pin, or required function not supported -> incorrect
- otherwise                                       -> correct

Conflicts (one microcontroller pin claimed by several sensor pins) are reported
independently of per-pin correctness.
"""

import logging

from pincore.catalog.pin_catalog import PinCatalog, SensorDefinition
from pincore.exception import UnknownPinError
from pincore.model.enum.pin_function_enum import PinFunction
from pincore.model.enum.pin_status_enum import PinStatus
from pincore.model.validation_model import ConflictRecord, PinValidation, ValidationResult
from pincore.store.connection_store import ConnectionStore


class ConnectionValidator:

    def __init__(self):
        self.logger = logging.getLogger(__class__.__name__)

    def validate(self, sensor: SensorDefinition, store: ConnectionStore, catalog: PinCatalog) -> ValidationResult:
        pins: list[PinValidation] = []
        errors: list[str] = []
        connected_count = 0

        for sensor_pin in sensor.pins:
            required = catalog.required_function(sensor, sensor_pin)
            mcu_pin = store.get(sensor_pin)

            if mcu_pin is None:
                pins.append(
                    PinValidation(sensor_pin=sensor_pin, status=PinStatus.NOT_CONNECTED, required_function=required)
                )
                errors.append(f"{sensor_pin} is not connected")
                continue

            connected_count += 1
            if self._supports(catalog, mcu_pin, required):
                status = PinStatus.CORRECT
            else:
                status = PinStatus.INCORRECT
                errors.append(
                    f"{sensor_pin} must be connected to a pin supporting {required}, but is connected to {mcu_pin}"
                )

            pins.append(
                PinValidation(sensor_pin=sensor_pin, status=status, required_function=required, mcu_pin=mcu_pin)
            )

        conflicts = self.find_conflicts(store)
        for conflict in conflicts:
            errors.append(f"{conflict.mcu_pin} is used by more than one pin: {', '.join(conflict.sensor_pins)}")

        all_correct = connected_count == len(sensor.pins) and all(pin.status == PinStatus.CORRECT for pin in pins)

        self.logger.debug(
            f"[Validator] {sensor.name}: connected={connected_count}/{len(sensor.pins)}, "
            f"all_correct={all_correct}, conflicts={len(conflicts)}"
        )

        return ValidationResult(
            sensor_name=sensor.name,
            pins=pins,
            all_correct=all_correct,
            errors=errors,
            conflicts=conflicts,
            connected_count=connected_count,
            total_count=len(sensor.pins),
        )

    @staticmethod
    def find_conflicts(store: ConnectionStore) -> list[ConflictRecord]:
        """Microcontroller pins targeted by more than one sensor pin, in first-claim order"""
        claims: dict[str, list[str]] = {}
        for sensor_pin, mcu_pin in store.all_entries():
            claims.setdefault(mcu_pin, []).append(sensor_pin)

        return [
            ConflictRecord(mcu_pin=mcu_pin, sensor_pins=sensor_pins)
            for mcu_pin, sensor_pins in claims.items()
            if len(sensor_pins) > 1
        ]

    def _supports(self, catalog: PinCatalog, mcu_pin: str, required: PinFunction) -> bool:
        try:
            return required in catalog.functions_of(mcu_pin)
        except UnknownPinError:
            self.logger.info(f"[Validator] '{mcu_pin}' is not a cataloged pin, marking as incorrect")
            return False
