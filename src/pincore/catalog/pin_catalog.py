"""
Pin Catalog

Process-wide immutable reference data: microcontroller pins with their functions,
pin groups and sensor definitions.

Group derivation:
- `P<Letter><Digits>` (e.g. PA0, PB12) belongs to group `<Letter>`
- `GND` and `VCC` belong to the reserved `Others` group
- Anything else has no group and is rejected at load time
"""

import logging
import re
from dataclasses import dataclass

from pincore.exception import (
    ConfigError,
    SensorNotFoundError,
    UnknownGroupError,
    UnknownPinError,
    UnknownSensorPinError,
)
from pincore.model.enum.pin_function_enum import PinFunction
from pincore.schema.pin_catalog_schema import GroupLayoutSchema, McuPinSchema, PinCatalogSchema, SensorSchema

logger = logging.getLogger("PinCatalog")

OTHERS_GROUP = "Others"
POWER_PIN_NAMES = frozenset({"GND", "VCC"})
_PORT_PIN_PATTERN = re.compile(r"^P([A-Z])(\d+)$")

SensorDefinition = SensorSchema


@dataclass(frozen=True)
class PinGroup:
    key: str
    pin_names: tuple[str, ...]


def derive_group_key(pin_name: str) -> str | None:
    """Return the group key for a pin name, or None when the name follows no rule"""
    if pin_name in POWER_PIN_NAMES:
        return OTHERS_GROUP
    match = _PORT_PIN_PATTERN.match(pin_name)
    if match:
        return match.group(1)
    return None


class PinCatalog:
    """Read-only lookups over validated reference data"""

    def __init__(self, schema: PinCatalogSchema):
        self.schema = schema
        self._pins: dict[str, McuPinSchema] = {}
        self._groups: dict[str, PinGroup] = {}
        self._sensors: dict[str, SensorDefinition] = {}

        self._load_pins(schema.mcu_pins)
        self._load_sensors(schema.sensors)

        logger.info(
            f"[PinCatalog] Loaded {len(self._pins)} pin(s) in {len(self._groups)} group(s), "
            f"{len(self._sensors)} sensor(s)"
        )

    # ----------------------------
    # Loading
    # ----------------------------

    def _load_pins(self, pins: tuple[McuPinSchema, ...]) -> None:
        grouped: dict[str, list[str]] = {}
        for pin in pins:
            if pin.name in self._pins:
                raise ConfigError(f"Duplicate microcontroller pin '{pin.name}'")

            group_key = derive_group_key(pin.name)
            if group_key is None:
                raise ConfigError(f"Pin '{pin.name}' does not belong to any group")

            self._pins[pin.name] = pin
            grouped.setdefault(group_key, []).append(pin.name)

        self._groups = {key: PinGroup(key=key, pin_names=tuple(names)) for key, names in grouped.items()}

    def _load_sensors(self, sensors: tuple[SensorDefinition, ...]) -> None:
        supported: set[PinFunction] = set()
        for pin in self._pins.values():
            supported.update(pin.functions)

        for sensor in sensors:
            if sensor.name in self._sensors:
                raise ConfigError(f"Duplicate sensor '{sensor.name}'")

            if len(set(sensor.pins)) != len(sensor.pins):
                raise ConfigError(f"Sensor '{sensor.name}' has duplicate pin names: {list(sensor.pins)}")

            pin_set = set(sensor.pins)
            if set(sensor.correct_connections) != pin_set:
                raise ConfigError(
                    f"Sensor '{sensor.name}' required connections {sorted(sensor.correct_connections)} "
                    f"do not match its pins {sorted(pin_set)}"
                )

            missing_positions = pin_set - set(sensor.pin_positions)
            if missing_positions:
                raise ConfigError(f"Sensor '{sensor.name}' has no position for pin(s) {sorted(missing_positions)}")

            for sensor_pin, function in sensor.correct_connections.items():
                if function not in supported:
                    raise ConfigError(
                        f"Sensor '{sensor.name}' pin '{sensor_pin}' requires {function}, "
                        f"which no cataloged pin supports"
                    )

            self._sensors[sensor.name] = sensor

    # ----------------------------
    # Pins and groups
    # ----------------------------

    @property
    def mcu_name(self) -> str:
        return self.schema.mcu_name

    @property
    def layout(self) -> GroupLayoutSchema:
        return self.schema.layout

    def has_pin(self, pin_name: str) -> bool:
        return pin_name in self._pins

    def pin_names(self) -> list[str]:
        return list(self._pins)

    def functions_of(self, pin_name: str) -> frozenset[PinFunction]:
        pin = self._pins.get(pin_name)
        if pin is None:
            raise UnknownPinError(f"Unknown microcontroller pin '{pin_name}'", pin_name=pin_name)
        return pin.functions

    def group_of(self, pin_name: str) -> str:
        if pin_name not in self._pins:
            raise UnknownPinError(f"Unknown microcontroller pin '{pin_name}'", pin_name=pin_name)
        # Total over cataloged pins, checked in _load_pins
        return derive_group_key(pin_name)

    def groups(self) -> dict[str, PinGroup]:
        return dict(self._groups)

    def has_group(self, group: str) -> bool:
        return group in self._groups

    def pins_in_group(self, group: str) -> tuple[str, ...]:
        pin_group = self._groups.get(group)
        if pin_group is None:
            raise UnknownGroupError(f"Unknown pin group '{group}'", group=group)
        return pin_group.pin_names

    # ----------------------------
    # Sensors
    # ----------------------------

    def list_sensors(self) -> list[SensorDefinition]:
        return list(self._sensors.values())

    def get_sensor(self, name: str) -> SensorDefinition:
        sensor = self._sensors.get(name)
        if sensor is None:
            raise SensorNotFoundError(f"Sensor '{name}' not found")
        return sensor

    @staticmethod
    def required_function(sensor: SensorDefinition, sensor_pin: str) -> PinFunction:
        function = sensor.correct_connections.get(sensor_pin)
        if function is None:
            raise UnknownSensorPinError(
                f"Sensor '{sensor.name}' has no pin '{sensor_pin}'", sensor_name=sensor.name, sensor_pin=sensor_pin
            )
        return function
