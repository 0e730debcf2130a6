from pydantic import BaseModel, Field

from pincore.model.enum.pin_function_enum import PinFunction
from pincore.model.enum.pin_status_enum import PinStatus
from pincore.schema.pin_catalog_schema import Point


class PinValidation(BaseModel):
    sensor_pin: str
    status: PinStatus
    required_function: PinFunction
    mcu_pin: str | None = None


class ConflictRecord(BaseModel):
    """Microcontroller pin claimed by more than one sensor pin"""

    mcu_pin: str
    sensor_pins: list[str]


class ValidationResult(BaseModel):
    """Projection of connections + sensor definition + catalog, recomputed on every mutation"""

    sensor_name: str
    pins: list[PinValidation] = Field(default_factory=list)
    all_correct: bool = False
    errors: list[str] = Field(default_factory=list)
    conflicts: list[ConflictRecord] = Field(default_factory=list)
    connected_count: int = 0
    total_count: int = 0

    def status_of(self, sensor_pin: str) -> PinStatus:
        for pin in self.pins:
            if pin.sensor_pin == sensor_pin:
                return pin.status
        raise KeyError(sensor_pin)

    @property
    def has_conflicts(self) -> bool:
        return bool(self.conflicts)

    @property
    def statuses(self) -> dict[str, PinStatus]:
        return {pin.sensor_pin: pin.status for pin in self.pins}


class LineGeometry(BaseModel):
    """Connector polyline between a sensor pin and its microcontroller pin"""

    sensor_pin: str
    mcu_pin: str
    points: list[Point] = Field(..., min_length=2)
    expanded: bool = Field(False, description="True when the endpoint is the exact pin, False for the group anchor")
    status: PinStatus = PinStatus.NOT_CONNECTED
