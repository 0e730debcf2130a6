"""
Pin Catalog Schema Definition
Defines the reference-data schema: microcontroller pins, sensors and the group layout table

Example configuration:
    mcu_pins:
      - name: "PA0"
        functions: ["GPIO", "ADC"]
    sensors:
      - name: "TMP36"
        interfaces: ["Analog"]
        pins: ["GND", "Vout", "Vdd"]
        pin_positions:
          GND: [80, 290]
        correct_connections:
          GND: "GND"
    layout:
      pin_spacing: 30
      group_positions:
        A: [190, 310]
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pincore.model.enum.pin_function_enum import PinFunction

Point = tuple[float, float]


class McuPinSchema(BaseModel):
    """A single microcontroller pin and the functions it supports"""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Unique pin name (e.g., 'PA0', 'GND')")
    functions: frozenset[PinFunction] = Field(..., min_length=1, description="Supported electrical functions")


class SensorSchema(BaseModel):
    """Sensor reference data (immutable)"""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Sensor name (e.g., 'TMP36')")
    interfaces: tuple[str, ...] = Field(default=(), description="Bus interfaces (e.g., 'Analog', 'I2C')")
    pins: tuple[str, ...] = Field(..., min_length=1, description="Ordered sensor pin names")
    pin_positions: dict[str, Point] = Field(..., description="Screen anchor per sensor pin")
    correct_connections: dict[str, PinFunction] = Field(..., description="Required function per sensor pin")
    group_positions: dict[str, Point] | None = Field(
        None, description="Optional per-sensor override of the group base positions"
    )
    image: str | None = Field(None, description="Image asset path for the presentation layer")


class GroupLayoutSchema(BaseModel):
    """Layout constants for pin groups and connector lines"""

    model_config = ConfigDict(frozen=True)

    group_positions: dict[str, Point] = Field(
        default_factory=lambda: {
            "A": (190, 310),
            "B": (190, 410),
            "C": (450, 310),
            "D": (450, 410),
            "Others": (450, 410),
        },
        description="Base position per group key",
    )
    default_group_position: Point = Field((60, 310), description="Base position for groups missing in the table")
    pin_offset: Point = Field((-10, 60), description="Offset of the first expanded pin from the group base")
    pin_spacing: float = Field(30, gt=0, description="Horizontal distance between expanded pins")
    anchor_offset: Point = Field((90, 20), description="Offset of the collapsed anchor from the group base")
    sensor_line_offset: float = Field(50, description="Lateral displacement of the sensor-side line endpoint")


class PinCatalogSchema(BaseModel):
    """Complete reference data configuration"""

    model_config = ConfigDict(frozen=True)

    mcu_name: str = Field("STM32F103", description="Microcontroller display name")
    mcu_pins: tuple[McuPinSchema, ...] = Field(..., min_length=1, description="Cataloged microcontroller pins")
    sensors: tuple[SensorSchema, ...] = Field(default=(), description="Available sensors in display order")
    layout: GroupLayoutSchema = Field(default_factory=GroupLayoutSchema)

    @field_validator("mcu_pins", mode="before")
    @classmethod
    def accept_mapping_form(cls, v):
        """Allow `mcu_pins` as a {name: [functions]} mapping"""
        if isinstance(v, dict):
            return [{"name": name, "functions": functions} for name, functions in v.items()]
        return v
