"""
API Response Data Models

Defines output data structures for all API endpoints,
providing a unified response format.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from pinapi.model.enums import ResponseStatus
from pincore.catalog.pin_catalog import SensorDefinition
from pincore.model.enum.pin_function_enum import PinFunction
from pincore.model.enum.pin_status_enum import GroupState
from pincore.model.validation_model import LineGeometry, ValidationResult
from pincore.schema.pin_catalog_schema import Point
from pincore.session.training_session import TrainingSession


class BaseResponse(BaseModel):
    """
    Base response model.

    The base class for all API responses,
    providing a unified response structure.
    """

    status: ResponseStatus = Field(..., description="Response status")
    timestamp: datetime = Field(default_factory=datetime.now, description="Response timestamp")
    message: str | None = Field(None, description="Additional message")


class SensorInfo(BaseModel):
    """
    Sensor reference data as seen by the presentation layer.

    Attributes:
        name: Sensor name.
        interfaces: Bus interfaces.
        pins: Ordered sensor pin names.
        pin_positions: Screen anchor per pin.
        required_functions: Required function per pin.
    """

    name: str
    interfaces: list[str]
    pins: list[str]
    pin_positions: dict[str, Point]
    required_functions: dict[str, PinFunction]
    image: str | None = None

    @classmethod
    def from_definition(cls, sensor: SensorDefinition) -> "SensorInfo":
        return cls(
            name=sensor.name,
            interfaces=list(sensor.interfaces),
            pins=list(sensor.pins),
            pin_positions=dict(sensor.pin_positions),
            required_functions=dict(sensor.correct_connections),
            image=sensor.image,
        )


class SensorListResponse(BaseResponse):
    mcu_name: str
    sensors: list[SensorInfo]
    total_count: int


class GroupInfo(BaseModel):
    """
    Pin group layout.

    Attributes:
        key: Group key ('A', 'B', 'Others', ...).
        state: Collapsed or expanded.
        anchor: Collapsed-state anchor.
        pins: Exact pin positions, only present while expanded.
    """

    key: str
    state: GroupState
    anchor: Point
    pins: dict[str, Point] = Field(default_factory=dict)


class SessionResponse(BaseResponse):
    """
    Full state of a training session.

    Attributes:
        session_id: Session identifier.
        sensor: Sensor being wired.
        connections: sensor pin -> microcontroller pin.
        expanded_group: Currently expanded group, if any.
        groups: Layout of every pin group.
        validation: Latest validation result.
        lines: Connector geometry per connected sensor pin.
    """

    session_id: str
    sensor: str
    connections: dict[str, str]
    expanded_group: str | None
    groups: list[GroupInfo]
    validation: ValidationResult
    lines: dict[str, LineGeometry]

    @classmethod
    def from_session(cls, session_id: str, session: TrainingSession, message: str | None = None) -> "SessionResponse":
        expanded_pins = session.layout.expanded_pin_positions()
        groups = [
            GroupInfo(
                key=group,
                state=state,
                anchor=session.layout.anchor_of(group),
                pins=expanded_pins if state == GroupState.EXPANDED else {},
            )
            for group, state in session.group_states().items()
        ]
        return cls(
            status=ResponseStatus.SUCCESS,
            message=message,
            session_id=session_id,
            sensor=session.sensor.name,
            connections=session.connections,
            expanded_group=session.expanded_group,
            groups=groups,
            validation=session.result,
            lines=session.line_geometry(),
        )


class ValidationResponse(BaseResponse):
    session_id: str
    validation: ValidationResult


class LinesResponse(BaseResponse):
    session_id: str
    expanded_group: str | None
    lines: dict[str, LineGeometry]
