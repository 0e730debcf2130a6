"""
API Request Data Models

Defines input data structures for all API endpoints,
following Pydantic validation rules.
"""

from pydantic import BaseModel, Field, field_validator


class CreateSessionRequest(BaseModel):
    """
    Request model for starting a training session.

    Attributes:
        sensor_name: Sensor to wire (e.g., 'TMP36').
        allow_pin_reuse: Accept a microcontroller pin already claimed by another
            sensor pin instead of rejecting it (deprecated behavior).
    """

    sensor_name: str = Field(..., min_length=1, examples=["DS18B20"])
    allow_pin_reuse: bool = False


class ConnectRequest(BaseModel):
    """
    Request model for assigning a sensor pin to a microcontroller pin.

    Attributes:
        sensor_pin: Sensor pin name (e.g., 'Vout').
        mcu_pin: Microcontroller pin name (e.g., 'PA0').
    """

    sensor_pin: str = Field(..., min_length=1, examples=["DQ"])
    mcu_pin: str = Field(..., min_length=1, examples=["PA4"])

    @field_validator("sensor_pin", "mcu_pin")
    def strip_whitespace(cls, v: str) -> str:
        """Pin names are matched exactly; surrounding whitespace is never meaningful."""
        v = v.strip()
        if not v:
            raise ValueError("Pin name must not be blank")
        return v
