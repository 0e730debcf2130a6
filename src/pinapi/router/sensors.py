"""
Sensor Router

Read-only access to the sensor reference data.
"""

import logging

from fastapi import APIRouter, Depends

from pinapi.dependency import get_trainer
from pinapi.model.enums import ResponseStatus
from pinapi.model.responses import SensorInfo, SensorListResponse
from pincore.trainer import PinTrainer

router = APIRouter()

logger = logging.getLogger("SensorRouter")


@router.get(
    "/",
    response_model=SensorListResponse,
    summary="List sensors",
    description="Return every sensor the learner can pick, in display order",
)
async def list_sensors(trainer: PinTrainer = Depends(get_trainer)) -> SensorListResponse:
    sensors = [SensorInfo.from_definition(sensor) for sensor in trainer.list_sensors()]
    return SensorListResponse(
        status=ResponseStatus.SUCCESS, mcu_name=trainer.catalog.mcu_name, sensors=sensors, total_count=len(sensors)
    )


@router.get(
    "/{sensor_name}",
    response_model=SensorInfo,
    summary="Get sensor",
    description="Return pins, positions and required functions of a sensor",
)
async def get_sensor(sensor_name: str, trainer: PinTrainer = Depends(get_trainer)) -> SensorInfo:
    """
    Raises:
        SensorNotFoundError: mapped to 404 by the error handlers
    """
    return SensorInfo.from_definition(trainer.catalog.get_sensor(sensor_name))
