"""
Line Routing

Computes connector geometry between a sensor pin and its microcontroller pin.

- Sensor side: the sensor pin anchor shifted by `sensor_line_offset` on x
- Microcontroller side: exact pin position when the owning group is expanded,
  otherwise the group's collapsed anchor (all lines of a collapsed group converge)

The same connection yields different geometry per expansion state, so routes are
recomputed on every toggle and never cached against the connection alone.
"""

import logging

from pincore.catalog.pin_catalog import SensorDefinition, derive_group_key
from pincore.layout.group_layout_resolver import GroupLayoutResolver
from pincore.model.enum.pin_status_enum import PinStatus
from pincore.model.validation_model import LineGeometry, ValidationResult
from pincore.schema.pin_catalog_schema import Point
from pincore.store.connection_store import ConnectionStore

logger = logging.getLogger("LineRouter")


def sensor_endpoint(sensor_pin: str, sensor: SensorDefinition, layout: GroupLayoutResolver) -> Point:
    x, y = sensor.pin_positions[sensor_pin]
    return (x + layout.layout.sensor_line_offset, y)


def mcu_endpoint(mcu_pin: str, layout: GroupLayoutResolver) -> tuple[Point, bool]:
    """Return (endpoint, expanded) for a microcontroller pin under the current layout state"""
    if not layout.catalog.has_pin(mcu_pin):
        # Uncataloged pins still get a line so the learner sees the mistake
        return layout.anchor_of(derive_group_key(mcu_pin)), False

    group = layout.catalog.group_of(mcu_pin)
    if layout.is_expanded(group):
        return layout.position_of(mcu_pin), True
    return layout.anchor_of(group), False


def route_line(sensor_pin: str, mcu_pin: str, sensor: SensorDefinition, layout: GroupLayoutResolver) -> list[Point]:
    start = sensor_endpoint(sensor_pin, sensor, layout)
    end, _ = mcu_endpoint(mcu_pin, layout)
    return [start, end]


def route_all(
    sensor: SensorDefinition,
    store: ConnectionStore,
    layout: GroupLayoutResolver,
    result: ValidationResult | None = None,
) -> dict[str, LineGeometry]:
    """Geometry for every connected sensor pin, in store order"""
    statuses = result.statuses if result is not None else {}
    lines: dict[str, LineGeometry] = {}

    for sensor_pin, mcu_pin in store.all_entries():
        end, expanded = mcu_endpoint(mcu_pin, layout)
        lines[sensor_pin] = LineGeometry(
            sensor_pin=sensor_pin,
            mcu_pin=mcu_pin,
            points=[sensor_endpoint(sensor_pin, sensor, layout), end],
            expanded=expanded,
            status=statuses.get(sensor_pin, PinStatus.NOT_CONNECTED),
        )

    logger.debug(f"[LineRouter] Routed {len(lines)} line(s), expanded group={layout.expanded_group}")
    return lines
