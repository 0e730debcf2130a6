import logging

from pincore.catalog.pin_catalog import PinCatalog, SensorDefinition
from pincore.exception import UnknownGroupError
from pincore.model.enum.pin_status_enum import GroupState
from pincore.schema.pin_catalog_schema import GroupLayoutSchema, Point


class GroupLayoutResolver:
    """
    Resolves on-screen positions of microcontroller pin groups.

    At most one group is expanded at a time; expanding a group collapses the
    previously expanded one. Positions are pure functions of the layout table,
    the pin's index within its group and the pin spacing.
    """

    def __init__(self, catalog: PinCatalog, sensor: SensorDefinition | None = None):
        self.catalog = catalog
        self.layout: GroupLayoutSchema = catalog.layout
        self._group_positions: dict[str, Point] = dict(self.layout.group_positions)
        if sensor is not None and sensor.group_positions:
            self._group_positions.update(sensor.group_positions)

        self.expanded_group: str | None = None
        self.logger = logging.getLogger(__class__.__name__)

    # ----------------------------
    # Expansion state
    # ----------------------------

    def toggle(self, group: str) -> None:
        if not self.catalog.has_group(group):
            raise UnknownGroupError(f"Unknown pin group '{group}'", group=group)

        if self.expanded_group == group:
            self.expanded_group = None
        else:
            self.expanded_group = group

        self.logger.debug(f"[Layout] toggle {group} -> expanded={self.expanded_group}")

    def is_expanded(self, group: str) -> bool:
        return self.expanded_group == group

    def state_of(self, group: str) -> GroupState:
        return GroupState.EXPANDED if self.is_expanded(group) else GroupState.COLLAPSED

    def reset(self) -> None:
        self.expanded_group = None

    # ----------------------------
    # Coordinates
    # ----------------------------

    def group_position(self, group: str | None) -> Point:
        if group is None:
            return self.layout.default_group_position
        return self._group_positions.get(group, self.layout.default_group_position)

    def anchor_of(self, group: str | None) -> Point:
        """Collapsed-state anchor where all connections of the group converge"""
        base_x, base_y = self.group_position(group)
        offset_x, offset_y = self.layout.anchor_offset
        return (base_x + offset_x, base_y + offset_y)

    def position_of(self, mcu_pin: str) -> Point:
        """Exact position of a pin inside its (expanded) group"""
        group = self.catalog.group_of(mcu_pin)
        index = self.catalog.pins_in_group(group).index(mcu_pin)

        base_x, base_y = self.group_position(group)
        offset_x, offset_y = self.layout.pin_offset
        return (base_x + offset_x + index * self.layout.pin_spacing, base_y + offset_y)

    def expanded_pin_positions(self) -> dict[str, Point]:
        """Positions of every pin in the expanded group, empty when all groups are collapsed"""
        if self.expanded_group is None:
            return {}
        return {pin: self.position_of(pin) for pin in self.catalog.pins_in_group(self.expanded_group)}
