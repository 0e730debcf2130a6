from pincore.evaluator.connection_validator import ConnectionValidator
from pincore.layout.group_layout_resolver import GroupLayoutResolver
from pincore.model.enum.pin_status_enum import PinStatus
from pincore.routing.line_router import route_all, route_line
from pincore.store.connection_store import ConnectionStore


class TestRouteLine:

    def test_when_group_collapsed_then_line_ends_at_group_anchor(self, catalog):
        # Arrange
        sensor = catalog.get_sensor("TMP36")
        layout = GroupLayoutResolver(catalog, sensor)

        # Act
        points = route_line("Vout", "PA1", sensor, layout)

        # Assert
        assert points == [(150, 290), (280, 330)]

    def test_when_group_expanded_then_line_ends_at_pin(self, catalog):
        sensor = catalog.get_sensor("TMP36")
        layout = GroupLayoutResolver(catalog, sensor)

        layout.toggle("A")
        points = route_line("Vout", "PA1", sensor, layout)

        assert points == [(150, 290), (210, 370)]

    def test_when_other_group_expanded_then_line_still_converges_on_anchor(self, catalog):
        sensor = catalog.get_sensor("TMP36")
        layout = GroupLayoutResolver(catalog, sensor)

        layout.toggle("B")

        assert route_line("Vout", "PA1", sensor, layout)[-1] == layout.anchor_of("A")

    def test_collapsed_group_lines_share_one_endpoint(self, catalog):
        sensor = catalog.get_sensor("DS18B20")
        layout = GroupLayoutResolver(catalog, sensor)

        gnd = route_line("GND", "GND", sensor, layout)
        vdd = route_line("Vdd", "VCC", sensor, layout)

        assert gnd[-1] == vdd[-1] == (540, 430)
        assert gnd[0] == (125, 300)
        assert vdd[0] == (169, 300)

    def test_uncataloged_pin_is_routed_to_default_anchor(self, catalog):
        sensor = catalog.get_sensor("TMP36")
        layout = GroupLayoutResolver(catalog, sensor)

        assert route_line("Vout", "XYZ", sensor, layout)[-1] == (150, 330)


class TestRouteAll:

    def test_lines_follow_store_and_carry_status(self, catalog):
        # Arrange
        sensor = catalog.get_sensor("DS18B20")
        layout = GroupLayoutResolver(catalog, sensor)
        store = ConnectionStore()
        store.set("DQ", "PB6")
        store.set("GND", "GND")
        result = ConnectionValidator().validate(sensor, store, catalog)

        # Act
        layout.toggle("B")
        lines = route_all(sensor, store, layout, result)

        # Assert
        assert list(lines) == ["DQ", "GND"]
        assert lines["DQ"].points == [(147, 300), (240, 470)]
        assert lines["DQ"].expanded is True
        assert lines["DQ"].status == PinStatus.INCORRECT
        assert lines["GND"].expanded is False
        assert lines["GND"].status == PinStatus.CORRECT

    def test_no_connections_no_lines(self, catalog):
        sensor = catalog.get_sensor("TMP36")

        assert route_all(sensor, ConnectionStore(), GroupLayoutResolver(catalog, sensor)) == {}
