import pytest

from pincore.catalog.pin_catalog import PinCatalog
from pincore.evaluator.connection_validator import ConnectionValidator
from pincore.exception import ConfigError
from pincore.model.enum.pin_status_enum import PinStatus
from pincore.schema.pin_catalog_schema import PinCatalogSchema, SensorSchema
from pincore.store.connection_store import ConnectionStore


@pytest.fixture
def validator() -> ConnectionValidator:
    return ConnectionValidator()


def _store(**connections: str) -> ConnectionStore:
    store = ConnectionStore()
    for sensor_pin, mcu_pin in connections.items():
        store.set(sensor_pin, mcu_pin)
    return store


class TestPerPinStatus:

    @pytest.mark.parametrize("sensor_name", ["TMP36", "DS18B20", "LM75A"])
    def test_when_nothing_connected_then_every_pin_not_connected(self, validator, catalog, sensor_name):
        # Arrange
        sensor = catalog.get_sensor(sensor_name)

        # Act
        result = validator.validate(sensor, ConnectionStore(), catalog)

        # Assert
        assert result.all_correct is False
        assert all(status == PinStatus.NOT_CONNECTED for status in result.statuses.values())
        assert result.errors == [f"{pin} is not connected" for pin in sensor.pins]
        assert (result.connected_count, result.total_count) == (0, len(sensor.pins))

    def test_when_required_function_supported_then_correct(self, validator, catalog):
        result = validator.validate(catalog.get_sensor("TMP36"), _store(Vout="PA0"), catalog)

        assert result.status_of("Vout") == PinStatus.CORRECT

    def test_when_required_function_missing_then_incorrect(self, validator, catalog):
        result = validator.validate(catalog.get_sensor("TMP36"), _store(Vout="PB6"), catalog)

        assert result.status_of("Vout") == PinStatus.INCORRECT
        assert "Vout must be connected to a pin supporting ADC, but is connected to PB6" in result.errors

    def test_when_pin_is_not_cataloged_then_incorrect(self, validator, catalog):
        result = validator.validate(catalog.get_sensor("TMP36"), _store(Vout="PZ9"), catalog)

        assert result.status_of("Vout") == PinStatus.INCORRECT
        assert result.pins[1].mcu_pin == "PZ9"

    @pytest.mark.parametrize("mcu_pin", ["GND", "VCC", "PA0", "PA4", "PB0", "PB6", "PB7"])
    def test_correct_iff_required_function_in_pin_functions(self, validator, catalog, mcu_pin):
        sensor = catalog.get_sensor("DS18B20")

        result = validator.validate(sensor, _store(DQ=mcu_pin), catalog)

        expected = PinStatus.CORRECT if "GPIO" in catalog.functions_of(mcu_pin) else PinStatus.INCORRECT
        assert result.status_of("DQ") == expected


class TestAggregate:

    def test_when_all_pins_correct_then_all_correct(self, validator, catalog):
        result = validator.validate(catalog.get_sensor("DS18B20"), _store(GND="GND", DQ="PA4", Vdd="VCC"), catalog)

        assert result.all_correct is True
        assert result.errors == []
        assert result.connected_count == 3

    def test_when_one_pin_missing_then_not_all_correct(self, validator, catalog):
        """No partial credit"""
        result = validator.validate(catalog.get_sensor("DS18B20"), _store(GND="GND", DQ="PA4"), catalog)

        assert result.all_correct is False
        assert result.errors == ["Vdd is not connected"]

    def test_lm75a_i2c_wiring(self, validator, catalog):
        sensor = catalog.get_sensor("LM75A")

        result = validator.validate(sensor, _store(GND="GND", SDA="PB7", SCL="PB6", Vdd="VCC"), catalog)

        assert result.all_correct is True


class TestConflicts:

    def test_when_pin_used_twice_then_conflict_reported(self, validator, catalog):
        # Arrange
        store = _store(GND="GND", SDA="PB7", SCL="PB7", Vdd="VCC")

        # Act
        result = validator.validate(catalog.get_sensor("LM75A"), store, catalog)

        # Assert
        assert result.has_conflicts
        assert result.conflicts[0].mcu_pin == "PB7"
        assert result.conflicts[0].sensor_pins == ["SDA", "SCL"]
        assert "PB7 is used by more than one pin: SDA, SCL" in result.errors
        assert result.status_of("SDA") == PinStatus.CORRECT
        assert result.status_of("SCL") == PinStatus.INCORRECT

    def test_when_no_reuse_then_no_conflicts(self, validator, catalog):
        result = validator.validate(catalog.get_sensor("TMP36"), _store(GND="GND", Vout="PA0"), catalog)

        assert result.conflicts == []


class TestReferenceDataErrors:

    def test_when_sensor_pin_has_no_required_function_then_config_error(self, validator, catalog):
        """Inconsistent reference data fails loudly instead of being reported as incorrect"""
        broken = SensorSchema(
            name="BROKEN",
            pins=("GND", "OUT"),
            pin_positions={"GND": (0, 0), "OUT": (10, 0)},
            correct_connections={"GND": "GND"},
        )

        with pytest.raises(ConfigError):
            validator.validate(broken, _store(GND="GND"), catalog)

    def test_catalog_rejects_the_same_sensor_at_load_time(self, raw_catalog):
        raw_catalog["sensors"][0]["correct_connections"].pop("Vdd")

        with pytest.raises(ConfigError):
            PinCatalog(PinCatalogSchema(**raw_catalog))
