import pytest
import yaml
from fastapi.testclient import TestClient

from pinapi.app import create_application
from pinapi.app_state import TrainerAppState
from pincore.exception import ConfigError
from pincore.util.config_manager import CATALOG_PATH_ENV


@pytest.fixture
def client(trainer):
    app = create_application(TrainerAppState(trainer=trainer))
    with TestClient(app) as test_client:
        yield test_client


class TestSensorRouter:

    def test_list_sensors(self, client):
        response = client.get("/api/sensors/")

        assert response.status_code == 200
        data = response.json()
        assert data["total_count"] == 3
        assert data["mcu_name"] == "STM32F103"
        assert [sensor["name"] for sensor in data["sensors"]] == ["TMP36", "DS18B20", "LM75A"]

    def test_get_sensor(self, client):
        data = client.get("/api/sensors/LM75A").json()

        assert data["pins"] == ["GND", "SDA", "SCL", "Vdd"]
        assert data["interfaces"] == ["I2C"]
        assert data["required_functions"]["SCL"] == "I2C_SCL"
        assert data["pin_positions"]["SCL"] == [10.0, 195.0]

    def test_get_unknown_sensor_then_404(self, client):
        response = client.get("/api/sensors/BME280")

        assert response.status_code == 404
        assert "BME280" in response.json()["message"]

    def test_health(self, client):
        assert client.get("/api/health").json()["status"] == "healthy"


class TestStartup:

    def test_when_catalog_loaded_from_env_then_sensors_available(self, tmp_path, raw_catalog, monkeypatch):
        # Arrange
        config_file = tmp_path / "catalog.yml"
        config_file.write_text(yaml.safe_dump(raw_catalog), encoding="utf-8")
        monkeypatch.setenv(CATALOG_PATH_ENV, str(config_file))

        # Act
        with TestClient(create_application()) as client:
            data = client.get("/api/sensors/").json()

        # Assert
        assert [sensor["name"] for sensor in data["sensors"]] == ["TMP36"]

    def test_when_catalog_inconsistent_then_startup_aborts(self, tmp_path, raw_catalog, monkeypatch):
        # Arrange
        raw_catalog["mcu_pins"].append({"name": "NRST", "functions": ["GPIO"]})
        config_file = tmp_path / "catalog.yml"
        config_file.write_text(yaml.safe_dump(raw_catalog), encoding="utf-8")
        monkeypatch.setenv(CATALOG_PATH_ENV, str(config_file))

        # Act & Assert
        with pytest.raises(ConfigError):
            with TestClient(create_application()):
                pass
