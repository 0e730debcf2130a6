from pathlib import Path

import pytest

from pincore.catalog.pin_catalog import PinCatalog
from pincore.trainer import PinTrainer
from pincore.util.config_manager import ConfigManager

CATALOG_PATH = Path(__file__).resolve().parent.parent / "res" / "pin_catalog.yml"


@pytest.fixture
def catalog_path() -> Path:
    return CATALOG_PATH


@pytest.fixture
def catalog() -> PinCatalog:
    """Catalog built from the bundled res/pin_catalog.yml"""
    return PinCatalog(ConfigManager.load_pin_catalog(str(CATALOG_PATH)))


@pytest.fixture
def trainer(catalog) -> PinTrainer:
    return PinTrainer(catalog)


@pytest.fixture
def raw_catalog() -> dict:
    """Minimal valid catalog as it would come out of YAML"""
    return {
        "mcu_pins": [
            {"name": "GND", "functions": ["GND"]},
            {"name": "VCC", "functions": ["VCC"]},
            {"name": "PA0", "functions": ["GPIO", "ADC"]},
            {"name": "PB6", "functions": ["I2C_SCL"]},
        ],
        "sensors": [
            {
                "name": "TMP36",
                "interfaces": ["Analog"],
                "pins": ["GND", "Vout", "Vdd"],
                "pin_positions": {"GND": [80, 290], "Vout": [100, 290], "Vdd": [120, 290]},
                "correct_connections": {"GND": "GND", "Vout": "ADC", "Vdd": "VCC"},
            }
        ],
    }
