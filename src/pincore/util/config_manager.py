import os
import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from pincore.exception import ConfigError
from pincore.schema.pin_catalog_schema import PinCatalogSchema

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent.parent.parent.parent / "res" / "pin_catalog.yml"
CATALOG_PATH_ENV = "PINTRAINER_CATALOG_CONFIG"


class ConfigManager:

    @staticmethod
    def load_yaml_file(path: str) -> dict:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f)

    @staticmethod
    def parse_env_var_with_default(value: str) -> bool | int | float | str | None:
        match = re.match(r"\$\{(\w+)(?::-([^\}]*))?\}", value)  # Match ${VAR_NAME:-default} or ${VAR_NAME}
        if not match:
            return value

        var_name = match.group(1)
        default_value = match.group(2)

        resolved_value = os.getenv(var_name) or default_value
        if resolved_value is not None:
            return ConfigManager._parse_value_by_type(resolved_value)
        return None

    @staticmethod
    def _parse_value_by_type(value: str) -> bool | int | float | str:
        lowered = value.strip().lower()
        if lowered in ("true", "yes", "on"):
            return True
        if lowered in ("false", "no", "off"):
            return False
        try:
            return int(value)
        except ValueError:
            pass
        try:
            return float(value)
        except ValueError:
            return value

    @staticmethod
    def resolve_catalog_path(path: str | None = None) -> Path:
        """Explicit path > PINTRAINER_CATALOG_CONFIG > bundled res/pin_catalog.yml"""
        if path:
            return Path(path)
        return Path(os.getenv(CATALOG_PATH_ENV, str(DEFAULT_CATALOG_PATH)))

    @staticmethod
    def load_pin_catalog(path: str | None = None) -> PinCatalogSchema:
        """
        Load and validate the pin catalog configuration

        Raises:
            ConfigError: File missing, unreadable YAML or schema violation
        """
        file_path = ConfigManager.resolve_catalog_path(path)

        if not file_path.exists():
            raise ConfigError(f"Pin catalog file not found: {file_path}")

        try:
            raw_config = ConfigManager.load_yaml_file(str(file_path))
        except yaml.YAMLError as e:
            raise ConfigError(f"Failed to load pin catalog from {file_path}: {e}") from e

        if not isinstance(raw_config, dict):
            raise ConfigError(f"Pin catalog {file_path} must be a mapping, got {type(raw_config).__name__}")

        try:
            return PinCatalogSchema(**raw_config)
        except ValidationError as e:
            raise ConfigError(f"Invalid pin catalog config in {file_path}: {e}") from e
