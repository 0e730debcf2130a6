"""Pin Trainer Exception Definitions"""


class PinTrainerError(Exception):
    """Base exception for the pin trainer"""

    pass


class ConfigError(PinTrainerError):
    """Malformed or inconsistent reference data (fatal at load time)"""

    pass


class UnknownSensorPinError(ConfigError):
    """A sensor pin name that the active sensor does not define"""

    def __init__(self, message: str, sensor_name: str | None = None, sensor_pin: str | None = None):
        super().__init__(message)
        self.sensor_name = sensor_name
        self.sensor_pin = sensor_pin


class UnknownPinError(PinTrainerError):
    """Microcontroller pin not present in the catalog"""

    def __init__(self, message: str, pin_name: str | None = None):
        super().__init__(message)
        self.pin_name = pin_name


class UnknownGroupError(PinTrainerError):
    """Pin group key not present in the catalog"""

    def __init__(self, message: str, group: str | None = None):
        super().__init__(message)
        self.group = group


class SensorNotFoundError(PinTrainerError):
    """Sensor not found"""

    pass


class SessionNotFoundError(PinTrainerError):
    """Training session not found"""

    pass


class ConflictError(PinTrainerError):
    """Microcontroller pin already claimed by a different sensor pin"""

    def __init__(self, sensor_pin: str, mcu_pin: str, owner_pin: str):
        super().__init__(f"Cannot connect {sensor_pin} to {mcu_pin}: pin already in use by {owner_pin}")
        self.sensor_pin = sensor_pin
        self.mcu_pin = mcu_pin
        self.owner_pin = owner_pin
