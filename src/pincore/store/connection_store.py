class ConnectionStore:
    """
    Mutable sensor-pin -> microcontroller-pin mapping of one training session.

    The store never validates and never rejects a write; conflict checks and
    correctness are derived by the session and the validator.
    """

    def __init__(self):
        # Insertion ordered; reassignment keeps the original slot
        self._connections: dict[str, str] = {}

    def set(self, sensor_pin: str, mcu_pin: str) -> None:
        self._connections[sensor_pin] = mcu_pin

    def get(self, sensor_pin: str) -> str | None:
        return self._connections.get(sensor_pin)

    def clear(self) -> None:
        self._connections.clear()

    def all_entries(self) -> list[tuple[str, str]]:
        return list(self._connections.items())

    def owners_of(self, mcu_pin: str) -> list[str]:
        """Sensor pins mapped to the given microcontroller pin, in insertion order"""
        return [sensor_pin for sensor_pin, target in self._connections.items() if target == mcu_pin]

    def __len__(self) -> int:
        return len(self._connections)

    def __contains__(self, sensor_pin: object) -> bool:
        return sensor_pin in self._connections
