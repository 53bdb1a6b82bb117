"""Error types raised by scenario validation."""

from weather_station.core.errors import WeatherStationError


class ScenarioValidationError(WeatherStationError):
    """Raised when a scenario fails schema or semantic validation."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to validate scenario: {reason}")
