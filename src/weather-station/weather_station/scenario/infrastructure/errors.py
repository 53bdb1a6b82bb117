"""Error types raised by scenario infrastructure."""

from pathlib import Path

from weather_station.core.errors import WeatherStationError


class ScenarioLoadError(WeatherStationError):
    """Raised when the scenario file cannot be opened or parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Failed to load scenario: {path}: {reason}")
