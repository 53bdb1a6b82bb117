"""Error types raised by display infrastructure."""

from weather_station.core.errors import WeatherStationError


class DisplayKindNotSupportedError(WeatherStationError):
    """Raised when a listener spec names a display kind with no implementation."""

    def __init__(self, kind: str) -> None:
        super().__init__(
            f"Failed to create display: unsupported display kind '{kind}'"
        )
