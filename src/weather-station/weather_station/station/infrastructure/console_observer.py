"""ConsoleStationObserver — prints human-readable station status lines."""

import typer

from weather_station.core.formatting import format_number
from weather_station.station.domain.topic import Topic

_TAG = "[WeatherStation]"


class ConsoleStationObserver:
    """Writes one status line per state change to stdout, after a blank line.

    Listener failures are left to the structured log.

    Does NOT inherit from StationObserver (structural typing via Protocol).
    """

    def temperature_changed(self, celsius: float) -> None:
        typer.echo("")
        typer.echo(f"{_TAG} New temperature: {format_number(celsius)}°C")

    def condition_changed(self, condition: str) -> None:
        typer.echo("")
        typer.echo(f"{_TAG} Weather condition changed to: {condition}")

    def listener_failed(self, topic: Topic, listener: str, reason: str) -> None:
        pass
