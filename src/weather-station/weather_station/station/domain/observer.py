"""StationObserver port — events emitted by the weather station itself."""

from typing import Protocol

from weather_station.station.domain.topic import Topic


class StationObserver(Protocol):
    """Observer port for station domain events.

    Implementations may print status lines, log to structlog, or record for tests.
    """

    def temperature_changed(self, celsius: float) -> None: ...

    def condition_changed(self, condition: str) -> None: ...

    def listener_failed(self, topic: Topic, listener: str, reason: str) -> None: ...
