"""Error types raised by the weather station during notification."""

from dataclasses import dataclass

from weather_station.core.errors import WeatherStationError
from weather_station.station.domain.topic import Topic


@dataclass(frozen=True)
class ListenerFailure:
    """One listener that raised during a notification pass."""

    topic: Topic
    listener: str
    error: Exception


class ListenerNotificationError(WeatherStationError):
    """Raised after a full fan-out in which one or more listeners raised.

    Every listener of the pass has already been invoked when this is raised.
    """

    def __init__(self, topic: Topic, failures: list[ListenerFailure]) -> None:
        self.topic = topic
        self.failures = failures
        names = ", ".join(failure.listener for failure in failures)
        super().__init__(
            f"Failed to notify {topic} listeners: {len(failures)} listener(s)"
            f" raised: {names}"
        )

