"""CompositeStationObserver — fans out all station events to a list of observers."""

from weather_station.station.domain.observer import StationObserver
from weather_station.station.domain.topic import Topic


class CompositeStationObserver:
    """Delegates every observer event to each observer in order.

    Does NOT inherit from StationObserver (structural typing via Protocol).
    """

    def __init__(self, observers: list[StationObserver]) -> None:
        self._observers = observers

    def temperature_changed(self, celsius: float) -> None:
        for obs in self._observers:
            obs.temperature_changed(celsius=celsius)

    def condition_changed(self, condition: str) -> None:
        for obs in self._observers:
            obs.condition_changed(condition=condition)

    def listener_failed(self, topic: Topic, listener: str, reason: str) -> None:
        for obs in self._observers:
            obs.listener_failed(topic=topic, listener=listener, reason=reason)
