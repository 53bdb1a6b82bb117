"""Structlog implementation of the StationObserver port."""

import structlog

from weather_station.station.domain.topic import Topic


class StructlogStationObserver:
    """Delegates station domain events to structlog.

    Satisfies the StationObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def temperature_changed(self, celsius: float) -> None:
        self._log.info("station.temperature_changed", celsius=celsius)

    def condition_changed(self, condition: str) -> None:
        self._log.info("station.condition_changed", condition=condition)

    def listener_failed(self, topic: Topic, listener: str, reason: str) -> None:
        self._log.error(
            "station.listener_failed",
            topic=topic,
            listener=listener,
            reason=reason,
        )
