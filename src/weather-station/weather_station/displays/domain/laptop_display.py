"""LaptopDisplay — listens to both temperature and condition changes."""

from weather_station.displays.domain.phone_display import render_temperature
from weather_station.displays.domain.sink import DisplaySink


class LaptopDisplay:
    """Shows the temperature in both units and the raw condition string.

    Satisfies both TemperatureListener and ConditionListener; it must be
    registered with each topic separately.
    """

    def __init__(self, sink: DisplaySink) -> None:
        self._sink = sink

    def on_temperature_change(self, celsius: float, fahrenheit: float) -> None:
        self._sink.show(
            source=type(self).__name__,
            message=render_temperature(celsius=celsius, fahrenheit=fahrenheit),
        )

    def on_condition_change(self, condition: str) -> None:
        self._sink.show(
            source=type(self).__name__, message=f"Condition updated: {condition}"
        )
