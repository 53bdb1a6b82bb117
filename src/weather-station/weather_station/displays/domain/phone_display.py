"""PhoneDisplay — a temperature-only listener."""

from weather_station.core.formatting import format_number
from weather_station.displays.domain.sink import DisplaySink


def render_temperature(celsius: float, fahrenheit: float) -> str:
    return f"Temp: {format_number(celsius)}°C / {format_number(fahrenheit)}°F"


class PhoneDisplay:
    """Shows the temperature in both units. Satisfies TemperatureListener."""

    def __init__(self, sink: DisplaySink) -> None:
        self._sink = sink

    def on_temperature_change(self, celsius: float, fahrenheit: float) -> None:
        self._sink.show(
            source=type(self).__name__,
            message=render_temperature(celsius=celsius, fahrenheit=fahrenheit),
        )
