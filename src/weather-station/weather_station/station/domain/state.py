"""WeatherState and TemperatureReading domain value objects."""

from pydantic import BaseModel

INITIAL_CONDITION = "clear"


def celsius_to_fahrenheit(celsius: float) -> float:
    return celsius * 9 / 5 + 32


class TemperatureReading(BaseModel, frozen=True):
    """One temperature value expressed in both units."""

    celsius: float
    fahrenheit: float

    @classmethod
    def from_celsius(cls, celsius: float) -> "TemperatureReading":
        return cls(celsius=celsius, fahrenheit=celsius_to_fahrenheit(celsius))


class WeatherState(BaseModel, frozen=True):
    """The station's current values.

    Replaced wholesale on every update, never mutated in place. Values are
    not validated: NaN, infinities and arbitrary condition strings are kept
    as given.
    """

    temperature_celsius: float = 0.0
    condition: str = INITIAL_CONDITION
