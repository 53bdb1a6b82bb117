"""Recording listeners for station tests."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TemperatureCall:
    celsius: float
    fahrenheit: float


class RecordingTemperatureListener:
    def __init__(self, journal: list[str] | None = None, name: str = "temp") -> None:
        self.calls: list[TemperatureCall] = []
        self._journal = journal
        self._name = name

    def on_temperature_change(self, celsius: float, fahrenheit: float) -> None:
        self.calls.append(TemperatureCall(celsius=celsius, fahrenheit=fahrenheit))
        if self._journal is not None:
            self._journal.append(self._name)


class RecordingConditionListener:
    def __init__(self, journal: list[str] | None = None, name: str = "cond") -> None:
        self.calls: list[str] = []
        self._journal = journal
        self._name = name

    def on_condition_change(self, condition: str) -> None:
        self.calls.append(condition)
        if self._journal is not None:
            self._journal.append(self._name)


class RecordingDualListener:
    """Satisfies both listener protocols."""

    def __init__(self) -> None:
        self.temperature_calls: list[TemperatureCall] = []
        self.condition_calls: list[str] = []

    def on_temperature_change(self, celsius: float, fahrenheit: float) -> None:
        self.temperature_calls.append(
            TemperatureCall(celsius=celsius, fahrenheit=fahrenheit)
        )

    def on_condition_change(self, condition: str) -> None:
        self.condition_calls.append(condition)


class ExplodingListener:
    """Raises from every callback."""

    def on_temperature_change(self, celsius: float, fahrenheit: float) -> None:
        raise RuntimeError(f"cannot show {celsius}")

    def on_condition_change(self, condition: str) -> None:
        raise RuntimeError(f"cannot show {condition}")


class SlottedTemperatureListener:
    """Satisfies TemperatureListener but cannot be weakly referenced."""

    __slots__ = ("calls",)

    def __init__(self) -> None:
        self.calls: list[TemperatureCall] = []

    def on_temperature_change(self, celsius: float, fahrenheit: float) -> None:
        self.calls.append(TemperatureCall(celsius=celsius, fahrenheit=fahrenheit))
