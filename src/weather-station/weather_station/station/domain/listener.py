"""Listener capability ports — one protocol per state facet.

A concrete listener may satisfy either protocol, or both. Registration is
per capability: a listener satisfying both is added to each registry
separately.
"""

from typing import Protocol


class TemperatureListener(Protocol):
    """Receives every temperature change in both Celsius and Fahrenheit.

    Implementations must support weak references and be kept alive by the
    caller while registered.
    """

    def on_temperature_change(self, celsius: float, fahrenheit: float) -> None: ...


class ConditionListener(Protocol):
    """Receives every weather condition change as a free-form string.

    Implementations must support weak references and be kept alive by the
    caller while registered.
    """

    def on_condition_change(self, condition: str) -> None: ...
