"""Display factory — maps a ListenerSpec kind to a concrete display."""

from weather_station.displays.domain.alert_system import AlertSystem
from weather_station.displays.domain.laptop_display import LaptopDisplay
from weather_station.displays.domain.phone_display import PhoneDisplay
from weather_station.displays.domain.sink import DisplaySink
from weather_station.displays.infrastructure.errors import (
    DisplayKindNotSupportedError,
)
from weather_station.scenario.domain.scenario import ListenerSpec

type Display = PhoneDisplay | LaptopDisplay | AlertSystem


def create_display(spec: ListenerSpec, sink: DisplaySink) -> Display:
    """Return a new display for spec, writing to sink.

    Raises:
        DisplayKindNotSupportedError: if spec.kind is not a known display kind.
    """
    if spec.kind == "phone":
        return PhoneDisplay(sink=sink)
    if spec.kind == "laptop":
        return LaptopDisplay(sink=sink)
    if spec.kind == "alert":
        if spec.severe_conditions is None:
            return AlertSystem(sink=sink)
        return AlertSystem(sink=sink, severe_conditions=spec.severe_conditions)

    raise DisplayKindNotSupportedError(kind=spec.kind)
