"""Error types raised by listener registries."""

from weather_station.core.errors import WeatherStationError
from weather_station.station.domain.topic import Topic


class RegistryMutationError(WeatherStationError):
    """Raised when a registry is modified while it is notifying its listeners."""

    def __init__(self, topic: Topic) -> None:
        self.topic = topic
        super().__init__(
            f"Failed to modify {topic} listeners: registry is mid-notification"
        )


class ListenerNotWeakReferenceableError(WeatherStationError):
    """Raised when a listener cannot be held by weak reference.

    Typical causes are classes defining __slots__ without __weakref__ and
    builtins such as types.SimpleNamespace.
    """

    def __init__(self, topic: Topic, listener_type: str) -> None:
        self.topic = topic
        self.listener_type = listener_type
        super().__init__(
            f"Failed to register {topic} listener: {listener_type} is not"
            f" weak-referenceable"
        )
