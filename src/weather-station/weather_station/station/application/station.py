"""WeatherStation — the subject that owns weather state and notifies listeners."""

from collections.abc import Callable

from weather_station.station.domain.listener import (
    ConditionListener,
    TemperatureListener,
)
from weather_station.station.domain.observer import StationObserver
from weather_station.station.domain.registry import ListenerRegistry
from weather_station.station.domain.state import TemperatureReading, WeatherState
from weather_station.station.domain.topic import CONDITION, TEMPERATURE
from weather_station.station.infrastructure.errors import (
    ListenerFailure,
    ListenerNotificationError,
)


class WeatherStation:
    """Holds the current temperature and condition and broadcasts every change.

    Temperature and condition listeners live in two independent registries.
    Each mutator replaces the state, reports the change to the observer, then
    calls every listener of the matching registry before returning. Inputs are
    never validated and unchanged values are broadcast again.

    A listener that raises does not stop the pass: the failure is reported to
    the observer and, once every listener has been called, all failures of the
    pass are raised together as a ListenerNotificationError.

    Registries hold weak references only: the caller keeps each listener
    alive, and a listener that cannot be weakly referenced is rejected at
    registration with ListenerNotWeakReferenceableError.
    """

    def __init__(self, observer: StationObserver) -> None:
        self._observer = observer
        self._state = WeatherState()
        self._temperature_listeners: ListenerRegistry[TemperatureListener] = (
            ListenerRegistry(topic=TEMPERATURE)
        )
        self._condition_listeners: ListenerRegistry[ConditionListener] = (
            ListenerRegistry(topic=CONDITION)
        )

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def state(self) -> WeatherState:
        return self._state

    @property
    def temperature_celsius(self) -> float:
        return self._state.temperature_celsius

    @property
    def condition(self) -> str:
        return self._state.condition

    @property
    def temperature_listeners(self) -> tuple[TemperatureListener, ...]:
        return self._temperature_listeners.listeners()

    @property
    def condition_listeners(self) -> tuple[ConditionListener, ...]:
        return self._condition_listeners.listeners()

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def add_temperature_listener(self, listener: TemperatureListener) -> None:
        self._temperature_listeners.add(listener)

    def remove_temperature_listener(self, listener: TemperatureListener) -> None:
        self._temperature_listeners.remove(listener)

    def add_condition_listener(self, listener: ConditionListener) -> None:
        self._condition_listeners.add(listener)

    def remove_condition_listener(self, listener: ConditionListener) -> None:
        self._condition_listeners.remove(listener)

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------

    def set_temperature(self, new_temp_c: float) -> None:
        """Store new_temp_c and notify every temperature listener.

        Raises:
            ListenerNotificationError: if any listener raised during the pass.
        """
        self._observer.temperature_changed(celsius=new_temp_c)
        self._state = self._state.model_copy(
            update={"temperature_celsius": new_temp_c}
        )
        reading = TemperatureReading.from_celsius(new_temp_c)
        self._fan_out(
            registry=self._temperature_listeners,
            call=lambda listener: listener.on_temperature_change(
                reading.celsius, reading.fahrenheit
            ),
        )

    def set_condition(self, new_condition: str) -> None:
        """Store new_condition and notify every condition listener.

        Raises:
            ListenerNotificationError: if any listener raised during the pass.
        """
        self._observer.condition_changed(condition=new_condition)
        self._state = self._state.model_copy(update={"condition": new_condition})
        self._fan_out(
            registry=self._condition_listeners,
            call=lambda listener: listener.on_condition_change(new_condition),
        )

    def _fan_out[T](
        self, registry: ListenerRegistry[T], call: Callable[[T], None]
    ) -> None:
        failures: list[ListenerFailure] = []

        def isolated(listener: T) -> None:
            try:
                call(listener)
            except Exception as exc:  # noqa: BLE001
                name = type(listener).__name__
                self._observer.listener_failed(
                    topic=registry.topic, listener=name, reason=str(exc)
                )
                failures.append(
                    ListenerFailure(topic=registry.topic, listener=name, error=exc)
                )

        registry.notify(isolated)

        if failures:
            raise ListenerNotificationError(topic=registry.topic, failures=failures)
