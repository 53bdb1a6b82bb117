"""ScenarioRunner — drives a weather station through a Scenario."""

from typing import Any

from weather_station.displays.domain.sink import DisplaySink
from weather_station.displays.infrastructure.factory import Display, create_display
from weather_station.scenario.domain.observer import ScenarioObserver
from weather_station.scenario.domain.scenario import (
    Scenario,
    ScenarioStep,
    SetConditionStep,
    SetTemperatureStep,
    SubscribeStep,
    UnsubscribeStep,
)
from weather_station.scenario.domain.validation import check_scenario
from weather_station.station.application.station import WeatherStation
from weather_station.station.domain.observer import StationObserver
from weather_station.station.domain.state import WeatherState
from weather_station.station.domain.topic import CONDITION, TEMPERATURE, Topic


class ScenarioRunner:
    """Builds the station and displays for a scenario and executes its steps.

    The runner keeps the only strong references to the displays it creates;
    the station's registries hold weak references, so the displays live
    exactly as long as the runner's current run.
    """

    def __init__(
        self,
        scenario: Scenario,
        sink: DisplaySink,
        station_observer: StationObserver,
        observer: ScenarioObserver,
    ) -> None:
        self._scenario = scenario
        self._sink = sink
        self._station_observer = station_observer
        self._observer = observer

    def run(self) -> WeatherState:
        """Execute every step in order and return the station's final state.

        Raises:
            ScenarioValidationError: if the scenario references unknown
                listeners or unsupported topics.
            ListenerNotificationError: if a display raised during a step; the
                run stops after that step's fan-out.
        """
        check_scenario(scenario=self._scenario)
        name = self._scenario.name

        station = WeatherStation(observer=self._station_observer)
        displays: dict[str, Display] = {
            listener_name: create_display(spec=spec, sink=self._sink)
            for listener_name, spec in self._scenario.listeners.items()
        }

        self._observer.scenario_started(name=name, num_listeners=len(displays))

        for listener_name in self._scenario.subscriptions.temperature:
            _subscribe(station, displays[listener_name], TEMPERATURE)
        for listener_name in self._scenario.subscriptions.condition:
            _subscribe(station, displays[listener_name], CONDITION)

        for index, step in enumerate(self._scenario.steps):
            _execute(station=station, displays=displays, step=step)
            self._observer.scenario_step_executed(
                name=name, index=index, action=step.action
            )

        self._observer.scenario_completed(
            name=name, num_steps=len(self._scenario.steps)
        )
        return station.state


def _execute(
    station: WeatherStation, displays: dict[str, Display], step: ScenarioStep
) -> None:
    match step:
        case SetTemperatureStep(celsius=celsius):
            station.set_temperature(celsius)
        case SetConditionStep(condition=condition):
            station.set_condition(condition)
        case SubscribeStep(listener=listener, topic=topic):
            _subscribe(station, displays[listener], topic)
        case UnsubscribeStep(listener=listener, topic=topic):
            _unsubscribe(station, displays[listener], topic)


# Topic support per display kind is checked by check_scenario before any call.
def _subscribe(station: WeatherStation, display: Any, topic: Topic) -> None:
    if topic == TEMPERATURE:
        station.add_temperature_listener(display)
    else:
        station.add_condition_listener(display)


def _unsubscribe(station: WeatherStation, display: Any, topic: Topic) -> None:
    if topic == TEMPERATURE:
        station.remove_temperature_listener(display)
    else:
        station.remove_condition_listener(display)
