"""Tests for ScenarioRunner, including the full demonstration sequence."""

import pytest

from tests.displays.fake_sink import FakeDisplaySink, ShownLine
from tests.scenario.fake_observer import FakeScenarioObserver
from tests.station.fake_observer import FakeStationObserver
from weather_station.scenario.application.runner import ScenarioRunner
from weather_station.scenario.domain.default import default_scenario
from weather_station.scenario.domain.scenario import Scenario
from weather_station.scenario.domain.errors import ScenarioValidationError
from weather_station.station.infrastructure.errors import ListenerNotificationError


def _run(
    scenario: Scenario,
) -> tuple[FakeDisplaySink, FakeStationObserver, FakeScenarioObserver]:
    sink = FakeDisplaySink()
    station_observer = FakeStationObserver()
    observer = FakeScenarioObserver()
    ScenarioRunner(
        scenario=scenario,
        sink=sink,
        station_observer=station_observer,
        observer=observer,
    ).run()
    return sink, station_observer, observer


class TestDefaultScenario:
    """The built-in scenario produces the documented notification sequence."""

    def test_full_output_sequence(self) -> None:
        sink, _, _ = _run(default_scenario())

        assert sink.lines == [
            # set_temperature(25.0)
            ShownLine("PhoneDisplay", "Temp: 25°C / 77°F"),
            ShownLine("LaptopDisplay", "Temp: 25°C / 77°F"),
            # set_condition("Clear")
            ShownLine("LaptopDisplay", "Condition updated: Clear"),
            ShownLine("AlertSystem", "Conditions normal (Clear)."),
            # set_temperature(15.0)
            ShownLine("PhoneDisplay", "Temp: 15°C / 59°F"),
            ShownLine("LaptopDisplay", "Temp: 15°C / 59°F"),
            # set_condition("Heavy Rain")
            ShownLine("LaptopDisplay", "Condition updated: Heavy Rain"),
            ShownLine("AlertSystem", "ALERT: Severe weather detected (Heavy Rain)"),
            # set_temperature(-5.0)
            ShownLine("PhoneDisplay", "Temp: -5°C / 23°F"),
            ShownLine("LaptopDisplay", "Temp: -5°C / 23°F"),
            # set_condition("Snow and Ice")
            ShownLine("LaptopDisplay", "Condition updated: Snow and Ice"),
            ShownLine("AlertSystem", "ALERT: Severe weather detected (Snow and Ice)"),
            # set_condition("Clear")
            ShownLine("LaptopDisplay", "Condition updated: Clear"),
            ShownLine("AlertSystem", "Conditions normal (Clear)."),
        ]

    def test_station_reports_every_change(self) -> None:
        _, station_observer, _ = _run(default_scenario())

        assert station_observer.temperatures == [25.0, 15.0, -5.0]
        assert station_observer.conditions == [
            "Clear",
            "Heavy Rain",
            "Snow and Ice",
            "Clear",
        ]

    def test_returns_final_state(self) -> None:
        state = ScenarioRunner(
            scenario=default_scenario(),
            sink=FakeDisplaySink(),
            station_observer=FakeStationObserver(),
            observer=FakeScenarioObserver(),
        ).run()

        assert state.temperature_celsius == -5.0
        assert state.condition == "Clear"

    def test_emits_lifecycle_events(self) -> None:
        _, _, observer = _run(default_scenario())

        assert observer.started == [{"name": "weather-station-demo", "num_listeners": 3}]
        assert [step["index"] for step in observer.steps] == list(range(7))
        assert observer.completed == [{"name": "weather-station-demo", "num_steps": 7}]


class TestSubscriptionSteps:
    """subscribe and unsubscribe steps change who hears later updates."""

    def _scenario(self, steps: list[dict[str, object]]) -> Scenario:
        return Scenario.model_validate(
            {
                "name": "wiring",
                "listeners": {"phone": {"kind": "phone"}, "laptop": {"kind": "laptop"}},
                "subscriptions": {"temperature": ["phone", "laptop"]},
                "steps": steps,
            }
        )

    def test_unsubscribed_listener_stops_receiving(self) -> None:
        sink, _, _ = _run(
            self._scenario(
                [
                    {"action": "set_temperature", "celsius": 1},
                    {"action": "unsubscribe", "listener": "phone", "topic": "temperature"},
                    {"action": "set_temperature", "celsius": 2},
                ]
            )
        )

        assert sink.messages_from("PhoneDisplay") == ["Temp: 1°C / 33.8°F"]
        assert len(sink.messages_from("LaptopDisplay")) == 2

    def test_resubscribed_listener_moves_to_end(self) -> None:
        sink, _, _ = _run(
            self._scenario(
                [
                    {"action": "unsubscribe", "listener": "phone", "topic": "temperature"},
                    {"action": "subscribe", "listener": "phone", "topic": "temperature"},
                    {"action": "set_temperature", "celsius": 0},
                ]
            )
        )

        assert [line.source for line in sink.lines] == ["LaptopDisplay", "PhoneDisplay"]

    def test_subscribe_to_condition_topic(self) -> None:
        sink, _, _ = _run(
            self._scenario(
                [
                    {"action": "subscribe", "listener": "laptop", "topic": "condition"},
                    {"action": "set_condition", "condition": "Fog"},
                ]
            )
        )

        assert sink.lines == [ShownLine("LaptopDisplay", "Condition updated: Fog")]


class TestRunnerFailures:
    def test_invalid_scenario_rejected_before_running(self) -> None:
        scenario = Scenario.model_validate(
            {
                "name": "bad",
                "listeners": {"alert": {"kind": "alert"}},
                "subscriptions": {"temperature": ["alert"]},
                "steps": [{"action": "set_temperature", "celsius": 1}],
            }
        )
        observer = FakeScenarioObserver()

        with pytest.raises(ScenarioValidationError):
            ScenarioRunner(
                scenario=scenario,
                sink=FakeDisplaySink(),
                station_observer=FakeStationObserver(),
                observer=observer,
            ).run()

        assert observer.started == []

    def test_failing_sink_stops_run_after_fan_out(self) -> None:
        class BrokenSink:
            def show(self, source: str, message: str) -> None:
                raise OSError("display offline")

        station_observer = FakeStationObserver()
        observer = FakeScenarioObserver()

        with pytest.raises(ListenerNotificationError) as exc_info:
            ScenarioRunner(
                scenario=default_scenario(),
                sink=BrokenSink(),
                station_observer=station_observer,
                observer=observer,
            ).run()

        assert [f.listener for f in exc_info.value.failures] == [
            "PhoneDisplay",
            "LaptopDisplay",
        ]
        assert station_observer.temperatures == [25.0]
        assert observer.completed == []
