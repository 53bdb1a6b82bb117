"""Semantic checks on a Scenario that the schema alone cannot express."""

from weather_station.displays.domain.kind import KIND_TOPICS
from weather_station.scenario.domain.errors import ScenarioValidationError
from weather_station.scenario.domain.scenario import (
    Scenario,
    SubscribeStep,
    UnsubscribeStep,
)
from weather_station.station.domain.topic import CONDITION, TEMPERATURE, Topic


def find_problems(scenario: Scenario) -> list[str]:
    """Return every problem in scenario, in document order. Empty means valid."""
    problems: list[str] = []

    for name, spec in scenario.listeners.items():
        if spec.severe_conditions is not None and spec.kind != "alert":
            problems.append(
                f"listener '{name}' of kind '{spec.kind}' cannot set severe_conditions"
            )

    for topic, names in (
        (TEMPERATURE, scenario.subscriptions.temperature),
        (CONDITION, scenario.subscriptions.condition),
    ):
        for name in names:
            problems.extend(_check_reference(scenario, name, topic, "subscriptions"))

    for index, step in enumerate(scenario.steps):
        if isinstance(step, SubscribeStep | UnsubscribeStep):
            problems.extend(
                _check_reference(scenario, step.listener, step.topic, f"step {index}")
            )

    return problems


def check_scenario(scenario: Scenario) -> None:
    """Raise ScenarioValidationError listing ALL problems in scenario."""
    problems = find_problems(scenario)
    if problems:
        raise ScenarioValidationError("; ".join(problems))


def _check_reference(
    scenario: Scenario, name: str, topic: Topic, where: str
) -> list[str]:
    spec = scenario.listeners.get(name)
    if spec is None:
        return [f"{where} references unknown listener '{name}'"]
    if topic not in KIND_TOPICS[spec.kind]:
        return [
            f"{where} subscribes listener '{name}' of kind '{spec.kind}'"
            f" to unsupported topic '{topic}'"
        ]
    return []
