"""YAML scenario loader — parses, validates, and emits observer events."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from weather_station.scenario.domain.errors import ScenarioValidationError
from weather_station.scenario.domain.observer import ScenarioObserver
from weather_station.scenario.domain.scenario import Scenario
from weather_station.scenario.domain.validation import check_scenario
from weather_station.scenario.infrastructure.errors import ScenarioLoadError


class YamlScenarioLoader:
    """Loads, validates, and returns a Scenario from a YAML file."""

    def __init__(self, observer: ScenarioObserver) -> None:
        self._observer = observer

    def load(self, path: Path) -> Scenario:
        """
        Load, validate, and return a Scenario from a YAML file.

        Raises:
            ScenarioLoadError: if the file cannot be read or is not valid YAML.
            ScenarioValidationError: if the schema is violated or any listener
                reference is invalid (all problems collected first).
        """
        raw = _parse_yaml(path=path)
        scenario = _build_scenario(raw=raw)
        check_scenario(scenario=scenario)
        self._observer.scenario_loaded(
            name=scenario.name, num_steps=len(scenario.steps)
        )
        return scenario


def _parse_yaml(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as fh:
            return yaml.safe_load(fh)
    except FileNotFoundError as exc:
        raise ScenarioLoadError(path=path, reason="file not found") from exc
    except OSError as exc:
        raise ScenarioLoadError(path=path, reason=str(exc)) from exc
    except yaml.YAMLError as exc:
        raise ScenarioLoadError(path=path, reason=f"invalid YAML: {exc}") from exc


def _build_scenario(raw: Any) -> Scenario:
    if not isinstance(raw, dict):
        raise ScenarioValidationError("top level must be a mapping")
    try:
        return Scenario.model_validate(raw)
    except ValidationError as exc:
        raise ScenarioValidationError(str(exc)) from exc
