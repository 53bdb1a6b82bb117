"""Observer port for the scenario domain — defines events in domain language."""

from typing import Protocol


class ScenarioObserver(Protocol):
    def scenario_loaded(self, name: str, num_steps: int) -> None: ...

    def scenario_started(self, name: str, num_listeners: int) -> None: ...

    def scenario_step_executed(self, name: str, index: int, action: str) -> None: ...

    def scenario_completed(self, name: str, num_steps: int) -> None: ...
