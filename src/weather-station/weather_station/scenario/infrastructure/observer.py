"""Structlog implementation of the ScenarioObserver port."""

import structlog


class StructlogScenarioObserver:
    """Delegates scenario domain events to structlog.

    Satisfies the ScenarioObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def scenario_loaded(self, name: str, num_steps: int) -> None:
        self._log.info("scenario.loaded", name=name, num_steps=num_steps)

    def scenario_started(self, name: str, num_listeners: int) -> None:
        self._log.info("scenario.started", name=name, num_listeners=num_listeners)

    def scenario_step_executed(self, name: str, index: int, action: str) -> None:
        self._log.info(
            "scenario.step_executed", name=name, index=index, action=action
        )

    def scenario_completed(self, name: str, num_steps: int) -> None:
        self._log.info("scenario.completed", name=name, num_steps=num_steps)
