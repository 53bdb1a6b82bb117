"""AlertSystem — classifies condition changes as severe or normal."""

from collections.abc import Iterable

from weather_station.displays.domain.sink import DisplaySink

# Matched verbatim, typo included. No case folding, no partial matches.
SEVERE_CONDITIONS: frozenset[str] = frozenset(
    {"Heavy Rain", "Snow and Ice", "Thuderstorms with Hail"}
)


class AlertSystem:
    """Raises an alert when the condition exactly equals a severe condition.

    Satisfies ConditionListener only.
    """

    def __init__(
        self,
        sink: DisplaySink,
        severe_conditions: Iterable[str] = SEVERE_CONDITIONS,
    ) -> None:
        self._sink = sink
        self._severe_conditions = frozenset(severe_conditions)

    @property
    def severe_conditions(self) -> frozenset[str]:
        return self._severe_conditions

    def is_severe(self, condition: str) -> bool:
        return condition in self._severe_conditions

    def on_condition_change(self, condition: str) -> None:
        if self.is_severe(condition):
            message = f"ALERT: Severe weather detected ({condition})"
        else:
            message = f"Conditions normal ({condition})."
        self._sink.show(source=type(self).__name__, message=message)
