"""Display kinds and the topics each kind can listen to."""

from typing import Literal

from weather_station.station.domain.topic import CONDITION, TEMPERATURE, Topic

type DisplayKind = Literal["phone", "laptop", "alert"]

KIND_TOPICS: dict[DisplayKind, frozenset[Topic]] = {
    "phone": frozenset({TEMPERATURE}),
    "laptop": frozenset({TEMPERATURE, CONDITION}),
    "alert": frozenset({CONDITION}),
}
