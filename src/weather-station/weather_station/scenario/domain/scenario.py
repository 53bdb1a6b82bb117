"""Scenario models — a declarative driver sequence for a weather station."""

from typing import Annotated, Literal

from pydantic import BaseModel, Field

from weather_station.displays.domain.kind import DisplayKind
from weather_station.station.domain.topic import Topic

type ListenerName = str


class ListenerSpec(BaseModel, frozen=True):
    """One display instance to construct.

    severe_conditions overrides the alert set and is only valid for kind "alert".
    """

    kind: DisplayKind
    severe_conditions: list[str] | None = None


class Subscriptions(BaseModel, frozen=True):
    """Initial registrations, applied in list order before the first step."""

    temperature: list[ListenerName] = Field(default_factory=list)
    condition: list[ListenerName] = Field(default_factory=list)


class SetTemperatureStep(BaseModel, frozen=True):
    action: Literal["set_temperature"]
    celsius: float


class SetConditionStep(BaseModel, frozen=True):
    action: Literal["set_condition"]
    condition: str


class SubscribeStep(BaseModel, frozen=True):
    action: Literal["subscribe"]
    listener: ListenerName = Field(min_length=1)
    topic: Topic


class UnsubscribeStep(BaseModel, frozen=True):
    action: Literal["unsubscribe"]
    listener: ListenerName = Field(min_length=1)
    topic: Topic


# Discriminated union — Pydantic selects the step type from the `action` field.
type ScenarioStep = Annotated[
    SetTemperatureStep | SetConditionStep | SubscribeStep | UnsubscribeStep,
    Field(discriminator="action"),
]


class Scenario(BaseModel, frozen=True):
    """Root aggregate: which displays exist, how they subscribe, what happens."""

    name: str = Field(min_length=1)
    listeners: dict[ListenerName, ListenerSpec] = Field(default_factory=dict)
    subscriptions: Subscriptions = Field(default_factory=Subscriptions)
    steps: list[ScenarioStep] = Field(default_factory=list)
