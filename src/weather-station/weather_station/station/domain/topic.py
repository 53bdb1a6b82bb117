"""Notification topics — the two independent listener categories."""

from typing import Literal

type Topic = Literal["temperature", "condition"]

TEMPERATURE: Topic = "temperature"
CONDITION: Topic = "condition"
