"""DisplaySink port — the line-oriented output every display writes to."""

from typing import Protocol


class DisplaySink(Protocol):
    def show(self, source: str, message: str) -> None: ...
