"""EchoDisplaySink — writes display output to stdout via typer."""

import typer


class EchoDisplaySink:
    """Prints each message as `[<source>] <message>`.

    Satisfies the DisplaySink protocol structurally.
    """

    def show(self, source: str, message: str) -> None:
        typer.echo(f"[{source}] {message}")
