"""CLI entrypoint for weather-station — typer app with `run` and `validate`."""

import logging
import sys
from pathlib import Path

import structlog
import typer

from weather_station.core.errors import WeatherStationError
from weather_station.displays.infrastructure.echo_sink import EchoDisplaySink
from weather_station.scenario.application.runner import ScenarioRunner
from weather_station.scenario.domain.default import default_scenario
from weather_station.scenario.domain.scenario import Scenario
from weather_station.scenario.infrastructure.observer import StructlogScenarioObserver
from weather_station.scenario.infrastructure.yaml_loader import YamlScenarioLoader
from weather_station.station.infrastructure.composite_observer import (
    CompositeStationObserver,
)
from weather_station.station.infrastructure.console_observer import (
    ConsoleStationObserver,
)
from weather_station.station.infrastructure.observer import StructlogStationObserver

app = typer.Typer(add_completion=False)


def _configure_structlog(log_format: str, verbose: bool) -> None:
    """Configure structlog to write to stderr in the requested format."""
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.")
        raise typer.Exit(code=1)

    # stdout carries the station and display lines; logs go to stderr.
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.INFO if verbose else logging.WARNING
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def _load(scenario_path: Path | None) -> Scenario:
    if scenario_path is None:
        return default_scenario()
    loader = YamlScenarioLoader(observer=StructlogScenarioObserver())
    return loader.load(path=scenario_path)


@app.command()
def run(
    scenario_path: Path | None = typer.Argument(
        None, help="Path to a scenario YAML file (default: built-in demo)"
    ),
    log_format: str = typer.Option(
        "console",
        "--log-format",
        envvar="WEATHER_STATION_LOG_FORMAT",
        help="Log format: 'console' or 'json'",
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log station events at INFO level"
    ),
) -> None:
    """Run a weather station scenario and print every notification."""
    _configure_structlog(log_format=log_format, verbose=verbose)
    try:
        scenario = _load(scenario_path=scenario_path)
        runner = ScenarioRunner(
            scenario=scenario,
            sink=EchoDisplaySink(),
            station_observer=CompositeStationObserver(
                observers=[ConsoleStationObserver(), StructlogStationObserver()]
            ),
            observer=StructlogScenarioObserver(),
        )
        runner.run()
    except WeatherStationError as exc:
        typer.echo(str(exc))
        raise typer.Exit(code=1) from exc
    except Exception as exc:  # noqa: BLE001
        typer.echo(f"Unexpected error: {exc}\nPlease report this bug.")
        raise typer.Exit(code=1) from exc


@app.command()
def validate(
    scenario_path: Path = typer.Argument(..., help="Path to a scenario YAML file"),
) -> None:
    """Load and validate a scenario file without running it."""
    _configure_structlog(log_format="console", verbose=False)
    try:
        scenario = _load(scenario_path=scenario_path)
    except WeatherStationError as exc:
        typer.echo(str(exc))
        raise typer.Exit(code=1) from exc

    typer.echo(
        f"Scenario '{scenario.name}' is valid: {len(scenario.listeners)} listeners,"
        f" {len(scenario.steps)} steps"
    )


if __name__ == "__main__":
    app()
