"""CLI entrypoint for by-example — typer app with `run` and `list` commands."""

import logging
import sys
from pathlib import Path

import structlog
import typer

from by_example.cli.output.report_json import write_report_json
from by_example.cli.output.summary import render_summary
from by_example.config.domain.config import ReportConfig, RunnerConfig
from by_example.config.infrastructure.observer import StructlogConfigObserver
from by_example.config.infrastructure.yaml_loader import YamlConfigLoader
from by_example.core.errors import ByExampleError
from by_example.registry.domain.registry import Registry
from by_example.runner.application.runner import ExampleRunner
from by_example.runner.domain.observer import RunObserver
from by_example.runner.infrastructure.composite_observer import CompositeRunObserver
from by_example.runner.infrastructure.observer import StructlogRunObserver
from by_example.runner.infrastructure.progress_observer import ProgressRunObserver
from by_example.suite.infrastructure.module_loader import ModuleSuiteLoader
from by_example.suite.infrastructure.observer import StructlogSuiteObserver

app = typer.Typer(add_completion=False)


def _configure_structlog(log_format: str, log_level: str) -> None:
    """Configure structlog based on the requested format and level."""
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.")
        raise typer.Exit(code=1)

    level = getattr(logging, log_level.strip().upper(), None)
    if not isinstance(level, int):
        typer.echo(f"Invalid log level: {log_level!r}.")
        raise typer.Exit(code=1)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        # Logs go to stderr so stdout carries only the summary.
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def _load_config(config_path: Path | None) -> RunnerConfig | None:
    if config_path is None:
        return None
    loader = YamlConfigLoader(observer=StructlogConfigObserver())
    return loader.load(path=config_path)


def _collect_targets(
    targets: list[str] | None, config: RunnerConfig | None
) -> list[str]:
    """Command-line targets first, then the config's suites."""
    collected = list(targets or [])
    if config is not None:
        collected.extend(suite.target for suite in config.suites)
    return collected


def _load_registry(targets: list[str]) -> Registry:
    loader = ModuleSuiteLoader(observer=StructlogSuiteObserver())
    return loader.load(targets=targets)


@app.command()
def run(
    targets: list[str] | None = typer.Argument(
        None, help="Suites to run, as package.module[:attribute]"
    ),
    config_path: Path | None = typer.Option(
        None, "--config", "-c", help="Path to a runner config YAML"
    ),
    log_format: str = typer.Option(
        "console", "--log-format", help="Log format: 'console' or 'json'"
    ),
    log_level: str = typer.Option(
        "warning", "--log-level", help="Minimum log level, e.g. 'info' or 'debug'"
    ),
    report_json: Path | None = typer.Option(
        None, "--report-json", help="Also write the run report as JSON to this path"
    ),
    show_passing: bool = typer.Option(
        False, "--show-passing", help="List passing examples in the summary"
    ),
    no_progress: bool = typer.Option(
        False, "--no-progress", help="Do not draw the progress bar"
    ),
) -> None:
    """Run every example of the given suites; exit 1 if any example fails."""
    _configure_structlog(log_format=log_format, log_level=log_level)

    try:
        config = _load_config(config_path=config_path)
        all_targets = _collect_targets(targets=targets, config=config)
        if not all_targets:
            typer.echo("No suites given. Pass a target or a --config with suites.")
            sys.exit(1)

        registry = _load_registry(targets=all_targets)

        report_cfg = config.report if config is not None else ReportConfig()
        observers: list[RunObserver] = [StructlogRunObserver()]
        if log_format != "json" and not no_progress:
            observers.append(ProgressRunObserver())
        runner = ExampleRunner(
            observer=CompositeRunObserver(observers=observers),
            max_repr_length=report_cfg.max_repr_length,
        )
        report = runner.run(registry)

        if report_json is not None:
            write_report_json(path=report_json, report=report, suites=all_targets)

        for line in render_summary(
            report=report,
            show_passing=show_passing or report_cfg.show_passing,
            color=sys.stdout.isatty(),
        ):
            typer.echo(line)

    except KeyboardInterrupt:
        typer.echo("Run interrupted.")
        sys.exit(1)
    except ByExampleError as exc:
        typer.echo(str(exc))
        sys.exit(1)

    sys.exit(0 if report.succeeded else 1)


@app.command("list")
def list_examples(
    targets: list[str] = typer.Argument(
        ..., help="Suites to list, as package.module[:attribute]"
    ),
) -> None:
    """Print the identifier and description of every registered example."""
    _configure_structlog(log_format="console", log_level="warning")
    try:
        registry = _load_registry(targets=targets)
    except ByExampleError as exc:
        typer.echo(str(exc))
        sys.exit(1)

    width = max((len(identifier) for identifier in registry.identifiers), default=0)
    for entry in registry:
        typer.echo(f"{entry.identifier:<{width}}  {entry.description}")


if __name__ == "__main__":
    app()
