"""CLI application entry point for snowflaker.

This module provides the main CLI interface using Typer.
"""

import json
from pathlib import Path
from typing import Annotated

import typer

from snowflaker import __version__
from snowflaker.cli.output import (
    console,
    print_comparison,
    print_error,
    print_generation_info,
    print_header,
    print_step,
    print_success,
)
from snowflaker.config import (
    MAX_CLI_ITERATIONS,
    GenerationConfig,
    LoggingConfig,
    ProcessingConfig,
    SnowflakerSettings,
)
from snowflaker.core import GenerationResult, SnowflakeGenerator
from snowflaker.exceptions import ResourceExhaustionError, SnowflakerError
from snowflaker.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="snowflaker",
    help="Generate Koch snowflake vertices sequentially or in parallel.",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Snowflaker[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def generate(
    iterations: Annotated[
        int,
        typer.Option(
            "--iterations",
            "-n",
            help=f"Number of subdivision passes (0-{MAX_CLI_ITERATIONS})",
            min=0,
            max=MAX_CLI_ITERATIONS,
        ),
    ] = 5,
    parallel: Annotated[
        bool,
        typer.Option(
            "--parallel/--sequential",
            help="Subdivide segments on a thread pool or on a single thread",
        ),
    ] = True,
    workers: Annotated[
        int | None,
        typer.Option(
            "--workers",
            "-j",
            help="Number of worker threads (default: auto)",
            min=1,
        ),
    ] = None,
    compare: Annotated[
        bool,
        typer.Option(
            "--compare",
            help="Run both strategies, compare their timings and outputs",
        ),
    ] = False,
    points: Annotated[
        bool,
        typer.Option(
            "--points",
            help="Print the generated points as JSON instead of a summary",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Generate a Koch snowflake and report how long it took.

    Starts from a triangle and replaces every edge with four
    edges per iteration, so the curve has 3 * 4**n + 1 points after n
    iterations.

    Example:
        snowflaker -n 6 --compare
    """
    if compare and points:
        print_error("Cannot use --compare and --points together")
        raise typer.Exit(code=1)

    if log_level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR"):
        print_error(
            f"Invalid log level: {log_level}",
            details="Valid values: DEBUG, INFO, WARNING, ERROR",
        )
        raise typer.Exit(code=1)

    # Point output goes to stdout, so keep the summary out of it
    quiet = quiet or points

    settings = SnowflakerSettings(
        generation=GenerationConfig(iterations=iterations, parallel=parallel),
        processing=ProcessingConfig(max_workers=workers),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not quiet else "WARNING",
        ),
    )

    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )
    generator = SnowflakeGenerator(settings, logger=logger)

    if not quiet:
        print_header(__version__)
        print_step("Generating")
        print_generation_info(
            iterations=iterations,
            parallel=parallel or compare,
            workers=settings.processing.resolved_workers(),
            is_auto=workers is None,
        )

    try:
        if compare:
            equivalent = _handle_compare(generator, settings, quiet)
        else:
            result = generator.run(iterations, parallel)
            _report(result, points, quiet)
            equivalent = True
    except ResourceExhaustionError as e:
        print_error(
            f"Ran out of resources: {e.reason}",
            details=f"Completed {e.completed_iterations} of {e.iterations} iterations",
        )
        raise typer.Exit(code=1)
    except SnowflakerError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if not equivalent:
        raise typer.Exit(code=1)


def _report(result: GenerationResult, points: bool, quiet: bool) -> None:
    """Print the generated points or a summary of the run.

    Args:
        result: Finished generation
        points: Print the points as JSON
        quiet: Suppress the summary
    """
    if points:
        typer.echo(json.dumps(result.curve.to_list()))
        return

    if not quiet:
        print_success(result.stats, segment_count=result.curve.segment_count)


def _handle_compare(
    generator: SnowflakeGenerator, settings: SnowflakerSettings, quiet: bool
) -> bool:
    """Handle --compare mode.

    Args:
        generator: Configured generator
        settings: Snowflaker settings
        quiet: Suppress output

    Returns:
        True if both strategies produced equivalent curves
    """
    iterations = settings.generation.iterations
    tolerance = settings.generation.tolerance

    sequential = generator.run(iterations, parallel=False)
    parallel = generator.run(iterations, parallel=True)

    equivalent = sequential.curve.is_equivalent(parallel.curve, tolerance)

    if not quiet:
        print_comparison(sequential.stats, parallel.stats, equivalent, tolerance)
    elif not equivalent:
        print_error("Sequential and parallel outputs differ")

    return equivalent


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
