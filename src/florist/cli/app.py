"""CLI application entry point for florist.

This module provides the main CLI interface using Typer.
"""

import json
from pathlib import Path
from typing import Annotated

import typer

from florist import __version__
from florist.cli.output import (
    console,
    print_error,
    print_generation_info,
    print_header,
    print_layers,
    print_preview,
    print_step,
    print_success,
)
from florist.config import Arrangement, FloristSettings, FlowerConfig, LoggingConfig
from florist.core import FlowerProcessor
from florist.core.rng import U64_MAX
from florist.exceptions import FloristError, TotalOcclusionError

# Create the Typer app
app = typer.Typer(
    name="florist",
    help="Generate procedural flowers and mosaic frames as scanline areas.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Florist[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def generate(
    radius: Annotated[
        int,
        typer.Argument(
            help="Radius of the generated shape in grid units",
            show_default=False,
        ),
    ],
    seed: Annotated[
        int | None,
        typer.Option(
            "--seed",
            "-s",
            help="Seed for reproducible output (default: random)",
            min=0,
            max=U64_MAX,
        ),
    ] = None,
    mosaic: Annotated[
        bool,
        typer.Option(
            "--mosaic",
            "-m",
            help="Generate a standalone mosaic frame instead of a flower",
        ),
    ] = False,
    arrangement: Annotated[
        str,
        typer.Option(
            "--arrangement",
            "-a",
            help="Petal arrangement (auto|valvate|radial)",
        ),
    ] = "auto",
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Write the resolved shapes as JSON to this path",
        ),
    ] = None,
    preview: Annotated[
        bool,
        typer.Option(
            "--preview",
            "-p",
            help="Print a character preview of the visible regions",
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
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
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
    """Generate a flower (or a mosaic frame) of the given radius.

    Petal layers are stacked from the largest at the back to the smallest at
    the front, and every shape keeps only the part no shape in front of it
    covers.

    Example:
        florist 256 --seed 42 --preview

    This prints a summary and a character preview of the flower drawn from
    seed 42.
    """
    # Validate mutually exclusive options
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    # Validate arrangement argument
    try:
        arrangement_pref = Arrangement(arrangement.lower())
    except ValueError:
        print_error(
            f"Invalid arrangement: {arrangement}",
            details="Valid values: auto, valvate, radial",
        )
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)

    settings = FloristSettings(
        flower=FlowerConfig(arrangement=arrangement_pref),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not quiet else "WARNING",
        ),
    )

    kind = "mosaic" if mosaic else "flower"

    try:
        if not quiet:
            print_step("Generating")
            print_generation_info(kind, radius, seed)

        processor = FlowerProcessor(settings)
        if mosaic:
            result = processor.generate_mosaic(radius, seed)
        else:
            result = processor.generate_flower(radius, seed)

        if output is not None:
            try:
                output.write_text(json.dumps(result.flower.to_dict()), encoding="utf-8")
            except OSError as e:
                print_error(f"Could not write output: {e}")
                raise typer.Exit(code=1)

        if not quiet:
            print_success(
                result.flower,
                result.stats,
                output_path=str(output) if output is not None else None,
            )
            if verbose:
                print_layers(result.flower)
            if preview:
                print_preview(result.flower)

    except ValueError as e:
        print_error(f"Invalid argument: {e}")
        raise typer.Exit(code=1)
    except TotalOcclusionError as e:
        print_error(str(e), details="Try another seed.")
        raise typer.Exit(code=1)
    except FloristError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        # Re-raise typer.Exit to allow clean exits
        raise
    except KeyboardInterrupt:
        console.print("\nCancelled")
        raise typer.Exit(code=130) from None


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
