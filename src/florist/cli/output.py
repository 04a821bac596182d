"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with formatted messages, run summaries and a character preview.
"""

from rich.console import Console
from rich.text import Text

from florist.domain import Flower, ShapeKind
from florist.utils import GenerationStats

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info

MOSAIC_MARK = "@"
LAYER_MARKS = "123456789abcdefghijklmnopqrstuvwxyz"
EMPTY_MARK = " "


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Florist[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_generation_info(kind: str, radius: int, seed: int | None) -> None:
    """Print what is about to be generated.

    Args:
        kind: "flower" or "mosaic"
        radius: Requested radius in grid units
        seed: Requested seed (None for fresh entropy)
    """
    seed_str = str(seed) if seed is not None else "random"
    console.print(f"  {kind} {SYM_DOT} radius {radius:,} {SYM_DOT} seed {seed_str}")


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_success(flower: Flower, stats: GenerationStats, output_path: str | None = None) -> None:
    """Print success message with summary.

    Args:
        flower: Resolved flower
        stats: Statistics of the run
        output_path: Path the JSON export was written to, if any
    """
    time_str = _format_time(stats.duration_seconds)

    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    if output_path is not None:
        line = Text("  ")
        line.append(output_path, style="bold")
        console.print(line)

    console.print(f"  seed {flower.seed}")
    console.print(
        f"  {len(flower.layers)} layers {SYM_DOT} {len(flower.shapes())} shapes {SYM_DOT} "
        f"{stats.shapes_culled} culled {SYM_DOT} {stats.shapes_discarded} discarded"
    )
    console.print(f"  {flower.coverage():,} cells visible")


def print_layers(flower: Flower) -> None:
    """Print per-layer shape counts and coverage.

    Args:
        flower: Resolved flower
    """
    console.print("\n[bold]Layers[/bold]")
    for layer in flower.layers:
        console.print(
            f"  {layer.index:>2}  {len(layer.shapes):>3} petals {SYM_DOT} {layer.coverage():,} cells"
        )
    if flower.mosaic is not None:
        console.print(f"  mosaic {SYM_DOT} {flower.mosaic.area.coverage():,} cells")


def render_preview(flower: Flower, width: int = 64) -> list[str]:
    """Render the visible regions as rows of characters.

    Each character samples the center of a cell; rows are twice as tall as
    columns are wide to make up for terminal glyph proportions. Petals are
    marked by layer, the mosaic with ``@``.

    Args:
        flower: Resolved flower
        width: Maximum number of columns

    Returns:
        Preview rows, top (smallest y) first
    """
    shapes = flower.shapes()
    if not shapes:
        return []

    min_x = min(shape.area.min_x for shape in shapes)
    max_x = max(shape.area.max_x for shape in shapes)
    min_y = min(shape.area.min_y for shape in shapes)
    max_y = max(shape.area.max_y for shape in shapes)

    cell = max(1, -(-(max_x - min_x + 1) // width))
    half = cell // 2
    columns = (max_x - min_x) // cell + 1
    rows = (max_y - min_y) // (cell * 2) + 1
    grid = [[EMPTY_MARK] * columns for _ in range(rows)]

    for shape in shapes:
        if shape.kind is ShapeKind.MOSAIC:
            mark = MOSAIC_MARK
        else:
            mark = LAYER_MARKS[shape.layer_index % len(LAYER_MARKS)]

        for row in range(rows):
            line = shape.area.line(min_y + row * cell * 2 + cell)
            if line is None:
                continue
            for run in line:
                first = max(0, -((min_x + half - run.start) // cell))
                last = min(columns - 1, (run.end - min_x - half) // cell)
                for column in range(first, last + 1):
                    grid[row][column] = mark

    return ["".join(row).rstrip() for row in grid]


def print_preview(flower: Flower, width: int = 64) -> None:
    """Print a character preview of the visible regions.

    Args:
        flower: Resolved flower
        width: Maximum number of columns
    """
    console.print("\n[bold]Preview[/bold]")
    for row in render_preview(flower, width):
        console.print(Text("  " + row))


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
