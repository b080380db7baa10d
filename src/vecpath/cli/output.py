"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from vecpath.utils import FrameStats

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Vecpath[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_surface_info(width: int, height: int) -> None:
    """Print surface dimensions."""
    console.print(f"  {width:,} {SYM_DOT} {height:,} px")


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


def print_draw_calls(counts: dict[str, int]) -> None:
    """Print a table of issued draw commands by type.

    Args:
        counts: Number of issued commands per command type
    """
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("Draw command")
    table.add_column("Count", justify="right")
    for name, count in sorted(counts.items()):
        table.add_row(name, f"{count:,}")
    console.print(table)


def print_success(output_path: str, file_size: str, stats: FrameStats) -> None:
    """Print success message with frame summary.

    Args:
        output_path: Path to output file
        file_size: Human-readable file size string
        stats: Statistics of the rendered frame
    """
    console.print(
        f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(stats.duration_seconds)}"
    )

    line = Text("  ")
    line.append(output_path, style="bold")
    line.append(f" ({file_size})")
    console.print(line)

    empty_style = "yellow" if stats.empty_passes > 0 else "green"
    console.print(
        f"  {stats.commands_issued} commands {SYM_DOT} {stats.points_emitted:,} points "
        f"{SYM_DOT} {stats.triangles_emitted:,} triangles {SYM_DOT} "
        f"[{empty_style}]{stats.empty_passes} empty passes[/{empty_style}]"
    )


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
