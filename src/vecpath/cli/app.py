"""CLI application entry point for vecpath.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from vecpath import __version__
from vecpath.cli.output import (
    SYM_OK,
    console,
    print_draw_calls,
    print_error,
    print_header,
    print_step,
    print_success,
    print_surface_info,
)
from vecpath.cli.scene import draw_demo_frame
from vecpath.config import GeometryConfig, LoggingConfig, VecPathSettings
from vecpath.exceptions import ExportError, VecPathError
from vecpath.render import DrawingSurface, SvgRasterizer
from vecpath.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="vecpath",
    help="Render the vecpath demo scene to an SVG file.",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Vecpath[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def render(
    output: Annotated[
        Path,
        typer.Option(
            "--output",
            "-o",
            help="Output SVG path",
        ),
    ] = Path("vecpath-demo.svg"),
    width: Annotated[
        int,
        typer.Option(
            "--width",
            help="Surface width in pixels",
            min=1,
        ),
    ] = 640,
    height: Annotated[
        int,
        typer.Option(
            "--height",
            help="Surface height in pixels",
            min=1,
        ),
    ] = 640,
    arc_resolution: Annotated[
        float,
        typer.Option(
            "--arc-resolution",
            help="Arc length covered by one tangent-arc segment (0.1-50)",
            min=0.1,
            max=50.0,
        ),
    ] = 2.0,
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
            help="Show a breakdown of the issued draw commands",
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
    """Render the demo scene through the SVG rasterizer.

    The scene covers every shape kind: lines, rectangles, rounded rectangles,
    ellipses and arc sectors, and a free-form subpath with a tangent-arc corner.

    Example:
        vecpath --output frame.svg --width 800 --height 700
    """
    # Validate mutually exclusive options
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if log_level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR"):
        print_error(
            f"Invalid log level: {log_level}",
            details="Valid values: DEBUG, INFO, WARNING, ERROR",
        )
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)

    settings = VecPathSettings(
        geometry=GeometryConfig(arc_resolution=arc_resolution),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not quiet else "WARNING",
        ),
    )

    try:
        logger = configure_logging(
            log_file=settings.logging.log_file,
            console_level=settings.logging.log_level,
            file_level=settings.logging.file_log_level,
            quiet=quiet,
        )

        if not quiet:
            print_step("Drawing frame")
            print_surface_info(width, height)

        rasterizer = SvgRasterizer()
        surface = DrawingSurface(rasterizer, width, height, settings=settings, logger=logger)
        with surface:
            draw_demo_frame(surface)

        if not quiet:
            print_step("Writing SVG")

        written = rasterizer.save(output)

        if not quiet:
            if verbose:
                print_draw_calls(surface.stats.command_counts)
            print_success(
                output_path=str(written),
                file_size=_format_file_size(written),
                stats=surface.stats,
            )
        else:
            console.print(f"{SYM_OK} {written}")

    except ExportError as e:
        print_error(f"Could not write SVG: {e.reason}")
        raise typer.Exit(code=1)
    except VecPathError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        # Re-raise typer.Exit to allow clean exits
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


def _format_file_size(path: Path) -> str:
    """Format file size in human-readable form.

    Args:
        path: Path to file

    Returns:
        Human-readable file size (e.g., "428 KB")
    """
    try:
        size_bytes = path.stat().st_size
    except OSError:
        return "unknown"
    if size_bytes < 1024:
        return f"{size_bytes} B"
    elif size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.0f} KB"
    else:
        return f"{size_bytes / (1024 * 1024):.1f} MB"


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
