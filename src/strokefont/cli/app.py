"""CLI application entry point for strokefont.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from strokefont import __version__
from strokefont.cli.output import (
    console,
    create_progress,
    print_coverage,
    print_error,
    print_font_written,
    print_header,
    print_snapshot_info,
    print_step,
)
from strokefont.config import FontMetadata, LoggingConfig, ProcessingConfig, StrokeFontSettings
from strokefont.core import FontSynthesizer, coverage
from strokefont.exceptions import (
    FontEncodingError,
    FontSaveError,
    SnapshotLoadError,
    StrokeFontError,
)
from strokefont.io import FontWriter, load_snapshot
from strokefont.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="strokefont",
    help="Build installable TrueType fonts from hand-drawn stroke snapshots.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]StrokeFont[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
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
    """Build installable TrueType fonts from hand-drawn stroke snapshots."""


@app.command()
def build(
    snapshot: Annotated[
        Path,
        typer.Argument(
            help="Path to the stroke snapshot (JSON)",
            show_default=False,
        ),
    ],
    output_dir: Annotated[
        Path,
        typer.Option(
            "--output-dir",
            "-o",
            help="Directory the font files are written to",
        ),
    ] = Path("."),
    family: Annotated[
        str,
        typer.Option("--family", help="Font family name"),
    ] = "MyCustomFont",
    style: Annotated[
        str,
        typer.Option("--style", help="Font style name"),
    ] = "Regular",
    author: Annotated[
        str,
        typer.Option("--author", help="Designer name"),
    ] = "Font Maker",
    font_version: Annotated[
        str,
        typer.Option("--font-version", help="Font version string"),
    ] = "1.000",
    auto_scale: Annotated[
        bool,
        typer.Option(
            "--auto-scale/--no-auto-scale",
            help="Scale and align every character by its class",
        ),
    ] = False,
    weight: Annotated[
        float,
        typer.Option(
            "--weight",
            "-w",
            help="Stroke width multiplier",
            min=0.1,
            max=10.0,
        ),
    ] = 1.0,
    include_bold: Annotated[
        bool,
        typer.Option(
            "--include-bold",
            help="Also write a Bold variant (2.5x stroke width)",
        ),
    ] = False,
    workers: Annotated[
        int | None,
        typer.Option(
            "--workers",
            "-j",
            help="Number of worker processes (default: in-process)",
            min=1,
        ),
    ] = None,
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
) -> None:
    """Synthesize a font from a stroke snapshot.

    Writes <Family>-<Style>.ttf into the output directory, plus
    <Family>-Bold.ttf when --include-bold is given.

    Example:
        strokefont build strokes.json --auto-scale --family "My Hand"
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)

    settings = StrokeFontSettings(
        processing=ProcessingConfig(max_workers=workers or 1),
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

    try:
        metadata = FontMetadata(
            family_name=family,
            style_name=style,
            author=author,
            version=font_version,
            weight_multiplier=weight,
            auto_scale=auto_scale,
        )

        if not quiet:
            print_step("Loading snapshot")
        glyph_data = load_snapshot(snapshot)
        if not quiet:
            print_snapshot_info(
                snapshot_path=str(snapshot),
                characters=len(glyph_data),
                strokes=sum(len(s) for s in glyph_data.values()),
            )

        variants = [metadata]
        if include_bold:
            variants.append(metadata.bold(settings.stroke.bold_multiplier))

        synthesizer = FontSynthesizer.default(settings, logger=logger)
        writer = FontWriter(output_dir)

        for variant in variants:
            if not quiet:
                print_step(f"Synthesizing {variant.family_name} {variant.style_name}")

            if not quiet:
                with create_progress() as progress:
                    task_id = progress.add_task("Synthesizing", total=len(glyph_data))

                    def update_progress(completed: int, *_: object) -> None:
                        progress.update(task_id, completed=completed)

                    result = synthesizer.synthesize(
                        glyph_data, variant, progress_callback=update_progress
                    )
            else:
                result = synthesizer.synthesize(glyph_data, variant)

            path = writer.write(result.buffer, variant)

            if not quiet:
                stats = result.stats
                print_font_written(
                    output_path=str(path),
                    file_size=_format_file_size(path),
                    total_time_s=stats.duration_seconds,
                    built=stats.built_count,
                    skipped=stats.skipped_count,
                    fallbacks=stats.merge_fallbacks,
                    errors=stats.error_count,
                )
                if verbose and stats.errors:
                    for char, message in stats.errors:
                        console.print(f"  {char!r}: {message}")

    except SnapshotLoadError as e:
        print_error(f"Could not load snapshot: {e.reason}")
        raise typer.Exit(code=1)
    except FontEncodingError as e:
        print_error(f"Could not encode font: {e.reason}")
        raise typer.Exit(code=1)
    except FontSaveError as e:
        print_error(f"Could not save font: {e.reason}")
        raise typer.Exit(code=1)
    except StrokeFontError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except ValueError as e:
        print_error(f"Invalid option: {e}")
        raise typer.Exit(code=1)


@app.command("coverage")
def coverage_command(
    snapshot: Annotated[
        Path,
        typer.Argument(
            help="Path to the stroke snapshot (JSON)",
            show_default=False,
        ),
    ],
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="List missing characters",
        ),
    ] = False,
) -> None:
    """Show which characters of the repertoire have been drawn."""
    try:
        glyph_data = load_snapshot(snapshot)
    except SnapshotLoadError as e:
        print_error(f"Could not load snapshot: {e.reason}")
        raise typer.Exit(code=1)

    print_coverage(coverage(glyph_data), verbose=verbose)


def _format_file_size(path: Path) -> str:
    """Format file size in human-readable form.

    Args:
        path: Path to file

    Returns:
        Human-readable file size (e.g., "12 KB")
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
