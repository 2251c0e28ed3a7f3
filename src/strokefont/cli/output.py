"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with progress bars, tables, and formatted messages.
"""

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table
from rich.text import Text

from strokefont.core.repertoire import CategoryCoverage

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def create_progress() -> Progress:
    """Create a rich progress bar for glyph synthesis.

    Returns:
        Configured Progress instance with bar and time elapsed.
    """
    return Progress(
        TextColumn("  "),
        BarColumn(bar_width=40, complete_style="green", finished_style="green"),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=False,
    )


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]StrokeFont[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_snapshot_info(snapshot_path: str, characters: int, strokes: int) -> None:
    """Print stroke snapshot information.

    Args:
        snapshot_path: Path to the snapshot file
        characters: Number of characters in the snapshot
        strokes: Total number of strokes
    """
    line = Text("  ")
    line.append(snapshot_path)
    console.print(line)
    console.print(f"  {characters:,} characters {SYM_DOT} {strokes:,} strokes")


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


def print_font_written(
    output_path: str,
    file_size: str,
    total_time_s: float,
    built: int,
    skipped: int,
    fallbacks: int,
    errors: int,
) -> None:
    """Print success message with summary for one written font.

    Args:
        output_path: Path to output file
        file_size: Human-readable file size string
        total_time_s: Synthesis time in seconds
        built: Number of glyphs built from drawings
        skipped: Number of characters skipped
        fallbacks: Number of glyphs encoded from unmerged ribbons
        errors: Number of characters that failed
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(total_time_s)}")

    line = Text("  ")
    line.append(output_path, style="bold")
    line.append(f" ({file_size})")
    console.print(line)

    error_style = "red" if errors > 0 else "green"
    console.print(
        f"  {built} glyphs {SYM_DOT} {skipped} skipped {SYM_DOT} "
        f"{fallbacks} unmerged {SYM_DOT} [{error_style}]{errors} errors[/{error_style}]"
    )


def print_coverage(report: list[CategoryCoverage], verbose: bool) -> None:
    """Print the per-category drawing coverage table.

    Args:
        report: Coverage entries in category order
        verbose: Whether to list the missing characters
    """
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("Category")
    table.add_column("Drawn", justify="right")
    table.add_column("Coverage", justify="right")
    if verbose:
        table.add_column("Missing")

    for entry in report:
        row = [entry.name, f"{len(entry.drawn)}/{entry.total}", f"{entry.ratio:.0%}"]
        if verbose:
            row.append(Text(" ".join(entry.missing)))
        table.add_row(*row)

    console.print(table)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
