"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with formatted per-file lines and a run summary.
"""

from rich.console import Console
from rich.text import Text

from font2css.exceptions import PluginError

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
    console.print(f"\n[bold]font2css[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_source_info(embed: bool, dest: str | None) -> None:
    """Print how generated rules reference their fonts."""
    if embed:
        console.print(f"  src {SYM_DOT} embedded base64 data URI")
    else:
        line = Text(f"  src {SYM_DOT} external url under ")
        line.append(dest or "", style="bold")
        console.print(line)


def print_file_written(path: str) -> None:
    """Print a written stylesheet path."""
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(f"{SYM_OK} ", style="green")
    line.append(path)
    console.print(line, soft_wrap=True)


def print_file_details(declarations: list[str]) -> None:
    """Print the guessed declarations of a converted file."""
    line = Text(f"    {SYM_DOT} ", style="dim")
    line.append(" ".join(declarations))
    console.print(line, soft_wrap=True)


def print_file_skipped(path: str) -> None:
    """Print an entry passed through without a stylesheet."""
    line = Text(f"  {SYM_DOT} ", style="dim")
    line.append(path)
    line.append(" (skipped)", style="dim")
    console.print(line, soft_wrap=True)


def print_file_error(error: PluginError) -> None:
    """Print a per-file error without stopping the run."""
    line = Text("  ")
    line.append(f"{SYM_ERR} ", style="red")
    line.append(str(error.path) if error.path else "<unknown>")
    line.append(f" {SYM_DOT} {error.message}", style="red")
    console.print(line, soft_wrap=True)


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


def print_summary(
    converted: int,
    passed_through: int,
    errors: int,
    total_time_s: float,
    bundle_path: str | None = None,
) -> None:
    """Print run summary.

    Args:
        converted: Number of fonts converted to stylesheets
        passed_through: Number of null entries forwarded unchanged
        errors: Number of files that failed
        total_time_s: Total processing time in seconds
        bundle_path: Path of the bundled stylesheet, if any
    """
    time_str = _format_time(total_time_s)

    if errors:
        console.print(f"\n[bold yellow]{SYM_ERR} Completed with errors[/bold yellow] in {time_str}")
    else:
        console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    if bundle_path:
        line = Text("  ")
        line.append(bundle_path, style="bold")
        console.print(line)

    error_style = "red" if errors > 0 else "green"
    console.print(
        f"  {converted} stylesheets {SYM_DOT} {passed_through} skipped {SYM_DOT} "
        f"[{error_style}]{errors} errors[/{error_style}]"
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
