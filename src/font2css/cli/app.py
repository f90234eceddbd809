"""CLI application entry point for font2css.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from font2css import __version__
from font2css.cli.output import (
    console,
    print_error,
    print_file_details,
    print_file_error,
    print_file_skipped,
    print_file_written,
    print_header,
    print_source_info,
    print_step,
    print_summary,
)
from font2css.config import (
    Font2CssSettings,
    LoggingConfig,
    LogLevel,
    OutputConfig,
    SynthesizerConfig,
)
from font2css.core import FontFacePipeline, get_font_family, guess_attributes
from font2css.domain import FontFile
from font2css.exceptions import (
    Font2CssError,
    FontFileNotFoundError,
    PluginError,
    StylesheetWriteError,
)
from font2css.io import FONT_PATTERNS, FontFileReader, StylesheetWriter
from font2css.utils import configure_logging

# Exit code when some files failed but the run completed
EXIT_PARTIAL = 2

# Create the Typer app
app = typer.Typer(
    name="font2css",
    help="Convert font files to CSS @font-face stylesheets.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]font2css[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def font2css(
    inputs: Annotated[
        list[Path],
        typer.Argument(
            help="Font files, directories or glob patterns",
            show_default=False,
        ),
    ],
    output_dir: Annotated[
        Path,
        typer.Option(
            "--output-dir",
            "-o",
            help="Directory stylesheets are written to",
        ),
    ] = Path("."),
    dest: Annotated[
        str | None,
        typer.Option(
            "--dest",
            "-d",
            help="Reference fonts under this URL instead of embedding them",
        ),
    ] = None,
    bundle: Annotated[
        str | None,
        typer.Option(
            "--bundle",
            "-b",
            help="Write all rules into a single stylesheet with this name",
        ),
    ] = None,
    stream: Annotated[
        bool,
        typer.Option(
            "--stream",
            help="Open inputs as streams instead of reading them into memory",
        ),
    ] = False,
    patterns: Annotated[
        list[str] | None,
        typer.Option(
            "--pattern",
            "-p",
            help="File name pattern used inside directories (repeatable)",
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
        str | None,
        typer.Option(
            "--log-level",
            help="Echo logs to the console at this level (DEBUG|INFO|WARNING|ERROR)",
            show_default=False,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Show guessed attributes for each file",
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
    """Convert font files to CSS files holding one @font-face rule each.

    The font-family, font-style and font-weight are guessed from the file
    name, e.g. OpenSans-Bold-Italic.ttf gives family "OpenSans", weight 700
    and style italic. Fonts are embedded as base64 data URIs unless --dest
    is given.

    Example:
        font2css fonts/ -o dist/css --dest /static/fonts/
    """
    # Validate mutually exclusive options
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    level: LogLevel | None = None
    if log_level is not None:
        try:
            level = LogLevel(log_level.upper())
        except ValueError:
            valid = ", ".join(item.value for item in LogLevel)
            print_error(f"Invalid log level: {log_level}", details=f"Valid values: {valid}")
            raise typer.Exit(code=1)

    settings = Font2CssSettings(
        synthesizer=SynthesizerConfig(dest=dest),
        output=OutputConfig(
            output_dir=output_dir,
            bundle=bundle,
            buffer=not stream,
        ),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=level or LogLevel.WARNING,
        ),
    )

    # Console logs only when a level is asked for; per-file errors are already
    # printed by Rich
    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level.value,
        file_level=settings.logging.file_log_level.value,
        quiet=quiet or level is None,
    )

    if not quiet:
        print_header(__version__)
        print_step("Converting")
        print_source_info(
            embed=settings.synthesizer.dest is None,
            dest=settings.synthesizer.dest,
        )

    def report_error(error: PluginError) -> None:
        if not quiet:
            print_file_error(error)

    def report_details(result: FontFile) -> None:
        if result.is_null():
            print_file_skipped(str(result.relative))
            return
        guess = guess_attributes(result.stem)
        print_file_details(
            [*guess.declarations(), get_font_family(result.stem, guess.matched_count)]
        )

    pipeline = FontFacePipeline(settings, on_error=report_error, logger=logger)
    writer = StylesheetWriter(settings.output.output_dir)
    bundle_path: Path | None = None

    try:
        with FontFileReader(
            inputs,
            buffer=settings.output.buffer,
            patterns=patterns or FONT_PATTERNS,
        ) as reader:
            bundled: list[FontFile] = []

            for result in pipeline.run(reader.iter_files()):
                if settings.output.bundle:
                    bundled.append(result)
                else:
                    written = writer.write(result)
                    if written is not None and result.is_buffer() and not quiet:
                        print_file_written(str(written))

                if verbose:
                    report_details(result)

            if settings.output.bundle:
                bundle_path = writer.write_bundle(settings.output.bundle, bundled)

    except FontFileNotFoundError as e:
        print_error(
            f"Input not found: {e.path}",
            details=f"The path '{e.path}' does not exist and is not a glob pattern.",
        )
        raise typer.Exit(code=1)
    except StylesheetWriteError as e:
        print_error(f"Could not write stylesheet: {e.reason}")
        raise typer.Exit(code=1)
    except Font2CssError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)

    stats = pipeline.stats

    if not quiet:
        print_summary(
            converted=stats.converted_count,
            passed_through=stats.passed_through_count,
            errors=stats.error_count,
            total_time_s=stats.duration_seconds,
            bundle_path=str(bundle_path) if bundle_path else None,
        )

    if stats.error_count:
        raise typer.Exit(code=EXIT_PARTIAL)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
