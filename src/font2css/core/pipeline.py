"""Per-run orchestration of the font-to-CSS conversion.

The pipeline feeds files one at a time to the synthesizer and isolates
per-file failures: a PluginError is reported through the error channel
and the run continues with the next file.
"""

import time
from collections.abc import Callable, Iterable, Iterator

import structlog

from font2css.config import Font2CssSettings
from font2css.core.synthesizer import FontFaceSynthesizer
from font2css.domain import FontFile
from font2css.exceptions import PluginError
from font2css.utils import ProcessingLogger, ProcessingStats

ErrorHandler = Callable[[PluginError], None]


class FontFacePipeline:
    """Runs a sequence of files through the FontFaceSynthesizer.

    Example:
        pipeline = FontFacePipeline(settings, on_error=print)
        for css_file in pipeline.run(files):
            writer.write(css_file)
        print(pipeline.stats.converted_count)
    """

    def __init__(
        self,
        settings: Font2CssSettings,
        on_error: ErrorHandler | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the pipeline.

        Args:
            settings: Application settings
            on_error: Called once per failed file; errors are collected in
                ``errors`` when not given
            logger: Logger for per-file events (defaults to the package logger)
        """
        self.settings = settings
        self.synthesizer = FontFaceSynthesizer(settings.synthesizer)
        self.errors: list[PluginError] = []
        self._on_error = on_error or self.errors.append
        self.logger = logger or structlog.get_logger("font2css")
        self.processing_logger = ProcessingLogger(self.logger)

    @property
    def stats(self) -> ProcessingStats:
        return self.processing_logger.stats

    def run(self, files: Iterable[FontFile]) -> Iterator[FontFile]:
        """Process files lazily, yielding each result exactly once.

        Args:
            files: Input files in pipeline order

        Yields:
            Converted CSS files and unchanged null files, in input order
        """
        stats = self.stats
        stats.start_time = time.time()

        try:
            for file in files:
                source_path = file.path
                self.processing_logger.log_file_start(source_path)
                was_null = file.is_null()

                try:
                    result = self.synthesizer.synthesize(file)
                except PluginError as e:
                    self.processing_logger.log_file_error(source_path, e)
                    self._on_error(e)
                    continue

                if was_null:
                    self.processing_logger.log_file_passed_through(source_path)
                else:
                    self.processing_logger.log_file_converted(source_path, result.path)
                yield result
        finally:
            stats.end_time = time.time()

    def process(self, files: Iterable[FontFile]) -> list[FontFile]:
        """Process all files eagerly and return the results."""
        return list(self.run(files))
