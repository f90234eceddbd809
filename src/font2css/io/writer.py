"""Stylesheet writer for saving generated CSS files.

This module provides the StylesheetWriter class, which places pipeline
results under an output directory, and concat() for bundling several
rules into a single stylesheet.
"""

from collections.abc import Iterable
from pathlib import Path

from font2css.domain import ContentsMode, FontFile
from font2css.exceptions import StreamingNotSupportedError, StylesheetWriteError


def concat(files: Iterable[FontFile], separator: bytes = b"\n") -> bytes:
    """Join the contents of buffered files into one stylesheet.

    Null files are skipped.
    """
    return separator.join(bytes(file.contents) for file in files if file.is_buffer())


class StylesheetWriter:
    """Writes generated stylesheets below an output directory.

    Each file keeps its path relative to the root it was collected from.

    Example:
        writer = StylesheetWriter(Path("dist/css"))
        for css_file in pipeline.run(files):
            writer.write(css_file)
    """

    def __init__(self, output_dir: Path) -> None:
        """Initialize the writer.

        Args:
            output_dir: Directory stylesheets are written to
        """
        self._output_dir = Path(output_dir)

    @property
    def output_dir(self) -> Path:
        return self._output_dir

    def get_output_path(self, file: FontFile) -> Path:
        """Compute where a file will be written."""
        return self._output_dir / file.relative

    def write(self, file: FontFile) -> Path | None:
        """Write a single pipeline result.

        Null-mode directory entries create the matching directory, other
        null files are ignored.

        Args:
            file: Pipeline result

        Returns:
            Path written or created, or None when nothing was written

        Raises:
            StreamingNotSupportedError: If the file holds a stream
            StylesheetWriteError: If the file cannot be written
        """
        output_path = self.get_output_path(file)
        mode = file.mode

        if mode is ContentsMode.STREAM:
            raise StreamingNotSupportedError(file.path)

        try:
            if mode is ContentsMode.NULL:
                if not file.path.is_dir():
                    return None
                output_path.mkdir(parents=True, exist_ok=True)
                return output_path

            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_bytes(bytes(file.contents))
        except OSError as e:
            raise StylesheetWriteError(output_path, str(e)) from e

        return output_path

    def write_bundle(self, name: str, files: Iterable[FontFile]) -> Path:
        """Concatenate files into a single stylesheet.

        Args:
            name: File name of the bundle (e.g. "fonts.css")
            files: Pipeline results to bundle

        Raises:
            StylesheetWriteError: If the bundle cannot be written
        """
        output_path = self._output_dir / name
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_bytes(concat(files))
        except OSError as e:
            raise StylesheetWriteError(output_path, str(e)) from e
        return output_path
