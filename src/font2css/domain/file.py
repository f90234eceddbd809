"""Font file representation.

This module defines the FontFile record that flows through the pipeline,
along with the ContentsMode variant describing how its contents are held.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import BinaryIO


class ContentsMode(str, Enum):
    """How a file's contents are represented."""

    NULL = "null"
    STREAM = "stream"
    BUFFER = "buffer"


@dataclass
class FontFile:
    """A file travelling through the pipeline.

    Exactly one representation applies to ``contents``: ``None`` for files
    without data (directory entries), a bytes-like buffer for fully read
    files, or an open binary handle for streamed files.

    Attributes:
        path: Path of the file as known to the pipeline
        contents: None, a bytes buffer, or a readable binary stream
        base: Root the file was collected under (used for output placement)
    """

    path: Path
    contents: bytes | BinaryIO | None = None
    base: Path | None = None

    def __post_init__(self) -> None:
        self.path = Path(self.path)
        if self.base is not None:
            self.base = Path(self.base)

    @property
    def mode(self) -> ContentsMode:
        """Classify the contents representation.

        Raises:
            TypeError: If contents is neither None, bytes-like nor readable
        """
        if self.contents is None:
            return ContentsMode.NULL
        if isinstance(self.contents, (bytes, bytearray, memoryview)):
            return ContentsMode.BUFFER
        if hasattr(self.contents, "read"):
            return ContentsMode.STREAM
        raise TypeError(
            f"Unsupported contents type for '{self.path}': {type(self.contents).__name__}"
        )

    def is_null(self) -> bool:
        return self.mode is ContentsMode.NULL

    def is_stream(self) -> bool:
        return self.mode is ContentsMode.STREAM

    def is_buffer(self) -> bool:
        return self.mode is ContentsMode.BUFFER

    @property
    def basename(self) -> str:
        """File name including extension."""
        return self.path.name

    @property
    def stem(self) -> str:
        """File name without directory or extension."""
        return self.path.stem

    @property
    def extname(self) -> str:
        """Extension including the leading dot, or empty string."""
        return self.path.suffix

    @property
    def relative(self) -> Path:
        """Path relative to ``base``, or just the file name."""
        if self.base is not None:
            try:
                return self.path.relative_to(self.base)
            except ValueError:
                pass
        return Path(self.path.name)

    def replace_ext(self, ext: str) -> None:
        """Replace the path extension, keeping directory and stem.

        Args:
            ext: New extension including the leading dot (e.g. ".css")
        """
        self.path = self.path.with_suffix(ext)
