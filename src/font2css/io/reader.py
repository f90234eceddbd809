"""Font file reader for collecting input files from disk.

This module provides the FontFileReader class, which expands files,
directories and glob patterns into FontFile records in buffer or stream
mode.
"""

from collections.abc import Iterable, Iterator, Sequence
from fnmatch import fnmatch
from pathlib import Path
from typing import BinaryIO

from font2css.domain import FontFile
from font2css.exceptions import FontFileNotFoundError

FONT_PATTERNS: tuple[str, ...] = (
    "*.ttf",
    "*.otf",
    "*.woff",
    "*.woff2",
    "*.eot",
    "*.svg",
    "*.ttc",
)

_GLOB_CHARS = frozenset("*?[")


def _is_glob(part: str) -> bool:
    return any(char in _GLOB_CHARS for char in part)


class FontFileReader:
    """Collects FontFile records from files, directories and globs.

    Directories are walked recursively: sub-directories become null-mode
    files and regular files matching one of ``patterns`` are loaded. With
    ``buffer=False`` the files are opened as binary streams, which must be
    released with close().

    Example:
        with FontFileReader(["fonts/"], patterns=FONT_PATTERNS) as reader:
            for file in reader.iter_files():
                print(file.path, file.mode)
    """

    def __init__(
        self,
        paths: Iterable[Path | str],
        *,
        buffer: bool = True,
        patterns: Sequence[str] = ("*",),
    ) -> None:
        """Initialize the reader.

        Args:
            paths: Files, directories or glob patterns to read
            buffer: Read contents into memory (False = open streams)
            patterns: File name patterns applied inside directories
        """
        self._paths = [Path(path) for path in paths]
        self._buffer = buffer
        self._patterns = tuple(patterns)
        self._handles: list[BinaryIO] = []

    def iter_files(self) -> Iterator[FontFile]:
        """Iterate over all input files in argument order.

        Raises:
            FontFileNotFoundError: If a non-glob input does not exist
        """
        for path in self._paths:
            if path.is_dir():
                yield from self._iter_directory(path)
            elif path.is_file():
                yield self._load(path, base=path.parent)
            elif any(_is_glob(part) for part in path.parts):
                yield from self._iter_glob(path)
            else:
                raise FontFileNotFoundError(path)

    def _iter_directory(self, root: Path) -> Iterator[FontFile]:
        for path in sorted(root.rglob("*")):
            if path.is_dir():
                yield FontFile(path=path, contents=None, base=root)
            elif self._matches(path):
                yield self._load(path, base=root)

    def _iter_glob(self, pattern: Path) -> Iterator[FontFile]:
        parts = pattern.parts
        split = next(i for i, part in enumerate(parts) if _is_glob(part))
        base = Path(*parts[:split]) if split else Path(".")
        for path in sorted(base.glob(str(Path(*parts[split:])))):
            if path.is_dir():
                yield FontFile(path=path, contents=None, base=base)
            else:
                yield self._load(path, base=base)

    def _matches(self, path: Path) -> bool:
        return any(fnmatch(path.name, pattern) for pattern in self._patterns)

    def _load(self, path: Path, base: Path) -> FontFile:
        if self._buffer:
            return FontFile(path=path, contents=path.read_bytes(), base=base)

        handle = path.open("rb")
        self._handles.append(handle)
        return FontFile(path=path, contents=handle, base=base)

    def close(self) -> None:
        """Close any stream handles opened by the reader."""
        for handle in self._handles:
            handle.close()
        self._handles = []

    def __enter__(self) -> "FontFileReader":
        """Context manager entry."""
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
