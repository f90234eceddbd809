"""File I/O layer for font2css.

This module connects the conversion pipeline to the file system.

Key responsibilities:
- Expand files, directories and globs into FontFile records
- Load contents as buffers or open them as streams
- Write generated stylesheets, optionally bundled into one file

Key classes:
- FontFileReader: Collect input files
- StylesheetWriter: Save generated stylesheets
"""

from font2css.io.reader import FONT_PATTERNS, FontFileReader
from font2css.io.writer import StylesheetWriter, concat

__all__ = [
    "FONT_PATTERNS",
    "FontFileReader",
    "StylesheetWriter",
    "concat",
]
