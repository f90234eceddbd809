"""Domain models for font2css.

Key classes:
- ContentsMode: Null, stream or buffer representation of a file's contents
- FontFile: A file travelling through the pipeline
- AttributeGuess: Style and weight declarations guessed from a file name
- FontFaceRule: An assembled @font-face rule
"""

from font2css.domain.file import ContentsMode, FontFile
from font2css.domain.rule import AttributeGuess, FontFaceRule

__all__: list[str] = [
    # Enums
    "ContentsMode",
    # Core types
    "FontFile",
    "AttributeGuess",
    "FontFaceRule",
]
