"""Core conversion logic for font2css.

This module contains:

- Keyword tables for CSS font-style and font-weight values
- Attribute inference from hyphen-delimited font file names
- src declaration building (data URI or external URL)
- Per-file synthesis and per-run orchestration

All inference is purely textual over the file name; font data is only
ever base64-encoded, never parsed.

Key functions:
- guess_font_style: Guess font-style from a base name
- guess_font_weight: Guess font-weight from a base name
- get_font_family: Derive font-family from a base name
- get_src: Build the src declaration

Key classes:
- FontFaceSynthesizer: Converts one font file into one CSS file
- FontFacePipeline: Runs many files, isolating per-file errors
"""

from font2css.core.keywords import (
    FONT_STYLE_KEYWORDS,
    FONT_WEIGHT_KEYWORDS,
    FONT_WEIGHT_NAMES,
)
from font2css.core.naming import (
    get_font_family,
    guess_attributes,
    guess_font_style,
    guess_font_weight,
)
from font2css.core.pipeline import FontFacePipeline
from font2css.core.source import (
    custom_file_path,
    encode_data_uri,
    extract_filename,
    get_mime_type,
    get_src,
)
from font2css.core.synthesizer import FontFaceSynthesizer

__all__ = [
    # Keyword tables
    "FONT_STYLE_KEYWORDS",
    "FONT_WEIGHT_KEYWORDS",
    "FONT_WEIGHT_NAMES",
    # Classes
    "FontFacePipeline",
    "FontFaceSynthesizer",
    # Functions
    "custom_file_path",
    "encode_data_uri",
    "extract_filename",
    "get_font_family",
    "get_mime_type",
    "get_src",
    "guess_attributes",
    "guess_font_style",
    "guess_font_weight",
]
