"""Font attribute inference from file names.

Font files are commonly named ``Family-Weight-Style`` (for example
``OpenSans-Bold-Italic.ttf``). The functions here scan the hyphen-separated
tokens after the first one and turn recognized keywords into CSS
declarations. Only the text of the name is used; font data is never read.
"""

import structlog

from font2css.core.keywords import (
    FONT_STYLE_KEYWORDS,
    FONT_WEIGHT_KEYWORDS,
    FONT_WEIGHT_NAMES,
)
from font2css.domain.rule import AttributeGuess

logger = structlog.get_logger(__name__)

TOKEN_SEPARATOR = "-"


def _suffix_tokens(basename: str) -> list[str]:
    """Lower-cased tokens following the first one."""
    return [token.lower() for token in basename.split(TOKEN_SEPARATOR)[1:]]


def guess_font_style(basename: str) -> str:
    """Guess the ``font-style`` declaration from a base name.

    Later matches overwrite earlier ones, so the last style keyword wins.

    Args:
        basename: File name without directory or extension

    Returns:
        ``font-style:<keyword>;`` or an empty string
    """
    guess = ""
    for token in _suffix_tokens(basename):
        if token in FONT_STYLE_KEYWORDS:
            guess = f"font-style:{token};"
    return guess


def guess_font_weight(basename: str) -> str:
    """Guess the ``font-weight`` declaration from a base name.

    Named weights (``bold``, ``thin``...) resolve to their numeric value,
    raw keywords (``bolder``, ``300``...) are used as-is. ``normal`` is
    ambiguous with the style keyword and is ignored. The last match wins.

    Args:
        basename: File name without directory or extension

    Returns:
        ``font-weight:<value>;`` or an empty string
    """
    guess = ""
    for token in _suffix_tokens(basename):
        if token == "normal":
            continue
        if token in FONT_WEIGHT_NAMES:
            guess = f"font-weight:{FONT_WEIGHT_NAMES[token]};"
        elif token in FONT_WEIGHT_KEYWORDS:
            guess = f"font-weight:{token};"
    return guess


def guess_attributes(basename: str) -> AttributeGuess:
    """Guess both style and weight declarations from a base name."""
    guess = AttributeGuess(
        style=guess_font_style(basename),
        weight=guess_font_weight(basename),
    )
    logger.debug(
        "Guessed font attributes",
        basename=basename,
        style=guess.style or None,
        weight=guess.weight or None,
    )
    return guess


def get_font_family(basename: str, count: int) -> str:
    """Extract the ``font-family`` declaration from a base name.

    Style and weight tokens are assumed to be trailing suffixes, so the
    last ``count`` tokens are dropped from the family name.

    Args:
        basename: File name without directory or extension
        count: Number of guessed declarations (0, 1 or 2)

    Returns:
        ``font-family:"<family>";``
    """
    parts = basename.split(TOKEN_SEPARATOR)
    if len(parts) == 1 or count == 0:
        return f'font-family:"{basename}";'
    return f'font-family:"{TOKEN_SEPARATOR.join(parts[:-count])}";'
