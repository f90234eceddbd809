"""Building the ``src`` declaration of a @font-face rule.

The font is either embedded as a base64 ``data:`` URL or referenced by an
external URL built from a destination prefix and the file name.
"""

import base64
import mimetypes
import re
from pathlib import Path
from types import MappingProxyType

from font2css.exceptions import MalformedPathError

DEFAULT_MIME_TYPE = "application/octet-stream"

FONT_MIME_TYPES: MappingProxyType[str, str] = MappingProxyType(
    {
        ".ttf": "font/ttf",
        ".otf": "font/otf",
        ".woff": "font/woff",
        ".woff2": "font/woff2",
        ".eot": "application/vnd.ms-fontobject",
        ".svg": "image/svg+xml",
        ".ttc": "font/collection",
    }
)

# Trailing file name: word/dot/hyphen/space run, any separator, extension
FILENAME_PATTERN = re.compile(r"([\w.\-\s]+).\w+$")


def get_mime_type(path: Path) -> str:
    """Look up the MIME type for a path by its extension.

    Falls back to the ``mimetypes`` registry for non-font extensions and
    to ``application/octet-stream`` when nothing is known.
    """
    mime_type = FONT_MIME_TYPES.get(path.suffix.lower())
    if mime_type is None:
        mime_type, _ = mimetypes.guess_type(path.name)
    return mime_type or DEFAULT_MIME_TYPE


def extract_filename(path: Path) -> str:
    """Extract the file name (with extension) used in external URLs.

    Raises:
        MalformedPathError: If the path has no recognizable file name
    """
    match = FILENAME_PATTERN.search(path.as_posix())
    if match is None:
        raise MalformedPathError(path)
    return match.group(0)


def custom_file_path(path: Path, dest: str) -> str:
    """Build the external URL for a font under ``dest``.

    A ``dest`` ending in ``/`` is used as a prefix directly. Otherwise a
    leading ``/`` is added and the file name is appended with no separator.

    Examples:
        >>> custom_file_path(Path("src/Arial.ttf"), "fonts/")
        'fonts/Arial.ttf'
        >>> custom_file_path(Path("src/Arial.ttf"), "fonts")
        '/fontsArial.ttf'
    """
    filename = extract_filename(path)
    if dest.endswith("/"):
        return dest + filename
    return "/" + dest + filename


def encode_data_uri(contents: bytes, path: Path) -> str:
    """Encode font bytes as a base64 ``data:`` URL."""
    encoded = base64.b64encode(contents).decode("ascii")
    return f"data:{get_mime_type(path)};charset=utf-8;base64,{encoded}"


def get_src(path: Path, contents: bytes, dest: str | None = None) -> str:
    """Build the ``src`` declaration for a font.

    Args:
        path: Path of the font file
        contents: Font file bytes (ignored when ``dest`` is set)
        dest: External destination prefix, or None to embed the font

    Returns:
        ``src:url(<url>);``

    Raises:
        MalformedPathError: If ``dest`` is set and the path has no file name
    """
    if dest:
        return f"src:url({custom_file_path(path, dest)});"
    return f"src:url({encode_data_uri(bytes(contents), path)});"
