"""Exception hierarchy for font2css."""

from pathlib import Path

PLUGIN_NAME = "font2css"


class Font2CssError(Exception):
    """Base exception for all font2css errors."""

    pass


class PluginError(Font2CssError):
    """Recoverable error raised while converting a single file.

    The pipeline reports these through its error channel and moves on to
    the next file.
    """

    def __init__(
        self,
        plugin: str,
        message: str,
        path: Path | str | None = None,
    ) -> None:
        self.plugin = plugin
        self.message = message
        self.path = Path(path) if path is not None else None
        super().__init__(f"{plugin}: {message}")


class StreamingNotSupportedError(PluginError):
    """File contents were delivered as a stream instead of a buffer."""

    def __init__(self, path: Path | str | None = None) -> None:
        super().__init__(PLUGIN_NAME, "Streaming is not supported", path)


class MalformedPathError(PluginError):
    """File path has no recognizable file name for an external reference."""

    def __init__(self, path: Path | str) -> None:
        super().__init__(
            PLUGIN_NAME,
            f"Cannot extract a file name from path '{path}'",
            path,
        )


class FontFileError(Font2CssError):
    """Errors related to reading or writing files on disk."""

    pass


class FontFileNotFoundError(FontFileError):
    """Input path does not exist."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        super().__init__(f"Input not found: '{path}'")


class StylesheetWriteError(FontFileError):
    """Error writing a generated stylesheet."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Failed to write stylesheet '{path}': {reason}")
