"""CSS @font-face rule values."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AttributeGuess:
    """Style and weight declarations guessed from a file name.

    Each field holds a complete declaration (e.g. ``font-weight:700;``)
    or an empty string when nothing matched.
    """

    style: str = ""
    weight: str = ""

    def declarations(self) -> list[str]:
        """Return the non-empty declarations, style first."""
        return [item for item in (self.style, self.weight) if item]

    @property
    def matched_count(self) -> int:
        return len(self.declarations())


@dataclass(frozen=True)
class FontFaceRule:
    """An assembled @font-face rule."""

    declarations: tuple[str, ...]

    def to_css(self) -> str:
        return f"@font-face{{{''.join(self.declarations)}}}"

    def to_bytes(self) -> bytes:
        return self.to_css().encode("utf-8")
