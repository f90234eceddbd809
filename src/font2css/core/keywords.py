"""CSS font keyword tables.

Read-only lookup tables used to recognize style and weight tokens in
font file names.
"""

from types import MappingProxyType

FONT_STYLE_KEYWORDS: frozenset[str] = frozenset({"normal", "italic", "oblique"})

FONT_WEIGHT_KEYWORDS: frozenset[str] = frozenset(
    {"normal", "bold", "bolder", "lighter"}
    | {str(weight) for weight in range(100, 1000, 100)}
)

# Common weight names mapped to their numeric CSS weight
FONT_WEIGHT_NAMES: MappingProxyType[str, str] = MappingProxyType(
    {
        "thin": "100",
        "hairline": "100",
        "extralight": "200",
        "ultralight": "200",
        "light": "300",
        "normal": "400",
        "regular": "400",
        "book": "400",
        "medium": "500",
        "semibold": "600",
        "demibold": "600",
        "bold": "700",
        "extrabold": "800",
        "ultrabold": "800",
        "black": "900",
        "heavy": "900",
    }
)
