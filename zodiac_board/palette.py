"""
Color palettes for tile text and shading.
"""

import re
from typing import List, Optional

from .models import ColorKind

TEXT_PALETTE = [
    "#000000", "#333333", "#555555", "#777777", "#999999",
    "#800000", "#a52a2a", "#cc0000", "#ff0000", "#e65100",
    "#ff6600", "#ff9900", "#cc9900", "#b38f00", "#806000",
    "#003300", "#006400", "#008000", "#228b22", "#2e8b57",
    "#000080", "#0000cd", "#0000ff", "#008080", "#008b8b",
    "#4b0082", "#800080", "#8b008b", "#9400d3", "#9932cc",
    "#8b4513", "#d2691e", "#cd853f", "#708090", "#2f4f4f",
]

BG_PALETTE = [
    "#ffffff00", "#ffffff", "#f2f2f2", "#e6e6e6", "#d9d9d9",
    "#ffe6e6", "#ffcccc", "#fadadd", "#f8c8dc", "#e6b3b3",
    "#fff0e6", "#ffe0cc", "#ffebd9", "#fffacd", "#fff5c2",
    "#ffffe0", "#ffffcc", "#ffffb3", "#fcf4a3", "#fff080",
    "#e6ffe6", "#ccffcc", "#d0f0c0", "#c1e1c1", "#b3e6b3",
    "#e0ffff", "#ccffff", "#d1f2eb", "#cce5ff", "#b3d9ff",
    "#e6f2ff", "#d6eaf8", "#e6e6fa", "#dcd0ff", "#c7b3e5",
]

HEX_INPUT = re.compile(r"^#?([0-9A-F]{3}|[0-9A-F]{6})$", re.IGNORECASE)
HEX_COLOR = re.compile(r"^#([0-9A-F]{3}|[0-9A-F]{6}|[0-9A-F]{8})$", re.IGNORECASE)


def normalize_hex_color(value: str) -> Optional[str]:
    """'f00' -> '#f00'; None for anything that is not a 3 or 6 digit hex color."""
    value = value.strip()
    if not HEX_INPUT.match(value):
        return None
    return value if value.startswith("#") else "#" + value


def rgb_hex(color: Optional[str]) -> Optional[str]:
    """Opaque '#rrggbb' for a palette color, None for transparent or unknown values."""
    if not color or not HEX_COLOR.match(color):
        return None
    digits = color[1:]
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    elif len(digits) == 8:
        if digits[6:].lower() == "00":
            return None
        digits = digits[:6]
    return "#" + digits.lower()


def get_palette(kind: ColorKind) -> List[str]:
    return TEXT_PALETTE if kind == ColorKind.TEXT else BG_PALETTE


def get_palette_layout(kind: ColorKind, per_row: int = 5) -> List[List[str]]:
    colors = get_palette(kind)
    return [colors[i : i + per_row] for i in range(0, len(colors), per_row)]
