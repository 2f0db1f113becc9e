"""
Style-preserving text diff.

Compares the old and new text by common prefix and common suffix only.
Characters inside those two runs keep their StyledChar entries; everything
between them is rebuilt unstyled.
"""

import re
from typing import Sequence, Tuple

from .models import StyledChar, SpacesMode

LINE_BREAKS = re.compile(r"[\n\r]+")


def clean_text(text: str, spaces_mode: SpacesMode = SpacesMode.KEEP) -> str:
    """Strips line breaks, and spaces too when asked."""
    text = LINE_BREAKS.sub("", text)
    if spaces_mode == SpacesMode.REMOVE:
        text = text.replace(" ", "")
    return text


def common_affixes(old: str, new: str) -> Tuple[int, int]:
    """Returns (prefix, suffix) lengths with prefix + suffix <= min(len(old), len(new))."""
    limit = min(len(old), len(new))

    prefix = 0
    while prefix < limit and old[prefix] == new[prefix]:
        prefix += 1

    suffix = 0
    while suffix < limit - prefix and old[-1 - suffix] == new[-1 - suffix]:
        suffix += 1

    return prefix, suffix


def diff_styled(
    old_chars: Sequence[StyledChar], new_text: str
) -> Tuple[StyledChar, ...]:
    """Builds the StyledChar sequence for new_text, reusing entries from old_chars."""
    old_text = "".join(sc.char for sc in old_chars)
    if old_text == new_text:
        return tuple(old_chars)

    prefix, suffix = common_affixes(old_text, new_text)
    middle = new_text[prefix : len(new_text) - suffix]
    tail = old_chars[len(old_chars) - suffix :] if suffix else ()

    return (
        tuple(old_chars[:prefix])
        + tuple(StyledChar(c) for c in middle)
        + tuple(tail)
    )


def styled_from_text(text: str) -> Tuple[StyledChar, ...]:
    return tuple(StyledChar(c) for c in text)
