"""Unicode glyph tables backing each text style.

Each substitution style maps ASCII A-Z (65-90), a-z (97-122) and, where the
Mathematical Alphanumeric Symbols block has them, 0-9 (48-57) to a styled
code point. Underline and strikethrough have no substitute glyphs in Unicode;
they are rendered with a combining mark appended after every character.
"""

from __future__ import annotations

import enum
from types import MappingProxyType
from typing import Mapping


class Style(str, enum.Enum):
    """Text styles understood by the style mapper."""

    BOLD = "bold"
    ITALIC = "italic"
    UNDERLINE = "underline"
    STRIKETHROUGH = "strikethrough"
    CODE = "code"


# ---------------------------------------------------------------------------
# Unicode Mathematical Alphanumeric Symbols block starts
# ---------------------------------------------------------------------------

# Math Sans-Serif Bold: U+1D5D4 (A) .. U+1D607
_BOLD_UPPER_START = 0x1D5D4  # 𝗔
_BOLD_LOWER_START = 0x1D5EE  # 𝗮
_BOLD_DIGIT_START = 0x1D7EC  # 𝟬

# Math Sans-Serif Italic: U+1D608 (A) .. U+1D63B (no digits)
_ITALIC_UPPER_START = 0x1D608  # 𝘈
_ITALIC_LOWER_START = 0x1D622  # 𝘢

# Math Sans-Serif Bold Italic: U+1D63C (A) .. U+1D66F (no digits)
_BOLD_ITALIC_UPPER_START = 0x1D63C  # 𝘼
_BOLD_ITALIC_LOWER_START = 0x1D656  # 𝙖

# Math Monospace: U+1D670 (A) .. U+1D6A3
_MONO_UPPER_START = 0x1D670  # 𝙰
_MONO_LOWER_START = 0x1D68A  # 𝚊
_MONO_DIGIT_START = 0x1D7F6  # 𝟶

COMBINING_LOW_LINE = "\u0332"
COMBINING_LONG_STROKE_OVERLAY = "\u0336"

COMBINING_MARKS: Mapping[Style, str] = MappingProxyType({
    Style.UNDERLINE: COMBINING_LOW_LINE,
    Style.STRIKETHROUGH: COMBINING_LONG_STROKE_OVERLAY,
})


def _block(first: str, start: int, count: int) -> dict[str, str]:
    """Map ``count`` characters from ``first`` onto a contiguous block."""
    base = ord(first)
    return {chr(base + i): chr(start + i) for i in range(count)}


def _alphanumeric(upper_start: int, lower_start: int,
                  digit_start: int | None = None) -> dict[str, str]:
    table = _block("A", upper_start, 26)
    table.update(_block("a", lower_start, 26))
    if digit_start is not None:
        table.update(_block("0", digit_start, 10))
    return table


def _restyle(from_upper: int, from_lower: int,
             to_upper: int, to_lower: int) -> dict[str, str]:
    """Map letters of one styled block onto another styled block."""
    table = {chr(from_upper + i): chr(to_upper + i) for i in range(26)}
    table.update({chr(from_lower + i): chr(to_lower + i) for i in range(26)})
    return table


def _build_tables() -> dict[Style, Mapping[str, str]]:
    bold = _alphanumeric(_BOLD_UPPER_START, _BOLD_LOWER_START, _BOLD_DIGIT_START)
    # Bold over italic glyphs yields bold italic
    bold.update(_restyle(_ITALIC_UPPER_START, _ITALIC_LOWER_START,
                         _BOLD_ITALIC_UPPER_START, _BOLD_ITALIC_LOWER_START))

    italic = _alphanumeric(_ITALIC_UPPER_START, _ITALIC_LOWER_START)
    # Italic over bold glyphs yields bold italic
    italic.update(_restyle(_BOLD_UPPER_START, _BOLD_LOWER_START,
                           _BOLD_ITALIC_UPPER_START, _BOLD_ITALIC_LOWER_START))

    code = _alphanumeric(_MONO_UPPER_START, _MONO_LOWER_START, _MONO_DIGIT_START)

    return {
        Style.BOLD: MappingProxyType(bold),
        Style.ITALIC: MappingProxyType(italic),
        Style.UNDERLINE: MappingProxyType({}),
        Style.STRIKETHROUGH: MappingProxyType({}),
        Style.CODE: MappingProxyType(code),
    }


GLYPH_TABLE: Mapping[Style, Mapping[str, str]] = MappingProxyType(_build_tables())


def lookup(style: Style | str, char: str) -> str | None:
    """Return the substitute for ``char`` in ``style``, or None if unmapped."""
    return GLYPH_TABLE[Style(style)].get(char)
