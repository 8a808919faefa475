"""Apply a single text style to a string, one code point at a time."""

from __future__ import annotations

from postcraft_mcp.glyphs import COMBINING_MARKS, GLYPH_TABLE, Style


def apply_style(style: Style | str, text: str) -> str:
    """Render ``text`` in ``style``.

    Substitution styles (bold, italic, code) replace each character with its
    glyph, leaving unmapped characters as they are, so the result has the same
    number of code points as the input. Combining styles (underline,
    strikethrough) append their mark after every character, doubling the
    length.
    """
    style = Style(style)
    mark = COMBINING_MARKS.get(style)
    if mark is not None:
        return "".join(ch + mark for ch in text)
    table = GLYPH_TABLE[style]
    return "".join(table.get(ch, ch) for ch in text)


def to_bold(text: str) -> str:
    """Convert plain text to Math Sans-Serif Bold Unicode."""
    return apply_style(Style.BOLD, text)


def to_italic(text: str) -> str:
    """Convert plain text to Math Sans-Serif Italic Unicode."""
    return apply_style(Style.ITALIC, text)


def to_bold_italic(text: str) -> str:
    """Convert plain text to Math Sans-Serif Bold Italic Unicode."""
    return to_italic(to_bold(text))


def to_monospace(text: str) -> str:
    """Convert plain text to Math Monospace Unicode."""
    return apply_style(Style.CODE, text)


def to_underline(text: str) -> str:
    return apply_style(Style.UNDERLINE, text)


def to_strikethrough(text: str) -> str:
    return apply_style(Style.STRIKETHROUGH, text)
