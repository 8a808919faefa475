"""Markdown → Unicode plain-text formatter for social post bodies.

Converts a constrained markdown dialect to Unicode characters that render as
styled text on LinkedIn, which only accepts plain text in a post body.

Supported conversions:
    # / ## / ### heading  → Math Sans-Serif Bold line
    ***~~text~~***        → bold italic, struck through
    ***text***, **_text_**, *__text__*
                          → Math Sans-Serif Bold Italic (U+1D63C block)
    **~~text~~**          → bold, struck through
    *~~text~~*            → italic, struck through
    ~~text~~              → combining long stroke overlay (U+0336)
    **text**              → Math Sans-Serif Bold       (U+1D5D4 block)
    *text*                → Math Sans-Serif Italic     (U+1D608 block)
    _text_                → combining low line          (U+0332)
    - / * / + item        → • item
    1. item               → renumbered from 1 per list
    > quote               → ❝ quote ❞
    `code`                → ⟦Math Monospace⟧            (U+1D670 block)
    [text](url)           → text (url)
    ---                   → ▰▰▰▰▰▰▰▰▰▰
"""

from __future__ import annotations

import functools
import logging
import re
from typing import Callable

from postcraft_mcp.glyphs import Style
from postcraft_mcp.styles import apply_style

logger = logging.getLogger(__name__)

LINKEDIN_POST_MAX_LENGTH = 3000

BULLET = "•"
QUOTE_OPEN = "❝"
QUOTE_CLOSE = "❞"
CODE_OPEN = "⟦"
CODE_CLOSE = "⟧"
SEPARATOR = "▰" * 10


class PostTooLongError(ValueError):
    """Raised when converted post text exceeds the configured maximum."""

    def __init__(self, length: int, max_length: int = LINKEDIN_POST_MAX_LENGTH,
                 text: str = ""):
        self.length = length
        self.max_length = max_length
        self.text = text
        super().__init__(
            f"Post is {length} characters (max {max_length}). "
            f"Shorten by {length - max_length} characters."
        )


def _styled(*styles: Style) -> Callable[[re.Match], str]:
    """Build a replacer applying ``styles`` in order to the first group."""

    def replace(match: re.Match) -> str:
        text = match.group(1)
        for style in styles:
            text = apply_style(style, text)
        return text

    return replace


# ---------------------------------------------------------------------------
# Patterns. Emphasis spans stay on one line; single and double asterisk
# delimiters must hug their text so "* item" and "2 * 3 * 4" are left alone.
# Span contents stop at the next delimiter character, so an unclosed opener
# is abandoned there instead of rescanning the rest of the line.
# ---------------------------------------------------------------------------

_HEADING = re.compile(r"^#{1,3} (.*)$", re.MULTILINE)

_BOLD_ITALIC_STRIKE = re.compile(r"\*\*\*~~((?:[^~*\n]|~(?!~))+)~~\*\*\*")
_BOLD_ITALIC = re.compile(r"\*\*\*([^*\n]+)\*\*\*")
_BOLD_ITALIC_UNDERSCORE = re.compile(r"\*\*_((?:[^_*\n]|_(?!\*))+)_\*\*")
_BOLD_ITALIC_DUNDER = re.compile(r"\*__((?:[^_*\n]|_(?!_\*))+)__\*")
_BOLD_STRIKE = re.compile(r"\*\*~~((?:[^~*\n]|~(?!~))+)~~\*\*")
_ITALIC_STRIKE = re.compile(r"\*~~((?:[^~*\n]|~(?!~))+)~~\*")

_STRIKETHROUGH = re.compile(r"~~((?:[^~\n]|~(?!~))+)~~")
_BOLD = re.compile(r"\*\*(?!\s)((?:[^*\n]|\*(?!\*))+?)(?<!\s)\*\*")
_ITALIC = re.compile(r"\*(?![\s*])([^*\n]+)(?<!\s)\*")
# Underscores inside identifiers (my_variable_name) or URL paths and query
# strings (/_draft_, ?tag=_x_) are not delimiters
_UNDERLINE = re.compile(r"(?<![\w/=])_((?:[^_\n]|__)+?)_(?!\w)")

_BULLET_ITEM = re.compile(r"^[ \t]*[-*+][ \t]+(.*)$", re.MULTILINE)
_NUMBERED_ITEM = re.compile(r"^[ \t]*\d+\.[ \t]+(.*)$")
_QUOTE_LINE = re.compile(r"^[ \t]*>[ \t]?(.*)$")

_INLINE_CODE = re.compile(r"`([^`\n]+)`")
_LINK = re.compile(r"\[([^\]\n]+)\]\(([^)\s]+)\)")
_THEMATIC_BREAK = re.compile(r"^---$", re.MULTILINE)


def renumber_lists(text: str) -> str:
    """Renumber every ordered list so it counts 1, 2, 3, ...

    A list is a run of numbered lines. Blank lines inside the run do not end
    it; any other line does, and the next list starts again at 1. The numbers
    the author typed are ignored.
    """
    lines = text.split("\n")
    counter = 0
    for i, line in enumerate(lines):
        match = _NUMBERED_ITEM.match(line)
        if match:
            counter += 1
            lines[i] = f"{counter}. {match.group(1)}"
        elif line.strip():
            counter = 0
    return "\n".join(lines)


def merge_quotes(text: str) -> str:
    """Merge each run of consecutive ``>`` lines into one quoted block."""
    out: list[str] = []
    quoted: list[str] = []

    def flush() -> None:
        if quoted:
            out.append(f"{QUOTE_OPEN} " + "\n".join(quoted) + f" {QUOTE_CLOSE}")
            quoted.clear()

    for line in text.split("\n"):
        match = _QUOTE_LINE.match(line)
        if match:
            quoted.append(match.group(1).strip())
        else:
            flush()
            out.append(line)
    flush()
    return "\n".join(out)


def _sub(pattern: re.Pattern, repl) -> Callable[[str], str]:
    return functools.partial(pattern.sub, repl)


# Order matters: each pass sees the output of the one before it.
PASSES: tuple[tuple[str, Callable[[str], str]], ...] = (
    ("heading", _sub(_HEADING, _styled(Style.BOLD))),
    ("bold_italic_strikethrough",
     _sub(_BOLD_ITALIC_STRIKE, _styled(Style.BOLD, Style.ITALIC, Style.STRIKETHROUGH))),
    ("bold_italic", _sub(_BOLD_ITALIC, _styled(Style.BOLD, Style.ITALIC))),
    ("bold_italic_underscore",
     _sub(_BOLD_ITALIC_UNDERSCORE, _styled(Style.BOLD, Style.ITALIC))),
    ("bold_italic_dunder", _sub(_BOLD_ITALIC_DUNDER, _styled(Style.BOLD, Style.ITALIC))),
    ("bold_strikethrough", _sub(_BOLD_STRIKE, _styled(Style.BOLD, Style.STRIKETHROUGH))),
    ("italic_strikethrough",
     _sub(_ITALIC_STRIKE, _styled(Style.ITALIC, Style.STRIKETHROUGH))),
    # Strikethrough before underline and before the looser asterisk passes
    ("strikethrough", _sub(_STRIKETHROUGH, _styled(Style.STRIKETHROUGH))),
    # Bold before italic: "*" is a substring of "**"
    ("bold", _sub(_BOLD, _styled(Style.BOLD))),
    ("italic", _sub(_ITALIC, _styled(Style.ITALIC))),
    ("underline", _sub(_UNDERLINE, _styled(Style.UNDERLINE))),
    ("bullet_list", _sub(_BULLET_ITEM, rf"{BULLET} \1")),
    ("ordered_list", renumber_lists),
    ("quote", merge_quotes),
    ("inline_code",
     _sub(_INLINE_CODE,
          lambda m: CODE_OPEN + apply_style(Style.CODE, m.group(1)) + CODE_CLOSE)),
    ("link", _sub(_LINK, r"\1 (\2)")),
    ("thematic_break", _sub(_THEMATIC_BREAK, SEPARATOR)),
)


def markdown_to_unicode(text: str) -> str:
    """Convert markdown formatting to Unicode plain text.

    Runs every pass in ``PASSES`` in order. Characters with no styled glyph
    (punctuation, whitespace, emoji, non-Latin scripts) pass through
    unchanged. Unmatched delimiters are left as-is; no input makes a pass
    fail.

    Args:
        text: Input text with optional markdown formatting.

    Returns:
        Text with markdown formatting replaced by Unicode glyphs and symbols.
    """
    converted = text
    for _name, apply_pass in PASSES:
        converted = apply_pass(converted)
    logger.debug("Converted %d chars of markup into %d chars", len(text), len(converted))
    return converted


convert = markdown_to_unicode


def format_post(text: str, max_length: int = LINKEDIN_POST_MAX_LENGTH) -> str:
    """Convert ``text`` and check it fits in a post body.

    Raises:
        PostTooLongError: If the converted text exceeds ``max_length``
            code points.
    """
    converted = markdown_to_unicode(text)
    if len(converted) > max_length:
        raise PostTooLongError(len(converted), max_length, converted)
    return converted
