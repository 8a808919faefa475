"""Tests for the style mapper."""

import pytest

from postcraft_mcp.glyphs import Style
from postcraft_mcp.styles import (
    apply_style,
    to_bold,
    to_bold_italic,
    to_italic,
    to_monospace,
    to_strikethrough,
    to_underline,
)


# ---------------------------------------------------------------------------
# Individual conversion functions
# ---------------------------------------------------------------------------


class TestToBold:
    def test_lowercase(self):
        assert to_bold("hello") == "𝗵𝗲𝗹𝗹𝗼"

    def test_uppercase(self):
        assert to_bold("HELLO") == "𝗛𝗘𝗟𝗟𝗢"

    def test_mixed_case(self):
        assert to_bold("Hello") == "𝗛𝗲𝗹𝗹𝗼"

    def test_digits(self):
        assert to_bold("2026") == "𝟮𝟬𝟮𝟲"

    def test_punctuation_passthrough(self):
        assert to_bold("hi!") == "𝗵𝗶!"

    def test_spaces_passthrough(self):
        assert to_bold("a b") == "𝗮 𝗯"

    def test_empty(self):
        assert to_bold("") == ""


class TestToItalic:
    def test_lowercase(self):
        assert to_italic("hello") == "𝘩𝘦𝘭𝘭𝘰"

    def test_uppercase(self):
        assert to_italic("HELLO") == "𝘏𝘌𝘓𝘓𝘖"

    def test_no_digit_conversion(self):
        """Italic block has no digit range, so digits pass through as ASCII."""
        assert to_italic("abc123") == "𝘢𝘣𝘤123"


class TestToBoldItalic:
    def test_lowercase(self):
        assert to_bold_italic("hello") == "𝙝𝙚𝙡𝙡𝙤"

    def test_uppercase(self):
        assert to_bold_italic("HELLO") == "𝙃𝙀𝙇𝙇𝙊"

    def test_digits_stay_bold(self):
        """No bold-italic digits exist, so digits keep their bold glyph."""
        assert to_bold_italic("x9") == "𝙭𝟵"


class TestToMonospace:
    def test_lowercase(self):
        assert to_monospace("code") == "𝚌𝚘𝚍𝚎"

    def test_uppercase(self):
        assert to_monospace("CODE") == "𝙲𝙾𝙳𝙴"

    def test_digits(self):
        assert to_monospace("42") == "𝟺𝟸"

    def test_mixed(self):
        assert to_monospace("fn()") == "𝚏𝚗()"


class TestCombiningStyles:
    def test_underline(self):
        assert to_underline("ab") == "a̲b̲"

    def test_underline_marks_spaces_too(self):
        assert to_underline("a b") == "a̲ ̲b̲"

    def test_strikethrough(self):
        assert to_strikethrough("no") == "n̶o̶"

    def test_strikethrough_over_bold_glyphs(self):
        assert to_strikethrough(to_bold("a")) == "𝗮̶"

    def test_empty(self):
        assert to_underline("") == ""
        assert to_strikethrough("") == ""


# ---------------------------------------------------------------------------
# apply_style contract
# ---------------------------------------------------------------------------


class TestApplyStyle:
    @pytest.mark.parametrize("style", ["bold", "italic", "code"])
    def test_substitution_preserves_length(self, style):
        text = "Hello World 2026"
        assert len(apply_style(style, text)) == len(text)

    @pytest.mark.parametrize("style", [Style.UNDERLINE, Style.STRIKETHROUGH])
    def test_combining_doubles_length(self, style):
        text = "Hello, 世界 🚀"
        assert len(apply_style(style, text)) == 2 * len(text)

    def test_iterates_by_code_point(self):
        """Astral-plane characters are never split."""
        result = apply_style(Style.UNDERLINE, "🚀")
        assert result == "🚀̲"

    def test_unmapped_pass_through_in_place(self):
        result = apply_style(Style.BOLD, "a 中 🚀 b")
        assert result == "𝗮 中 🚀 𝗯"

    def test_already_styled_text_unchanged_by_same_style(self):
        once = apply_style(Style.BOLD, "text")
        assert apply_style(Style.BOLD, once) == once

    def test_unknown_style_rejected(self):
        with pytest.raises(ValueError):
            apply_style("sparkle", "text")
