"""Wrap a text selection in the markup for one formatting action.

This is the editor-side counterpart of the formatter: it produces markdown
that ``markdown_to_unicode`` later turns into styled text.
"""

from __future__ import annotations

MARKUP_ACTIONS = (
    "bold",
    "italic",
    "underline",
    "strikethrough",
    "bullet",
    "numbered",
    "quote",
    "code",
)

_WRAPPERS = {
    "bold": ("**", "Bold Text"),
    "italic": ("*", "Italic Text"),
    "underline": ("_", "Underlined Text"),
    "strikethrough": ("~~", "Strikethrough Text"),
}


class UnknownMarkupActionError(ValueError):
    """Raised for a formatting action the markup builder does not know."""

    def __init__(self, action: str):
        self.action = action
        super().__init__(
            f"Unknown markup action {action!r}. "
            f"Available: {', '.join(MARKUP_ACTIONS)}"
        )


def _prefix_lines(selected: str, prefix: str) -> str:
    """Strip and prefix each non-blank line; blank lines are kept as-is."""
    return "\n".join(
        f"{prefix}{line.strip()}" if line.strip() else line
        for line in selected.split("\n")
    )


def apply_markup(action: str, selected: str = "") -> str:
    """Return ``selected`` wrapped in the markup for ``action``.

    An empty selection yields placeholder text in that markup, e.g.
    ``**Bold Text**`` for bold.

    Raises:
        UnknownMarkupActionError: If ``action`` is not in MARKUP_ACTIONS.
    """
    if action in _WRAPPERS:
        delimiter, placeholder = _WRAPPERS[action]
        return f"{delimiter}{selected or placeholder}{delimiter}"

    if action == "bullet":
        return _prefix_lines(selected, "• ") if selected else "• Bullet point"

    if action == "numbered":
        if not selected:
            return "1. Numbered item"
        lines = [line.strip() for line in selected.split("\n") if line.strip()]
        return "\n".join(f"{i}. {line}" for i, line in enumerate(lines, start=1))

    if action == "quote":
        return _prefix_lines(selected, "> ") if selected else "> Quote text"

    if action == "code":
        if not selected:
            return "`code`"
        if "\n" in selected:
            return f"```\n{selected}\n```"
        return f"`{selected}`"

    raise UnknownMarkupActionError(action)
