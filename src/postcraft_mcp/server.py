"""PostCraft-mcp: FastMCP server for formatting LinkedIn posts as Unicode text.

Converts markdown to styled plain text that survives pasting into a post body.
"""

from __future__ import annotations

import logging
from typing import Any

from fastmcp import FastMCP

logger = logging.getLogger(__name__)

mcp = FastMCP("PostCraft")


# ---------------------------------------------------------------------------
# Settings singleton
# ---------------------------------------------------------------------------

_settings = None


def get_settings():
    """Get or create the Settings singleton."""
    global _settings
    if _settings is not None:
        return _settings
    from postcraft_mcp.config import Settings

    _settings = Settings()
    return _settings


# ---------------------------------------------------------------------------
# Tools
# ---------------------------------------------------------------------------


@mcp.tool()
async def health() -> dict:
    """Health check: returns service version and status."""
    from postcraft_mcp import __version__

    return {
        "service": "postcraft-mcp",
        "version": __version__,
        "status": "ok",
    }


@mcp.tool()
async def format_post(text: str) -> dict[str, Any]:
    """Convert a markdown post to Unicode rich text for LinkedIn.

    Accepts a small markdown dialect and converts it to Unicode characters
    that render as styled text in a plain-text post body:

        # Heading         → 𝗛𝗲𝗮𝗱𝗶𝗻𝗴
        **bold**          → 𝗯𝗼𝗹𝗱
        *italic*          → 𝘪𝘵𝘢𝘭𝘪𝘤
        ***bold italic*** → 𝙗𝙤𝙡𝙙 𝙞𝙩𝙖𝙡𝙞𝙘
        _underline_       → u̲n̲d̲e̲r̲l̲i̲n̲e̲
        ~~strike~~        → s̶t̶r̶i̶k̶e̶
        `code`            → ⟦𝚌𝚘𝚍𝚎⟧
        - item            → • item
        > quote           → ❝ quote ❞
        [text](url)       → text (url)

    Args:
        text: Post content with optional markdown formatting.

    Returns:
        text: The converted post, ready to paste.
        length: Its length in characters.
        max_length: The configured post length limit.
    """
    from postcraft_mcp.formatter import PostTooLongError, format_post as _format

    max_length = get_settings().postcraft_max_post_length
    try:
        converted = _format(text, max_length=max_length)
    except PostTooLongError as exc:
        logger.warning("Converted post too long: %d > %d", exc.length, exc.max_length)
        return {
            "error": str(exc),
            "length": exc.length,
            "max_length": exc.max_length,
            "text_converted": exc.text,
        }

    return {"text": converted, "length": len(converted), "max_length": max_length}


@mcp.tool()
async def list_templates() -> dict[str, Any]:
    """List the names of the starter post templates."""
    from postcraft_mcp.templates import template_names

    return {"templates": template_names()}


@mcp.tool()
async def render_template(name: str, convert: bool = True) -> dict[str, Any]:
    """Load a starter post template.

    Args:
        name: Template name (see list_templates).
        convert: Also return the Unicode-converted text (default True).

    Returns:
        name, markup (the editable markdown) and, when convert is set,
        text (the converted post).
    """
    from postcraft_mcp.formatter import markdown_to_unicode
    from postcraft_mcp.templates import UnknownTemplateError, get_template, template_names

    try:
        markup = get_template(name)
    except UnknownTemplateError as exc:
        return {"error": str(exc), "available": template_names()}

    result: dict[str, Any] = {"name": name, "markup": markup}
    if convert:
        result["text"] = markdown_to_unicode(markup)
    return result


@mcp.tool()
async def apply_markup(text: str, action: str) -> dict[str, Any]:
    """Wrap text in the markdown for one formatting action.

    Args:
        text: The selected text (may be empty for placeholder markup).
        action: One of bold, italic, underline, strikethrough, bullet,
                numbered, quote, code.

    Returns:
        action and markup (the wrapped text).
    """
    from postcraft_mcp.markup import MARKUP_ACTIONS, UnknownMarkupActionError
    from postcraft_mcp.markup import apply_markup as _apply

    try:
        markup = _apply(action, text)
    except UnknownMarkupActionError as exc:
        return {"error": str(exc), "actions": list(MARKUP_ACTIONS)}
    return {"action": action, "markup": markup}


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main() -> None:
    """Entry point for the PostCraft MCP server."""
    logging.basicConfig(level=get_settings().postcraft_log_level.upper())
    logger.info("Starting PostCraft MCP server.")
    mcp.run()


if __name__ == "__main__":
    main()
