"""PostCraft MCP: markdown to Unicode styled plain text for social posts."""

__version__ = "0.1.0"
