"""MCP Config Editor - browser GUI for MCP server config files."""

__version__ = "0.1.0"
