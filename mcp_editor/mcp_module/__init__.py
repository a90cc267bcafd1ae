"""MCP (Model Context Protocol) config module.

Provides the ConfigManager singleton for reading and writing the MCP
server config file.
"""
from mcp_editor.config import settings
from mcp_editor.mcp_module.manager import (
    ConfigError,
    ConfigFileError,
    ConfigManager,
    ConfigValidationError,
)

# Module-level singleton
config_manager = ConfigManager(config_path=settings.config_path)

__all__ = [
    "config_manager",
    "ConfigManager",
    "ConfigError",
    "ConfigFileError",
    "ConfigValidationError",
]
