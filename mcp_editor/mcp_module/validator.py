"""MCP config schema and validation.

The models here only check shape. Callers keep writing the payload they
received, so nothing is coerced, stripped or reordered on the way to disk.
"""
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError


class ServerConfig(BaseModel):
    """A single MCP server entry, keyed by name in ``mcpServers``."""

    # Unknown keys (transport, url, ...) are tolerated and left alone
    model_config = ConfigDict(strict=True, extra="allow")

    command: str = Field(..., min_length=1)
    args: list[str] = Field(default_factory=list)
    env: dict[str, str] = Field(default_factory=dict)
    disabled: bool = False


class MCPConfig(BaseModel):
    """Top-level shape: ``{"mcpServers": {name: ServerConfig}}``."""

    model_config = ConfigDict(strict=True, extra="allow")

    mcpServers: dict[str, ServerConfig]


class ValidationResult(BaseModel):
    valid: bool
    errors: list[str] = []


def _format_error(error: dict[str, Any]) -> str:
    loc = ".".join(str(part) for part in error.get("loc", ()))
    return f"{loc or 'config'}: {error.get('msg', 'invalid value')}"


def validate_config(data: Any) -> ValidationResult:
    """Validate ``data`` against the MCP config schema.

    Collects every problem instead of stopping at the first one.
    """
    errors: list[str] = []
    try:
        MCPConfig.model_validate(data)
    except ValidationError as e:
        errors.extend(_format_error(err) for err in e.errors())

    servers = data.get("mcpServers") if isinstance(data, dict) else None
    if isinstance(servers, dict):
        for name in servers:
            if not isinstance(name, str) or not name:
                errors.append(f"mcpServers: server name must be a non-empty string (got {name!r})")

    return ValidationResult(valid=not errors, errors=errors)
