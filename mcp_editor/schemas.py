"""Request/response models for the HTTP API."""
from typing import Any, Optional

from pydantic import BaseModel

from mcp_editor.mcp_module.manager import BackupInfo
from mcp_editor.mcp_module.paths import ConfigLocation


class ApiResponse(BaseModel):
    """Envelope for save results and every error response."""
    success: bool
    message: str
    data: Optional[dict[str, Any]] = None


class ConfigPathResponse(BaseModel):
    path: str
    exists: bool


class ConfigInfoResponse(BaseModel):
    path: str
    scope: str
    exists: bool
    locations: list[ConfigLocation]


class BackupListResponse(BaseModel):
    backups: list[BackupInfo]


class HealthResponse(BaseModel):
    status: str
    version: str
