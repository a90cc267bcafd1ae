"""Preset Catalog Data Models"""
from typing import Any
from pydantic import BaseModel


class Preset(BaseModel):
    """Canned MCP server configuration shown for one-click insertion."""
    id: str
    name: str
    description: str
    category: str
    tags: list[str] = []
    config: dict[str, Any]


class PresetListResponse(BaseModel):
    """Response model for preset listings and searches."""
    presets: list[Preset]


class CategoryListResponse(BaseModel):
    categories: list[str]
