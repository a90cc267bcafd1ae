"""Preset Catalog Module - bundled MCP server templates."""
import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from mcp_editor.mcp_module.validator import ServerConfig

from .models import Preset

logger = logging.getLogger("mcp_editor.presets")


class PresetCatalog:
    """Read-only catalog of preset server configs loaded from a JSON file."""

    def __init__(self, presets_file: Path):
        self.presets_file = presets_file
        self._presets: Optional[list[Preset]] = None

    def _load(self) -> list[Preset]:
        """Read and check the catalog file once."""
        if self._presets is not None:
            return self._presets

        raw = json.loads(self.presets_file.read_text(encoding="utf-8"))
        entries = raw.get("presets", []) if isinstance(raw, dict) else raw

        presets = []
        seen = set()
        for entry in entries:
            try:
                preset = Preset.model_validate(entry)
                ServerConfig.model_validate(preset.config)
            except ValidationError as e:
                raise ValueError(f"Invalid preset in {self.presets_file}: {e}") from e
            if preset.id in seen:
                raise ValueError(f"Duplicate preset id '{preset.id}' in {self.presets_file}")
            seen.add(preset.id)
            presets.append(preset)

        logger.info(f"Loaded {len(presets)} presets from {self.presets_file}")
        self._presets = presets
        return presets

    def list_presets(self, category: Optional[str] = None) -> list[Preset]:
        """List presets in file order, optionally filtered by category."""
        presets = self._load()
        if category:
            presets = [p for p in presets if p.category == category]
        return list(presets)

    def get_preset(self, preset_id: str) -> Optional[Preset]:
        for preset in self._load():
            if preset.id == preset_id:
                return preset
        return None

    def search_presets(self, query: str) -> list[Preset]:
        """Search presets by id, name, description, category, tags, command or args."""
        query_lower = query.strip().lower()
        if not query_lower:
            return self.list_presets()

        results = []
        for preset in self._load():
            haystack = [preset.id, preset.name, preset.description, preset.category, *preset.tags]
            haystack.append(str(preset.config.get("command", "")))
            haystack.extend(str(arg) for arg in preset.config.get("args", []))
            if any(query_lower in field.lower() for field in haystack):
                results.append(preset)
        return results

    def get_categories(self) -> list[str]:
        return sorted({p.category for p in self._load()})


__all__ = ["PresetCatalog", "Preset"]
