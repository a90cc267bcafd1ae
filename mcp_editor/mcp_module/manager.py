"""ConfigManager - loads, validates and saves the MCP server config file.

Every call resolves the active file again, so switching between the
desktop and user-scope configs on disk needs no restart. Saves copy the
previous file to ``<file>.backup.<timestamp>`` before overwriting it.
"""
import json
import logging
import shutil
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Mapping, Optional

from pydantic import BaseModel

from mcp_editor.mcp_module.paths import ConfigLocation, list_locations, resolve_active
from mcp_editor.mcp_module.validator import ValidationResult, validate_config

logger = logging.getLogger(__name__)

BACKUP_MARKER = ".backup."


class ConfigError(Exception):
    """Base class for config file problems."""


class ConfigFileError(ConfigError):
    """The config file could not be read or is not a JSON object."""


class ConfigValidationError(ConfigError):
    """The submitted config does not match the schema."""

    def __init__(self, errors: list[str]):
        super().__init__("Invalid configuration")
        self.errors = errors


class BackupInfo(BaseModel):
    name: str
    path: str
    size: int
    created_at: str


def _empty_config() -> dict[str, Any]:
    return {"mcpServers": {}}


def _backup_timestamp() -> str:
    # Lexicographic order matches chronological order
    return datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%S%fZ")


class ConfigManager:
    """Read-modify-write access to a single MCP config file."""

    def __init__(
        self,
        config_path: Optional[Path] = None,
        system: Optional[str] = None,
        home: Optional[Path] = None,
        env: Optional[Mapping[str, str]] = None,
    ) -> None:
        self._custom_path = Path(config_path) if config_path is not None else None
        self._system = system
        self._home = home
        self._env = env

    # ------------------------------------------------------------------
    # Locations
    # ------------------------------------------------------------------
    def get_locations(self) -> list[ConfigLocation]:
        return list_locations(self._custom_path, self._system, self._home, self._env)

    def get_active_location(self) -> ConfigLocation:
        return resolve_active(self.get_locations())

    def get_config_path(self) -> Path:
        """Path of the file the editor reads and writes."""
        return Path(self.get_active_location().path)

    def config_exists(self) -> bool:
        return self.get_config_path().is_file()

    def get_active_config_info(self) -> dict[str, Any]:
        """Active path and scope plus every known location."""
        locations = self.get_locations()
        active = resolve_active(locations)
        return {
            "path": active.path,
            "scope": active.scope,
            "exists": active.exists,
            "locations": [loc.model_dump() for loc in locations],
        }

    # ------------------------------------------------------------------
    # Load
    # ------------------------------------------------------------------
    def load_full_config(self) -> dict[str, Any]:
        """Load the whole config object, including non-``mcpServers`` fields."""
        path = self.get_config_path()
        if not path.is_file():
            return _empty_config()
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ConfigFileError(f"{path} is not valid JSON: {e}") from e
        except OSError as e:
            raise ConfigFileError(f"Cannot read {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigFileError(f"{path} must contain a JSON object")
        return data

    def load_config(self) -> dict[str, Any]:
        """Load only the ``mcpServers`` section."""
        data = self.load_full_config()
        servers = data.get("mcpServers")
        return {"mcpServers": servers if isinstance(servers, dict) else {}}

    # ------------------------------------------------------------------
    # Validate / save
    # ------------------------------------------------------------------
    def validate_config(self, data: Any) -> ValidationResult:
        return validate_config(data)

    def create_backup(self) -> Optional[Path]:
        """Copy the current file next to itself. Returns None if there is no file."""
        path = self.get_config_path()
        if not path.is_file():
            return None
        backup_path = path.with_name(f"{path.name}{BACKUP_MARKER}{_backup_timestamp()}")
        shutil.copyfile(path, backup_path)
        logger.info(f"Backup created: {backup_path}")
        return backup_path

    def save_config(self, data: Any) -> Optional[Path]:
        """Validate and write ``data``, backing up the previous file first.

        Top-level keys of ``data`` replace the ones on disk; keys it does
        not mention are kept. Returns the backup path, if one was made.
        """
        if not isinstance(data, dict):
            raise ConfigValidationError(["config: must be a JSON object"])

        subset = {"mcpServers": data["mcpServers"]} if "mcpServers" in data else {}
        result = self.validate_config(subset)
        if not result.valid:
            raise ConfigValidationError(result.errors)

        path = self.get_config_path()
        try:
            merged = self.load_full_config() if path.is_file() else {}
        except ConfigFileError as e:
            # The broken file still goes to the backup below
            logger.warning(f"Overwriting unreadable config: {e}")
            merged = {}
        merged.update(data)

        backup_path = self.create_backup()
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps(merged, indent=2, ensure_ascii=False) + "\n",
            encoding="utf-8",
        )
        logger.info(f"Saved {len(merged.get('mcpServers', {}))} MCP servers to {path}")
        return backup_path

    def list_backups(self) -> list[BackupInfo]:
        """Backups of the active file, newest first."""
        path = self.get_config_path()
        if not path.parent.is_dir():
            return []
        backups = []
        for entry in path.parent.glob(f"{path.name}{BACKUP_MARKER}*"):
            if not entry.is_file():
                continue
            stat = entry.stat()
            backups.append(BackupInfo(
                name=entry.name,
                path=str(entry),
                size=stat.st_size,
                created_at=datetime.fromtimestamp(stat.st_mtime, timezone.utc).isoformat(),
            ))
        backups.sort(key=lambda b: b.name, reverse=True)
        return backups
