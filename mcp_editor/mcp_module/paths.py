"""Config file locations.

Maps the host platform to the files an MCP client reads its server list
from, and picks the one the editor works on.
"""
import os
import platform
from pathlib import Path
from typing import Mapping, Optional

from pydantic import BaseModel

DESKTOP_CONFIG_NAME = "claude_desktop_config.json"
USER_CONFIG_NAME = ".claude.json"

# Scope constants
SCOPE_CUSTOM = "custom"
SCOPE_DESKTOP = "desktop"
SCOPE_USER = "user"

SCOPE_LABELS = {
    SCOPE_CUSTOM: "Custom path",
    SCOPE_DESKTOP: "Claude Desktop",
    SCOPE_USER: "Claude Code (user)",
}


class ConfigLocation(BaseModel):
    """One known config file location."""
    scope: str
    label: str
    path: str
    exists: bool = False


def get_desktop_config_path(
    system: Optional[str] = None,
    home: Optional[Path] = None,
    env: Optional[Mapping[str, str]] = None,
) -> Path:
    """Return the Claude Desktop config path for the given platform."""
    system = system or platform.system()
    home = home or Path.home()
    env = os.environ if env is None else env

    if system == "Darwin":
        return home / "Library" / "Application Support" / "Claude" / DESKTOP_CONFIG_NAME
    if system == "Windows":
        appdata = env.get("APPDATA")
        base = Path(appdata) if appdata else home / "AppData" / "Roaming"
        return base / "Claude" / DESKTOP_CONFIG_NAME

    # Linux and other Unix: XDG config dir or ~/.config
    xdg = env.get("XDG_CONFIG_HOME")
    base = Path(xdg) if xdg else home / ".config"
    return base / "Claude" / DESKTOP_CONFIG_NAME


def get_user_config_path(home: Optional[Path] = None) -> Path:
    """Return the user-scope config path (``~/.claude.json``)."""
    return (home or Path.home()) / USER_CONFIG_NAME


def _location(scope: str, path: Path) -> ConfigLocation:
    return ConfigLocation(
        scope=scope,
        label=SCOPE_LABELS[scope],
        path=str(path),
        exists=path.is_file(),
    )


def list_locations(
    custom_path: Optional[Path] = None,
    system: Optional[str] = None,
    home: Optional[Path] = None,
    env: Optional[Mapping[str, str]] = None,
) -> list[ConfigLocation]:
    """List every known location in priority order: custom, desktop, user."""
    locations = []
    if custom_path is not None:
        locations.append(_location(SCOPE_CUSTOM, Path(custom_path)))
    locations.append(_location(SCOPE_DESKTOP, get_desktop_config_path(system, home, env)))
    locations.append(_location(SCOPE_USER, get_user_config_path(home)))
    return locations


def resolve_active(locations: list[ConfigLocation]) -> ConfigLocation:
    """Pick the location the editor should read and write.

    A custom location always wins. Otherwise the first existing file is
    used, and when nothing exists yet the desktop file is the one that
    gets created on the first save.
    """
    for loc in locations:
        if loc.scope == SCOPE_CUSTOM:
            return loc
    for loc in locations:
        if loc.exists:
            return loc
    for loc in locations:
        if loc.scope == SCOPE_DESKTOP:
            return loc
    raise ValueError("No config locations available")
