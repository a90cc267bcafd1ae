"""MCP Config Editor Configuration Management"""
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

load_dotenv()

# Package root directory
PROJECT_ROOT = Path(__file__).parent.resolve()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="MCP_EDITOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Server
    host: str = "127.0.0.1"
    port: int = 3456
    open_browser: bool = True
    log_level: str = "info"

    # Explicit config file; overrides platform detection when set
    config_path: Optional[Path] = Field(default=None)

    # Bundled preset catalog
    presets_file: Path = PROJECT_ROOT / "presets" / "presets.json"

    # Static GUI
    static_dir: Path = PROJECT_ROOT / "static"

    # CORS - frontend dev servers
    cors_origins: list[str] = Field(default=[
        "http://localhost:5173",
        "http://127.0.0.1:5173",
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ])

    def model_post_init(self, __context) -> None:
        """Expand ``~`` in user-supplied paths."""
        if self.config_path is not None:
            self.config_path = self.config_path.expanduser()


settings = Settings()
