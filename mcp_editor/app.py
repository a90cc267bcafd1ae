"""MCP Config Editor Backend - FastAPI Application Entry Point

Run with: python -m mcp_editor.app  (or the ``mcp-editor`` launcher)
Server starts at: http://127.0.0.1:3456
"""
import logging
from typing import Any, Optional

from fastapi import Depends, FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
import uvicorn

from mcp_editor import __version__
from mcp_editor.config import settings
from mcp_editor.mcp_module import (
    ConfigManager,
    ConfigValidationError,
    config_manager,
)
from mcp_editor.presets import PresetCatalog
from mcp_editor.presets.models import CategoryListResponse, Preset, PresetListResponse
from mcp_editor.schemas import (
    ApiResponse,
    BackupListResponse,
    ConfigInfoResponse,
    ConfigPathResponse,
    HealthResponse,
)

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger("mcp_editor")

# ============================================
# FastAPI Application
# ============================================
app = FastAPI(
    title="MCP Config Editor API",
    description="View, edit, validate and back up MCP server configuration files",
    version=__version__,
)

# CORS - Allow frontend dev servers
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

preset_catalog = PresetCatalog(settings.presets_file)


def get_config_manager() -> ConfigManager:
    return config_manager


def get_preset_catalog() -> PresetCatalog:
    return preset_catalog


# ============================================
# Startup
# ============================================
@app.on_event("startup")
async def startup_event():
    """Log where the editor will read and write."""
    logger.info("MCP Config Editor started on %s:%d", settings.host, settings.port)
    logger.info("Active config file: %s", config_manager.get_config_path())


# ============================================
# Error envelope
# ============================================
class ApiError(HTTPException):
    """HTTPException that also carries a ``data`` payload for the envelope."""

    def __init__(self, status_code: int, message: str, data: Optional[dict[str, Any]] = None):
        super().__init__(status_code=status_code, detail=message)
        self.data = data


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render every HTTP error as ``{"success": false, "message": ...}``."""
    body = ApiResponse(
        success=False,
        message=str(exc.detail),
        data=getattr(exc, "data", None),
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=body.model_dump(exclude_none=True),
        headers=getattr(exc, "headers", None),
    )


# ============================================
# API Routes: Config
# ============================================
@app.get("/api/config")
async def get_config(manager: ConfigManager = Depends(get_config_manager)):
    """Load the ``mcpServers`` section of the active config file."""
    try:
        return manager.load_config()
    except Exception as e:
        logger.error(f"Error loading config: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to load config: {e}")


@app.get("/api/config/full")
async def get_full_config(manager: ConfigManager = Depends(get_config_manager)):
    """Load the full config file, including non-mcpServers fields."""
    try:
        return manager.load_full_config()
    except Exception as e:
        logger.error(f"Error loading full config: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to load full config: {e}")


@app.post("/api/config", response_model=ApiResponse)
async def save_config(request: Request, manager: ConfigManager = Depends(get_config_manager)):
    """Validate and save a config, backing up the previous file."""
    try:
        payload = await request.json()
    except ValueError:
        raise ApiError(400, "Invalid configuration", {"errors": ["config: request body is not valid JSON"]})

    try:
        backup_path = manager.save_config(payload)
    except ConfigValidationError as e:
        logger.warning(f"Rejected invalid config: {e.errors}")
        raise ApiError(400, "Invalid configuration", {"errors": e.errors})
    except Exception as e:
        logger.error(f"Error saving config: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to save config: {e}")

    return ApiResponse(
        success=True,
        message="Configuration saved successfully",
        data={"backup": str(backup_path) if backup_path else None},
    )


@app.get("/api/config/info", response_model=ConfigInfoResponse)
async def get_config_info(manager: ConfigManager = Depends(get_config_manager)):
    """Active config path, its scope, and every known location."""
    try:
        return manager.get_active_config_info()
    except Exception as e:
        logger.error(f"Error getting config info: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to get config info: {e}")


# Legacy endpoint for backward compatibility
@app.get("/api/config/path", response_model=ConfigPathResponse)
async def get_config_path(manager: ConfigManager = Depends(get_config_manager)):
    try:
        return ConfigPathResponse(
            path=str(manager.get_config_path()),
            exists=manager.config_exists(),
        )
    except Exception as e:
        logger.error(f"Error getting config path: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to get config path: {e}")


@app.get("/api/config/backups", response_model=BackupListResponse)
async def list_config_backups(manager: ConfigManager = Depends(get_config_manager)):
    """List backups of the active config file, newest first."""
    try:
        return BackupListResponse(backups=manager.list_backups())
    except Exception as e:
        logger.error(f"Error listing backups: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to list backups: {e}")


# ============================================
# API Routes: Presets
# ============================================
@app.get("/api/presets", response_model=PresetListResponse)
async def list_presets(
    category: Optional[str] = Query(None, description="Filter by category"),
    catalog: PresetCatalog = Depends(get_preset_catalog),
):
    """List all bundled presets."""
    try:
        return PresetListResponse(presets=catalog.list_presets(category=category))
    except Exception as e:
        logger.error(f"Failed to load presets: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to load presets: {e}")


@app.get("/api/presets/categories", response_model=CategoryListResponse)
async def get_preset_categories(catalog: PresetCatalog = Depends(get_preset_catalog)):
    try:
        return CategoryListResponse(categories=catalog.get_categories())
    except Exception as e:
        logger.error(f"Failed to load preset categories: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to load presets: {e}")


@app.get("/api/presets/search/{query:path}", response_model=PresetListResponse)
async def search_presets(query: str, catalog: PresetCatalog = Depends(get_preset_catalog)):
    """Search presets by name, description, category or tags."""
    try:
        return PresetListResponse(presets=catalog.search_presets(query))
    except Exception as e:
        logger.error(f"Failed to search presets: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to search presets: {e}")


@app.get("/api/presets/{preset_id}", response_model=Preset)
async def get_preset(preset_id: str, catalog: PresetCatalog = Depends(get_preset_catalog)):
    """Get a single preset by id."""
    try:
        preset = catalog.get_preset(preset_id)
    except Exception as e:
        logger.error(f"Failed to load preset '{preset_id}': {e}")
        raise HTTPException(status_code=500, detail=f"Failed to load preset: {e}")
    if preset is None:
        raise HTTPException(status_code=404, detail=f"Preset '{preset_id}' not found")
    return preset


# ============================================
# Health Check
# ============================================
@app.get("/api/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    return HealthResponse(status="ok", version=__version__)


# ============================================
# Browser GUI
# ============================================
# Mounted last so the API routes above take precedence
if settings.static_dir.is_dir():
    app.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="gui")


# ============================================
# Entry Point
# ============================================
def run(host: Optional[str] = None, port: Optional[int] = None) -> None:
    uvicorn.run(
        "mcp_editor.app:app",
        host=host or settings.host,
        port=port or settings.port,
        log_level=settings.log_level,
    )


if __name__ == "__main__":
    run()
