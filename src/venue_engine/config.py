"""
VenueEngine Configuration
=========================

This module handles configuration loading for the venue engine.

Configuration Sources (in order of precedence):
    1. Environment variables (highest priority)
    2. config.yaml file
    3. Default values (lowest priority)

Environment Variable Mapping:
    VENUE_ENGINE_LOG_LEVEL     -> logging.level
    VENUE_ENGINE_LOG_FORMAT    -> logging.format
    VENUE_ENGINE_GRID_INSET    -> editor.grid_inset
    VENUE_ENGINE_DEFAULT_ROWS  -> editor.default_rows
    VENUE_ENGINE_DEFAULT_COLS  -> editor.default_cols
    VENUE_ENGINE_PORT          -> server.port
    PORT                       -> server.port (Cloud Run)

Example:
    from venue_engine.config import settings

    print(settings.viewport.width)
    print(settings.limits.rows_max)
    print(settings.ring_pack.void_ratio)

Note:
    Core components never read ``settings`` themselves. They receive
    plain parameters through their constructors; main.py does the wiring.
"""

import os
import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field

from venue_engine.models.layout import LayoutLimits


logger = logging.getLogger(__name__)


# =============================================================================
# Configuration Models
# =============================================================================

class ServiceConfig(BaseModel):
    """Service identification configuration."""

    name: str = Field(default="venue-engine", description="Service name")
    version: str = Field(default="v0.1.0", description="Service version")


class ViewportConfig(BaseModel):
    """Logical viewport in which all geometry is expressed."""

    width: float = Field(default=100.0, gt=0, description="Logical width")
    height: float = Field(default=62.5, gt=0, description="Logical height")


class RingPackConfig(BaseModel):
    """Concentric ring layout parameters."""

    void_ratio: float = Field(
        default=0.35,
        ge=0,
        lt=1.0,
        description="Empty center radius as a fraction of the outer radius",
    )
    gap: float = Field(default=1.6, ge=0, description="Spacing between rings")
    margin: float = Field(
        default=3.0,
        ge=0,
        description="Distance kept between the outer ring and viewport edge",
    )
    min_void: float = Field(
        default=4.0,
        gt=0,
        description="Lower bound for the empty center radius",
    )
    angular_gap: float = Field(
        default=2.0,
        ge=0,
        description="Degrees trimmed from both ends of every section",
    )
    sector_steps: int = Field(
        default=18,
        ge=1,
        description="Arc samples per ring sector",
    )


class EditorConfig(BaseModel):
    """Defaults for the interactive layout editors."""

    rect_width: float = Field(default=12.0, gt=0, description="New rectangle width")
    rect_height: float = Field(default=8.0, gt=0, description="New rectangle height")
    grid_inset: float = Field(
        default=5.0,
        ge=0,
        description="Inset of the grid bounding box from the viewport edge",
    )
    default_rows: int = Field(default=3, ge=1)
    default_cols: int = Field(default=8, ge=1)
    default_layers: int = Field(default=2, ge=1)
    gate_candidates: int = Field(
        default=16,
        ge=1,
        description="Number of snap positions for gates around the venue",
    )
    gate_offset: float = Field(
        default=0.8,
        ge=0,
        description="Distance of gate positions outside the outer ring",
    )
    gate_snap_radius: float = Field(
        default=2.5,
        gt=0,
        description="Maximum click distance for snapping to a gate position",
    )
    gate_width: float = Field(default=5.0, gt=0, description="Gate marker width")
    gate_depth: float = Field(default=2.4, gt=0, description="Gate marker depth")


class ServerConfig(BaseModel):
    """Server configuration."""

    host: str = Field(default="0.0.0.0", description="Bind host")
    port: int = Field(default=8002, ge=1, le=65535, description="Bind port")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(default="json", description="Log format: json or text")


class Settings(BaseModel):
    """
    Main settings class for VenueEngine.

    Loads configuration from YAML file and environment variables.
    Environment variables take precedence over file values.
    """

    service: ServiceConfig = Field(default_factory=ServiceConfig)
    viewport: ViewportConfig = Field(default_factory=ViewportConfig)
    limits: LayoutLimits = Field(default_factory=LayoutLimits)
    ring_pack: RingPackConfig = Field(default_factory=RingPackConfig)
    editor: EditorConfig = Field(default_factory=EditorConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


# =============================================================================
# Configuration Loading
# =============================================================================

def load_config(config_path: Optional[str] = None) -> Settings:
    """
    Load configuration from YAML file and environment variables.

    Priority (highest to lowest):
        1. Environment variables
        2. YAML config file
        3. Default values

    Args:
        config_path: Path to config.yaml. If None, searches common locations.

    Returns:
        Settings: Loaded configuration

    Raises:
        FileNotFoundError: If an explicit config_path does not exist
    """
    if config_path is not None and not Path(config_path).exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    # Find config file
    if config_path is None:
        search_paths = [
            Path("config.yaml"),
            Path("config.yml"),
            Path(__file__).parent.parent.parent / "config.yaml",
        ]
        for path in search_paths:
            if path.exists():
                config_path = str(path)
                break

    config_data = {}
    if config_path:
        logger.info(f"Loading config from: {config_path}")
        with open(config_path, "r") as f:
            config_data = yaml.safe_load(f) or {}
    else:
        logger.warning("No config file found, using defaults and environment variables")

    _apply_env_overrides(config_data)

    return Settings.model_validate(config_data)


def _apply_env_overrides(config_data: dict) -> None:
    """Apply environment variable overrides to config data."""

    # Editor settings
    if env_inset := os.environ.get("VENUE_ENGINE_GRID_INSET"):
        config_data.setdefault("editor", {})["grid_inset"] = float(env_inset)
    if env_rows := os.environ.get("VENUE_ENGINE_DEFAULT_ROWS"):
        config_data.setdefault("editor", {})["default_rows"] = int(env_rows)
    if env_cols := os.environ.get("VENUE_ENGINE_DEFAULT_COLS"):
        config_data.setdefault("editor", {})["default_cols"] = int(env_cols)

    # Server settings (Cloud Run uses PORT env var)
    if env_port := os.environ.get("PORT"):
        config_data.setdefault("server", {})["port"] = int(env_port)
    elif env_port := os.environ.get("VENUE_ENGINE_PORT"):
        config_data.setdefault("server", {})["port"] = int(env_port)

    # Logging settings
    if env_log := os.environ.get("VENUE_ENGINE_LOG_LEVEL"):
        config_data.setdefault("logging", {})["level"] = env_log
    if env_fmt := os.environ.get("VENUE_ENGINE_LOG_FORMAT"):
        config_data.setdefault("logging", {})["format"] = env_fmt


def setup_logging(settings: Settings) -> None:
    """Configure logging based on settings."""
    log_level = getattr(logging, settings.logging.level.upper(), logging.INFO)

    if settings.logging.format == "json":
        log_format = '{"time": "%(asctime)s", "level": "%(levelname)s", "module": "%(name)s", "message": "%(message)s"}'
    else:
        log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt="%Y-%m-%dT%H:%M:%S",
    )


# =============================================================================
# Global Settings Instance
# =============================================================================

# Global settings instance - loaded on import
settings = load_config()
setup_logging(settings)
