"""
chunkstream Configuration
=========================

This module handles configuration loading for chunkstream.

Configuration Sources (in order of precedence):
    1. Command-line flags (applied by main.py)
    2. Environment variables
    3. chunkstream.yaml file
    4. Default values (lowest priority)

Environment Variable Mapping:
    CHUNKSTREAM_CAPTURE_PATH -> capture.path
    CHUNKSTREAM_OUTPUT_DIR   -> output.directory
    CHUNKSTREAM_LOG_LEVEL    -> logging.level
    CHUNKSTREAM_LOG_FORMAT   -> logging.format

Wire-format constants live in chunkstream.protocol.wire and are not
configurable.

Example:
    from chunkstream.config import load_config, setup_logging

    settings = load_config()
    setup_logging(settings)
    print(settings.capture.path)
"""

import os
import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field


logger = logging.getLogger(__name__)


# =============================================================================
# Configuration Models
# =============================================================================

class CaptureConfig(BaseModel):
    """Capture input configuration."""

    path: str = Field(
        default="./video.pcapng",
        description="pcap or pcapng file to read",
    )


class OutputConfig(BaseModel):
    """Image output configuration."""

    directory: str = Field(default=".", description="Directory for image files")
    filename_prefix: str = Field(default="frame_", description="File name prefix")
    extension: str = Field(default=".jpg", description="File extension, with dot")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(default="text", description="Log format: json or text")


class Settings(BaseModel):
    """
    Main settings class for chunkstream.

    Loads configuration from YAML file and environment variables.
    Environment variables take precedence over file values.
    """

    capture: CaptureConfig = Field(default_factory=CaptureConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
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
        config_path: Path to a YAML file. If None, searches common locations.

    Returns:
        Settings: Loaded configuration
    """
    if config_path is None:
        search_paths = [
            Path("chunkstream.yaml"),
            Path("chunkstream.yml"),
            Path("config.yaml"),
        ]
        for path in search_paths:
            if path.exists():
                config_path = str(path)
                break

    config_data = {}
    if config_path and Path(config_path).exists():
        logger.info(f"Loading config from: {config_path}")
        with open(config_path, "r") as f:
            config_data = yaml.safe_load(f) or {}
    else:
        logger.debug("No config file found, using defaults and environment variables")

    _apply_env_overrides(config_data)

    return Settings.model_validate(config_data)


def _apply_env_overrides(config_data: dict) -> None:
    """Apply environment variable overrides to config data."""

    if env_capture := os.environ.get("CHUNKSTREAM_CAPTURE_PATH"):
        config_data.setdefault("capture", {})["path"] = env_capture

    if env_output := os.environ.get("CHUNKSTREAM_OUTPUT_DIR"):
        config_data.setdefault("output", {})["directory"] = env_output

    if env_log := os.environ.get("CHUNKSTREAM_LOG_LEVEL"):
        config_data.setdefault("logging", {})["level"] = env_log
    if env_format := os.environ.get("CHUNKSTREAM_LOG_FORMAT"):
        config_data.setdefault("logging", {})["format"] = env_format


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
