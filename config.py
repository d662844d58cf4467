from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, Field


DEFAULT_CONFIG_PATH = "patternkit.yaml"


class AppConfig(BaseModel):
    debug_level: str = "INFO"

    # Strategy used when a caller does not name one (CLI `sort`, POST /sort).
    # Must be registered in SortStrategyFactory.
    default_strategy: str = "builtin"

    # Parser type used when neither an explicit type nor a file extension
    # identifies the format. Must be registered in ParserFactory.
    default_parser: str = "json"

    # CSV parsing defaults (overridable per call).
    csv_delimiter: str = Field(",", min_length=1, max_length=1)
    csv_has_header: bool = True

    # FastAPI / Uvicorn
    api_port: int = 8000

    # CORS
    # If True, enables permissive CORS headers for browser clients (dev-friendly).
    # When False, no CORS middleware is installed.
    cors_enabled: bool = False


def load_config(path: Optional[str] = None) -> AppConfig:
    """Load application configuration from YAML.

    Precedence:
    1) explicit `path`
    2) env var `PATTERNKIT_CONFIG`
    3) `patternkit.yaml` in the current working directory

    Missing config file falls back to defaults.
    """

    config_path = path or os.getenv("PATTERNKIT_CONFIG") or DEFAULT_CONFIG_PATH

    if not os.path.exists(config_path):
        return AppConfig()

    with open(config_path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)

    if raw is None:
        return AppConfig()

    if not isinstance(raw, dict):
        raise ValueError(f"Invalid YAML config (expected mapping), got: {type(raw).__name__}")

    data: Dict[str, Any] = dict(raw)
    return AppConfig(**data)


def configure_logging(debug_level: str) -> None:
    level_name = (debug_level or "INFO").upper().strip()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        raise ValueError(f"Invalid debug_level: {debug_level!r} (expected DEBUG/INFO/WARNING/ERROR)")

    logging.basicConfig(level=level)
