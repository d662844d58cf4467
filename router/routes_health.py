from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Request

from patternkit.parsing import ParserFactory
from patternkit.sorting import SortStrategyFactory
from router.common import get_config

router = APIRouter()


@router.get("/health")
def health(request: Request) -> Dict[str, Any]:
    """Lightweight health/status endpoint."""

    config = get_config(request)
    return {
        "status": "ok",
        "config_path": getattr(request.app.state, "config_path", "patternkit.yaml"),
        "debug_level": config.debug_level,
        "default_strategy": config.default_strategy,
        "default_parser": config.default_parser,
        "sort_strategies": SortStrategyFactory.get_supported_strategies(),
        "parser_types": ParserFactory.get_supported_types(),
    }
