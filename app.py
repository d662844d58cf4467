from __future__ import annotations

import logging
import os

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn
import yaml

from config import AppConfig, configure_logging, load_config
from router.api import router as api_router


logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    fastapi_app = FastAPI(title="patternkit", version="0.1.0")

    # CORS middleware must be added before the application starts.
    # Starlette raises if you call `add_middleware()` during the startup event.
    load_dotenv(override=False)
    config_path = os.getenv("PATTERNKIT_CONFIG")
    try:
        config: AppConfig = load_config(config_path)
    except (ValueError, OSError, yaml.YAMLError):
        # Keep the app importable; startup surfaces the real configuration error.
        logger.exception("Failed to load config at import time")
        config = AppConfig()

    if config.cors_enabled:
        fastapi_app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_methods=["*"],
            allow_headers=["*"],
            allow_credentials=False,
        )

    fastapi_app.include_router(api_router, prefix="/api/v1")

    @fastapi_app.on_event("startup")
    def _startup() -> None:
        startup_config: AppConfig = load_config(config_path)
        configure_logging(startup_config.debug_level)

        fastapi_app.state.config = startup_config
        fastapi_app.state.config_path = config_path or "patternkit.yaml"

    return fastapi_app


app = create_app()


def main() -> None:
    load_dotenv(override=False)

    config_path = os.getenv("PATTERNKIT_CONFIG")
    config: AppConfig = load_config(config_path)
    configure_logging(config.debug_level)

    uvicorn.run(
        "app:app",
        host="127.0.0.1",
        port=int(config.api_port),
        reload=False,
    )


if __name__ == "__main__":
    main()
