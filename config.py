"""
Configuration for the RLS suggestion service.
Settings are read from the environment once at startup and validated with Pydantic.
"""

import os
import sys
import logging
from typing import Optional, Mapping

from pydantic import BaseModel

logger = logging.getLogger(__name__)


class Settings(BaseModel):
    openai_key: Optional[str] = None
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build validated settings from environment variables."""
    env = os.environ if environ is None else environ
    values = {
        "openai_key": env.get("OPENAI_KEY"),
        "host": env.get("HOST"),
        "port": env.get("PORT"),
        "log_level": env.get("LOG_LEVEL"),
    }
    # Unset variables fall back to the model defaults
    return Settings(**{k: v for k, v in values.items() if v is not None})


def setup_logging(level: str = "INFO") -> None:
    """Configure root logging for the service."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    logger.info("Logging level set to %s", level)
