"""
Runtime settings, read from environment variables.

  FONTHUB_METADATA_DIR   directory holding the JSON metadata set (default: metadataset)
  FONTHUB_STRICT_LOAD    abort startup on the first bad document (default: false)
  FONTHUB_HOST           HTTP bind address (default: 0.0.0.0)
  FONTHUB_PORT           HTTP port (default: 8080)
  FONTHUB_LOG_LEVEL      loguru level (default: INFO)
"""

import os
import sys
from pathlib import Path
from typing import Mapping, Optional

from loguru import logger
from pydantic import BaseModel, Field, field_validator

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _env_flag(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in _TRUE_VALUES


class Settings(BaseModel):
    metadata_dir: Path = Field(Path("metadataset"), description="Metadata set root")
    strict_load: bool = Field(False, description="Fail on the first bad document")
    host: str = "0.0.0.0"
    port: int = Field(8080, ge=1, le=65535)
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _upper(cls, v: str) -> str:
        return v.strip().upper() or "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        values = {}
        if env.get("FONTHUB_METADATA_DIR"):
            values["metadata_dir"] = Path(env["FONTHUB_METADATA_DIR"])
        if "FONTHUB_STRICT_LOAD" in env:
            values["strict_load"] = _env_flag(env["FONTHUB_STRICT_LOAD"])
        if env.get("FONTHUB_HOST"):
            values["host"] = env["FONTHUB_HOST"]
        if env.get("FONTHUB_PORT"):
            values["port"] = env["FONTHUB_PORT"]
        if env.get("FONTHUB_LOG_LEVEL"):
            values["log_level"] = env["FONTHUB_LOG_LEVEL"]
        return cls(**values)


def configure_logging(level: str = "INFO") -> None:
    """Send loguru output to stderr at ``level``."""
    logger.remove()
    logger.add(sys.stderr, level=level)
