"""
Runtime settings with environment variable support.

These describe where configuration lives and how the process behaves; the
configuration document itself is modelled in ``schema.py``.
"""

import os
import platform
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings

CONFIG_FILENAME = "glinr-commit.json"
GLOBAL_CONFIG_FILENAME = ".commitweaverc"


class Settings(BaseSettings):
    """Process-level settings read from ``COMMITWEAVE_*`` environment variables."""

    config_path: Path = Field(
        default_factory=lambda: Path.cwd() / CONFIG_FILENAME,
        description="Local project configuration file"
    )
    global_config_path: Path = Field(
        default_factory=lambda: Path.home() / GLOBAL_CONFIG_FILENAME,
        description="Per-user fallback configuration file"
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Console logging level"
    )
    request_timeout: float = Field(
        default=30.0,
        gt=0,
        le=600,
        description="Timeout in seconds for remote imports and AI calls"
    )

    model_config = {
        "env_prefix": "COMMITWEAVE_",
        "case_sensitive": False,
        "extra": "ignore",
    }

    @property
    def cache_dir(self) -> Path:
        """Get the cache directory."""
        if platform.system() == "Windows":
            base = Path(os.environ.get("LOCALAPPDATA", "~"))
        else:
            base = Path(os.environ.get("XDG_CACHE_HOME", "~/.cache"))

        return (base / "commitweave").expanduser()

    @property
    def log_file(self) -> Path:
        """Get the log file path."""
        return self.cache_dir / "commitweave.log"
