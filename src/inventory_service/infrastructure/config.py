"""Runtime settings.

Values come from ``INVENTORY_*`` environment variables (a ``.env`` file
in the working directory is loaded first) and can be overridden by the
CLI. The resulting Settings object is passed explicitly to whatever
needs it; nothing in the core reads the environment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3000
DEFAULT_LOG_LEVEL = "INFO"
PHOTOS_SUBDIR = "photos"


@dataclass(frozen=True)
class Settings:
    cache_dir: Path
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def photos_dir(self) -> Path:
        return self.cache_dir / PHOTOS_SUBDIR

    @staticmethod
    def from_env(**overrides) -> Settings:
        """Build settings from the environment, then apply non-None overrides."""
        load_dotenv()
        settings = Settings(
            cache_dir=Path(os.getenv("INVENTORY_CACHE_DIR", "cache")),
            host=os.getenv("INVENTORY_HOST", DEFAULT_HOST),
            port=int(os.getenv("INVENTORY_PORT", DEFAULT_PORT)),
            log_level=os.getenv("INVENTORY_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        )
        overrides = {k: v for k, v in overrides.items() if v is not None}
        if "cache_dir" in overrides:
            overrides["cache_dir"] = Path(overrides["cache_dir"])
        return replace(settings, **overrides).resolved()

    def resolved(self) -> Settings:
        return replace(self, cache_dir=self.cache_dir.expanduser().resolve())
