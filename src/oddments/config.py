"""
Runtime settings read from the environment.

Modules and the CLI call `get_settings()` instead of reading os.environ
directly. The result is cached; tests clear it with
`get_settings.cache_clear()`.
"""

from __future__ import annotations
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional
import os


@dataclass(frozen=True)
class Settings:
    """Typed view of ODDMENTS_* environment variables."""

    data_file: Path
    export_file: Path
    log_level: str
    log_dir: Optional[Path]
    file_logging: bool


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _bool(value: Optional[str], default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    log_dir = os.getenv("ODDMENTS_LOG_DIR", "logs").strip()

    return Settings(
        data_file=Path(os.getenv("ODDMENTS_DATA_FILE") or os.path.join("data", "items.csv")),
        export_file=Path(os.getenv("ODDMENTS_EXPORT_FILE") or os.path.join("data", "items.json")),
        log_level=(os.getenv("ODDMENTS_LOG_LEVEL") or "INFO").strip().upper(),
        log_dir=Path(log_dir) if log_dir else None,
        file_logging=_bool(os.getenv("ODDMENTS_FILE_LOGGING"), True),
    )
