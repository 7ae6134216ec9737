"""Application settings, read from CSVGRID_* environment variables."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional

LOG_FILE_NAME = "running_log.txt"


def default_log_path(home: Optional[Path] = None) -> Path:
    home = home or Path.home()
    desktop = home / "Desktop"
    return (desktop if desktop.is_dir() else home) / LOG_FILE_NAME


def _parse_level(name: Optional[str]) -> int:
    if not name:
        return logging.INFO
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.INFO


@dataclass(frozen=True)
class AppSettings:
    log_file: Path = field(default_factory=default_log_path)
    log_level: int = logging.INFO
    title: str = "CSV Viewer"
    geometry: str = "700x500"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AppSettings":
        env = os.environ if environ is None else environ
        log_file = env.get("CSVGRID_LOG_FILE")
        return cls(
            log_file=Path(log_file).expanduser() if log_file else default_log_path(),
            log_level=_parse_level(env.get("CSVGRID_LOG_LEVEL")),
            title=env.get("CSVGRID_TITLE") or "CSV Viewer",
            geometry=env.get("CSVGRID_GEOMETRY") or "700x500",
        )
