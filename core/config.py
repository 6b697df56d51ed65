from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Mapping, Optional
from urllib.parse import urljoin

BASE_DIR = Path(__file__).resolve().parents[1]

DATA_PATH = "/dashboard_data.json"
DEFAULT_BASE_URL = "http://127.0.0.1:8000"
DEFAULT_DATA_FILE = BASE_DIR / "data" / "dashboard_data.json"
DEFAULT_PREFS_PATH = BASE_DIR / ".dashboard_prefs.json"
DEFAULT_ALLOWED_ORIGINS = ["http://localhost:3000", "http://127.0.0.1:3000"]

LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


@dataclass(frozen=True)
class DashboardConfig:
    base_url: Optional[str] = None
    data_file: Path = DEFAULT_DATA_FILE
    prefs_path: Path = DEFAULT_PREFS_PATH
    allowed_origins: List[str] = field(default_factory=lambda: list(DEFAULT_ALLOWED_ORIGINS))
    log_level: str = LOG_LEVEL

    @property
    def data_url(self) -> str:
        return resolve_source(self.base_url or DEFAULT_BASE_URL)

    @property
    def source(self) -> str:
        """Where the loader reads from: the base URL when one is set, else the local data file."""
        if self.base_url:
            return self.data_url
        return self.data_file.resolve().as_uri()


def resolve_source(base_url: str, path: str = DATA_PATH) -> str:
    """Join the fixed resource path onto a base URL, e.g. http://host:8000 -> http://host:8000/dashboard_data.json."""
    return urljoin(base_url.rstrip("/") + "/", path.lstrip("/"))


def _as_origins(value: Optional[str]) -> List[str]:
    if not value:
        return list(DEFAULT_ALLOWED_ORIGINS)
    origins = [v.strip() for v in value.split(",") if v.strip()]
    return origins or list(DEFAULT_ALLOWED_ORIGINS)


def _as_level(value: Optional[str]) -> str:
    level = (value or "").strip().upper()
    if level and isinstance(logging.getLevelName(level), int):
        return level
    return LOG_LEVEL


def load_config(env: Optional[Mapping[str, str]] = None) -> DashboardConfig:
    env = os.environ if env is None else env

    base_url = (env.get("DASHBOARD_BASE_URL") or "").strip() or None
    data_file = env.get("DASHBOARD_DATA_FILE")
    prefs_path = env.get("DASHBOARD_PREFS_PATH")

    return DashboardConfig(
        base_url=base_url,
        data_file=Path(data_file) if data_file else DEFAULT_DATA_FILE,
        prefs_path=Path(prefs_path) if prefs_path else DEFAULT_PREFS_PATH,
        allowed_origins=_as_origins(env.get("DASHBOARD_ALLOWED_ORIGINS")),
        log_level=_as_level(env.get("DASHBOARD_LOG_LEVEL")),
    )


def configure_logging(level: str = LOG_LEVEL) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
