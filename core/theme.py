"""Persisted light/dark theme preference.

The backing store is injected as a small get/set capability so the app can
use a JSON file and tests can use memory. Store failures never surface:
reads fall back to light, writes are dropped after a debug log line.
"""

from __future__ import annotations

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Callable, Dict, Optional, Protocol

logger = logging.getLogger(__name__)

THEME_KEY = "theme"


class ThemePreference(str, Enum):
    LIGHT = "light"
    DARK = "dark"

    def flipped(self) -> "ThemePreference":
        return ThemePreference.DARK if self is ThemePreference.LIGHT else ThemePreference.LIGHT


DEFAULT_THEME = ThemePreference.LIGHT


class ThemeStore(Protocol):
    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...


class MemoryThemeStore:
    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.values: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        self.values[key] = value


class JsonFileThemeStore:
    """Key-value strings kept in a single JSON object on disk."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def _read_all(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        data = json.loads(self.path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"{self.path} does not hold a JSON object")
        return data

    def get(self, key: str) -> Optional[str]:
        value = self._read_all().get(key)
        return None if value is None else str(value)

    def set(self, key: str, value: str) -> None:
        try:
            data = self._read_all()
        except ValueError:
            data = {}
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2), encoding="utf-8")


def parse_theme(value: object) -> ThemePreference:
    try:
        return ThemePreference(str(value).strip().lower())
    except ValueError:
        return DEFAULT_THEME


def read_theme(store: ThemeStore) -> ThemePreference:
    try:
        value = store.get(THEME_KEY)
    except Exception:
        logger.debug("Theme store read failed; using %s", DEFAULT_THEME.value, exc_info=True)
        return DEFAULT_THEME
    if value is None:
        return DEFAULT_THEME
    return parse_theme(value)


def write_theme(store: ThemeStore, theme: ThemePreference) -> bool:
    try:
        store.set(THEME_KEY, theme.value)
    except Exception:
        logger.debug("Theme store write failed for %s", theme.value, exc_info=True)
        return False
    return True


class ThemeController:
    """In-memory theme value with a persisted backing.

    The stored value is read once at construction. ``on_apply`` is called
    with the current value at startup and after every change.
    """

    def __init__(self, store: ThemeStore, on_apply: Optional[Callable[[ThemePreference], None]] = None):
        self.store = store
        self.on_apply = on_apply
        self.theme = read_theme(store)
        self._apply()

    @property
    def is_dark(self) -> bool:
        return self.theme is ThemePreference.DARK

    def _apply(self) -> None:
        if self.on_apply is not None:
            self.on_apply(self.theme)

    def set(self, theme: ThemePreference) -> ThemePreference:
        self.theme = theme
        write_theme(self.store, theme)
        self._apply()
        return self.theme

    def toggle(self) -> ThemePreference:
        return self.set(self.theme.flipped())
