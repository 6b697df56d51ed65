"""Pytest fixtures shared across dashboard tests."""

from __future__ import annotations

import json
import urllib.error
from typing import Any, Callable, List, Optional

import pytest

from core.theme import MemoryThemeStore

SOURCE = "http://testserver/dashboard_data.json"


class FakeResponse:
    """Minimal stand-in for the object returned by urllib.request.urlopen."""

    def __init__(self, body: bytes, status: Optional[int] = 200):
        self.body = body
        self.status = status

    def read(self) -> bytes:
        return self.body

    def __enter__(self) -> "FakeResponse":
        return self

    def __exit__(self, *exc: Any) -> None:
        return None


class RecordingOpener:
    """Opener that returns a canned response (or raises) and records requests."""

    def __init__(self, response: Optional[FakeResponse] = None, error: Optional[Exception] = None):
        self.response = response
        self.error = error
        self.requests: List[Any] = []

    def __call__(self, request: Any) -> FakeResponse:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        assert self.response is not None
        return self.response


@pytest.fixture
def sample_payload() -> dict:
    """Return the example dashboard document with both summary and series."""

    return {
        "summary": {
            "rowsLoaded": 100,
            "rowsUsed": 90,
            "trainedSamples": 80,
            "featureVectorLength": 12,
            "numericStats": {"speed": {"mean": 45.2, "sd": 5.1}},
        },
        "accident_by_time": [
            {"Var1": "Morning", "Freq": 10},
            {"Var1": "Evening", "Freq": 25},
        ],
    }


@pytest.fixture
def json_opener() -> Callable[..., RecordingOpener]:
    """Return a factory building an opener that serves a JSON document."""

    def _make(payload: object, status: int = 200) -> RecordingOpener:
        return RecordingOpener(FakeResponse(json.dumps(payload).encode("utf-8"), status=status))

    return _make


@pytest.fixture
def raw_opener() -> Callable[..., RecordingOpener]:
    """Return a factory building an opener that serves raw bytes."""

    def _make(body: bytes, status: Optional[int] = 200) -> RecordingOpener:
        return RecordingOpener(FakeResponse(body, status=status))

    return _make


@pytest.fixture
def http_error_opener() -> Callable[[int], RecordingOpener]:
    """Return a factory building an opener that raises urllib HTTPError."""

    def _make(code: int) -> RecordingOpener:
        return RecordingOpener(error=urllib.error.HTTPError(SOURCE, code, "error", None, None))

    return _make


@pytest.fixture
def memory_store() -> MemoryThemeStore:
    return MemoryThemeStore()
