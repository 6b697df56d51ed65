from __future__ import annotations

import http.client
import json
import logging
import urllib.error
import urllib.request
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Mapping, Optional

from core.config import DATA_PATH, resolve_source
from core.state import DashboardSummary, LoadError, LoadState, Loading, NumericStat, Ready, TimeSeriesPoint

logger = logging.getLogger(__name__)

LOAD_ERROR_MESSAGE = "⚠️ Unable to load dashboard_data.json. Please check the file path."

SUMMARY_FIELDS = {
    "rowsLoaded": "rows_loaded",
    "rowsUsed": "rows_used",
    "trainedSamples": "trained_samples",
    "featureVectorLength": "feature_vector_length",
}

Opener = Callable[[urllib.request.Request], Any]

__all__ = [
    "DATA_PATH",
    "LOAD_ERROR_MESSAGE",
    "DashboardDataError",
    "PayloadError",
    "TransportError",
    "advance",
    "build_series",
    "build_summary",
    "fetch_payload",
    "load",
    "parse_payload",
    "resolve_source",
]


class DashboardDataError(Exception):
    """Base class for failures while retrieving dashboard_data.json."""


class TransportError(DashboardDataError):
    """Network unreachable or non-2xx response."""


class PayloadError(DashboardDataError):
    """Body could not be read as a dashboard document."""


def _check_status(response: Any, source: str) -> None:
    status = getattr(response, "status", None)
    if status is None:
        # file:// and similar handlers carry no status code
        return
    if not 200 <= int(status) < 300:
        raise TransportError(f"GET {source} returned HTTP {status}")


def fetch_payload(source: str, opener: Optional[Opener] = None) -> Any:
    """Retrieve ``source`` once and parse the body as JSON.

    Raises TransportError for network failures and failing statuses,
    PayloadError for bodies that are not valid JSON.
    """
    opener = opener or urllib.request.urlopen
    try:
        req = urllib.request.Request(source, headers={"Accept": "application/json"})
        with opener(req) as resp:
            _check_status(resp, source)
            raw = resp.read()
    except urllib.error.HTTPError as exc:
        raise TransportError(f"GET {source} returned HTTP {exc.code}") from exc
    except (urllib.error.URLError, http.client.HTTPException, OSError, ValueError) as exc:
        raise TransportError(f"GET {source} failed: {exc}") from exc

    try:
        payload = json.loads(raw.decode("utf-8-sig") if isinstance(raw, bytes) else raw)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise PayloadError(f"{source} is not valid JSON: {exc}") from exc
    return payload


def _numeric_stats(raw: object) -> Mapping[str, NumericStat]:
    if not isinstance(raw, Mapping):
        return MappingProxyType({})
    stats: Dict[str, NumericStat] = {}
    for name, values in raw.items():
        values = values if isinstance(values, Mapping) else {}
        stats[str(name)] = NumericStat(mean=values.get("mean"), sd=values.get("sd"))
    return MappingProxyType(stats)


def build_summary(raw: object) -> Optional[DashboardSummary]:
    """Read the ``summary`` object verbatim; absent fields stay None."""
    if raw is None:
        return None
    if not isinstance(raw, Mapping):
        return DashboardSummary()
    fields = {attr: raw.get(key) for key, attr in SUMMARY_FIELDS.items()}
    return DashboardSummary(numeric_stats=_numeric_stats(raw.get("numericStats")), **fields)


def build_series(records: object) -> List[TimeSeriesPoint]:
    """Rename ``{Var1, Freq}`` records to ``{time, accidents}`` in source order."""
    if not records and not isinstance(records, dict):
        # null, false, 0, "" and [] all mean "no series"
        return []
    if not isinstance(records, list):
        raise PayloadError(f"accident_by_time must be an array, got {type(records).__name__}")
    series: List[TimeSeriesPoint] = []
    for idx, item in enumerate(records):
        if item is None:
            raise PayloadError(f"accident_by_time[{idx}] is null")
        if not isinstance(item, Mapping):
            series.append(TimeSeriesPoint(time=None, accidents=None))
            continue
        series.append(TimeSeriesPoint(time=item.get("Var1"), accidents=item.get("Freq")))
    return series


def parse_payload(payload: Any) -> Ready:
    if payload is None:
        raise PayloadError("dashboard document is null")
    if not isinstance(payload, Mapping):
        payload = {}
    return Ready(
        summary=build_summary(payload.get("summary")),
        series=tuple(build_series(payload.get("accident_by_time"))),
    )


def load(source: str, opener: Optional[Opener] = None) -> LoadState:
    """Resolve the dashboard data at ``source`` into a terminal LoadState.

    Transport and parse failures are logged and collapsed into a single
    LoadError with a fixed message. Missing keys are not failures.
    """
    try:
        payload = fetch_payload(source, opener=opener)
        state = parse_payload(payload)
    except DashboardDataError:
        logger.exception("Error loading data from %s", source)
        return LoadError(message=LOAD_ERROR_MESSAGE)
    logger.info("Loaded dashboard data from %s (%d series points)", source, len(state.series))
    return state


def advance(state: LoadState, source: str, opener: Optional[Opener] = None) -> LoadState:
    """Resolve a Loading state with a single fetch; resolved states are returned as-is."""
    if isinstance(state, Loading):
        return load(source, opener=opener)
    return state
