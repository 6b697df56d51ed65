from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional, Tuple, Union


@dataclass(frozen=True)
class NumericStat:
    mean: Any = None
    sd: Any = None


@dataclass(frozen=True)
class DashboardSummary:
    rows_loaded: Any = None
    rows_used: Any = None
    trained_samples: Any = None
    feature_vector_length: Any = None
    numeric_stats: Mapping[str, NumericStat] = field(default_factory=lambda: MappingProxyType({}))


@dataclass(frozen=True)
class TimeSeriesPoint:
    time: Any
    accidents: Any


@dataclass(frozen=True)
class Loading:
    status: str = field(default="loading", init=False)


@dataclass(frozen=True)
class LoadError:
    message: str
    status: str = field(default="error", init=False)


@dataclass(frozen=True)
class Ready:
    summary: Optional[DashboardSummary]
    series: Tuple[TimeSeriesPoint, ...] = ()
    status: str = field(default="ready", init=False)


LoadState = Union[Loading, LoadError, Ready]
