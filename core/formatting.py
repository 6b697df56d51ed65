from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Dict, List, Optional

from core.state import DashboardSummary, NumericStat

PLACEHOLDER = "-"

STAT_CARDS = [
    ("Rows Loaded", "rows_loaded"),
    ("Rows Used (Cleaned)", "rows_used"),
    ("Model Trained Samples", "trained_samples"),
    ("Feature Vector Length", "feature_vector_length"),
]


def display_value(value: Any) -> Any:
    return PLACEHOLDER if value is None else value


def _as_float(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        out = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(out) or math.isinf(out):
        return None
    return out


def format_fixed(value: Any, ndigits: int = 2) -> str:
    """Fixed-point text rounded half-up on the exact binary value (45.2 -> '45.20')."""
    out = _as_float(value)
    if out is None:
        return PLACEHOLDER
    q = Decimal(10) ** -ndigits
    try:
        return str(Decimal(out).quantize(q, rounding=ROUND_HALF_UP))
    except InvalidOperation:
        # beyond the decimal context precision
        return f"{out:.{ndigits}f}"


def format_numeric_stat(name: str, stat: NumericStat) -> str:
    return f"{name}: mean={format_fixed(stat.mean)}, sd={format_fixed(stat.sd)}"


def stat_cards(summary: Optional[DashboardSummary]) -> List[Dict[str, Any]]:
    cards = []
    for label, attr in STAT_CARDS:
        value = getattr(summary, attr, None) if summary is not None else None
        cards.append({"label": label, "value": display_value(value)})
    return cards


def numeric_stat_rows(summary: Optional[DashboardSummary]) -> List[Dict[str, str]]:
    if summary is None:
        return []
    return [
        {
            "feature": name,
            "mean": format_fixed(stat.mean),
            "sd": format_fixed(stat.sd),
            "text": format_numeric_stat(name, stat),
        }
        for name, stat in summary.numeric_stats.items()
    ]
