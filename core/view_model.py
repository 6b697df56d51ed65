from __future__ import annotations

from dataclasses import asdict
from typing import Any, Dict

from core.charts import build_chart_specs
from core.content import RECOMMENDATIONS
from core.formatting import numeric_stat_rows, stat_cards
from core.state import LoadError, LoadState, Ready
from core.theme import ThemePreference


def build_dashboard_payload(state: LoadState, theme: ThemePreference = ThemePreference.LIGHT) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "status": state.status,
        "error": state.message if isinstance(state, LoadError) else None,
        "theme": theme.value,
    }
    if not isinstance(state, Ready):
        return payload

    payload.update(
        {
            "cards": stat_cards(state.summary),
            "numeric_stats": numeric_stat_rows(state.summary),
            "series": [asdict(p) for p in state.series],
            "charts": build_chart_specs(state.series, theme),
            "recommendations": [dict(r) for r in RECOMMENDATIONS],
        }
    )
    return payload
