from __future__ import annotations

from typing import Dict, List

TITLE = "🚦 Accident Risk Analysis Dashboard"
SUBTITLE = "Urban Road Network Accident Prediction & Visualization"
LOADING_TEXT = "Loading data..."

SUMMARY_HEADING = "Dataset & Model Summary"
NUMERIC_HEADING = "Numeric Features Normalized"
RECOMMENDATIONS_HEADING = "📊 Recommendations for Safety Interventions"

RECOMMENDATIONS: List[Dict[str, str]] = [
    {"topic": "Peak Risk Hours", "text": "Increase road lighting & patrol during *Evening/Night*."},
    {"topic": "Weather Conditions", "text": "Adaptive lighting & alerts for rain/fog."},
    {"topic": "Traffic Density", "text": "Optimize traffic flow and enforce speed limits in dense areas."},
    {"topic": "Driver Factors", "text": "Campaigns for sober and fatigue-free driving."},
    {"topic": "Speed Management", "text": "Roads above *67 km/h* need stricter speed enforcement."},
]

FOOTER_LINES = [
    "© Accident Risk Analysis 2025",
    "Created by Parva Raval & Aditya Nair",
]


def toggle_label(is_dark: bool) -> str:
    return "☀️ Light Mode" if is_dark else "🌙 Dark Mode"
