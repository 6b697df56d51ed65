"""Core (UI-agnostic) dashboard logic.

This package contains:
- data loading (dashboard_data.json -> LoadState)
- display formatting (placeholders, two-decimal stats)
- the view-model payload (JSON-serializable, shared by API and Streamlit)
- chart helpers (Altair -> Vega-Lite spec dict)
- the persisted light/dark theme preference
"""
