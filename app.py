import pandas as pd
import streamlit as st

from core import content
from core.charts import build_charts
from core.config import configure_logging, load_config
from core.data import advance
from core.formatting import numeric_stat_rows, stat_cards
from core.state import LoadError, LoadState, Loading, Ready
from core.theme import JsonFileThemeStore, ThemeController, ThemePreference

THEME_CSS = {
    ThemePreference.LIGHT: """
        <style>
        .stApp {background: #f5f7fa; color: #1f2933;}
        .stat-card, .num-stat {background: #ffffff; border: 1px solid #e5e7eb;}
        </style>
    """,
    ThemePreference.DARK: """
        <style>
        .stApp {background: #121212; color: #e5e7eb;}
        .stApp h1, .stApp h2, .stApp h3, .stApp h4, .stApp p, .stApp li {color: #e5e7eb;}
        .stat-card, .num-stat {background: #1e1e1e; border: 1px solid #333333;}
        </style>
    """,
}

BASE_CSS = """
    <style>
    .stat-card {border-radius: 12px; padding: 14px 16px; margin-bottom: 10px;}
    .stat-card h4 {margin: 0 0 6px; font-size: 0.9rem; font-weight: 600;}
    .stat-card p {margin: 0; font-size: 1.5rem; font-weight: 700;}
    .num-stat {border-radius: 8px; padding: 8px 12px; margin-bottom: 6px; display: flex; justify-content: space-between;}
    .num-label {font-weight: 600;}
    </style>
"""


# ---------- session state ----------
def get_theme_controller() -> ThemeController:
    if "theme_controller" not in st.session_state:
        cfg = load_config()
        st.session_state["theme_controller"] = ThemeController(JsonFileThemeStore(cfg.prefs_path))
    return st.session_state["theme_controller"]


def get_load_state() -> LoadState:
    if "load_state" not in st.session_state:
        st.session_state["load_state"] = Loading()
    return st.session_state["load_state"]


def resolve_load_state() -> LoadState:
    # one retrieval per session; a resolved state is never re-entered
    state = get_load_state()
    if isinstance(state, Loading):
        state = advance(state, load_config().source)
        st.session_state["load_state"] = state
    return state


# ---------- rendering ----------
def inject_theme_styles(theme: ThemePreference):
    st.markdown(BASE_CSS + THEME_CSS[theme], unsafe_allow_html=True)


def render_header(controller: ThemeController):
    c1, c2 = st.columns([8, 2])
    with c1:
        st.title(content.TITLE)
        st.caption(content.SUBTITLE)
    with c2:
        st.button(content.toggle_label(controller.is_dark), on_click=controller.toggle, key="theme_toggle")


def render_summary(state: Ready):
    st.subheader(content.SUMMARY_HEADING)
    cols = st.columns(4)
    for col, card in zip(cols, stat_cards(state.summary)):
        col.markdown(
            f"<div class='stat-card'><h4>{card['label']}</h4><p>{card['value']}</p></div>",
            unsafe_allow_html=True,
        )

    st.markdown(f"#### {content.NUMERIC_HEADING}")
    rows = numeric_stat_rows(state.summary)
    for row in rows:
        st.markdown(
            f"<div class='num-stat'><span class='num-label'>{row['feature']}</span>"
            f"<span class='num-value'>mean={row['mean']}, sd={row['sd']}</span></div>",
            unsafe_allow_html=True,
        )
    if rows:
        with st.expander("Numeric stats table"):
            st.dataframe(pd.DataFrame(rows)[["feature", "mean", "sd"]], hide_index=True, use_container_width=True)


def render_charts(state: Ready, theme: ThemePreference):
    charts = build_charts(state.series, theme)
    cols = st.columns(3)
    for col, name in zip(cols, ["line", "pie", "bar"]):
        with col:
            st.altair_chart(charts[name], use_container_width=True)


def render_recommendations():
    st.subheader(content.RECOMMENDATIONS_HEADING)
    st.markdown("\n".join(f"- **{r['topic']}:** {r['text']}" for r in content.RECOMMENDATIONS))


def render_footer():
    st.markdown("---")
    for line in content.FOOTER_LINES:
        st.caption(line)


# ---------- UI setup ----------
configure_logging(load_config().log_level)
st.set_page_config(page_title="Accident Risk Analysis Dashboard", page_icon="🚦", layout="wide")

controller = get_theme_controller()
inject_theme_styles(controller.theme)
render_header(controller)

load_state = get_load_state()
if isinstance(load_state, Loading):
    st.info(content.LOADING_TEXT)
    with st.spinner(content.LOADING_TEXT):
        load_state = resolve_load_state()
    st.rerun()
elif isinstance(load_state, LoadError):
    st.error(load_state.message)
elif isinstance(load_state, Ready):
    render_summary(load_state)
    render_charts(load_state, controller.theme)
    render_recommendations()

render_footer()
