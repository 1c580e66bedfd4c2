"""Streamlit UI for searching OMDb, collecting favorites and switching theme.

Highlights
- Title search against OMDb; newest search wins when requests overlap
- Session-only favorites with a show/hide panel
- Light/dark theme saved in the browser and restored on load
"""
import asyncio
import html
import logging
import os

import streamlit as st

from ui_controls import _get_component, _init_state, _safe_rerun
from ui_render import _render_favorites, _render_movies
from ui_theme import inject_theme_bootstrap, maybe_apply_theme_from_query


st.set_page_config(page_title="NGK Movie Recommender", layout="wide")
logging.basicConfig(level=os.environ.get("LOG_LEVEL", "WARNING").upper())

# Lightweight styling
st.markdown(
    """
    <style>
    .main-heading { font-size: 48px; color: #1e90ff; font-weight: bold; margin-top: 40px; text-align: center; }
    .subheading { font-size: 20px; color: #aaa; margin-bottom: 20px; text-align: center; }
    .search-error { color: red; font-size: 14px; margin-top: 10px; }
    .title-row h3 { font-size: 18px; font-weight: bold; margin: 8px 0 4px; }
    </style>
    """,
    unsafe_allow_html=True,
)

maybe_apply_theme_from_query()
inject_theme_bootstrap()
_init_state()

component = _get_component()
component.initialize_theme()
if not component.ready:
    st.stop()

st.markdown("<div class='main-heading'>Welcome to NGK Movie Recommender</div>", unsafe_allow_html=True)
st.markdown("<p class='subheading'>Search for movies below:</p>", unsafe_allow_html=True)

if not component.configured:
    st.caption("OMDB_API_KEY is not set; searches will be rejected by OMDb.")

with st.form("search_form", clear_on_submit=False):
    q_col, b_col = st.columns([4, 1])
    with q_col:
        query = st.text_input(
            "Search",
            key="query_input",
            placeholder="Search for a movie...",
            label_visibility="collapsed",
        )
    with b_col:
        submitted = st.form_submit_button("Search")
if submitted:
    component.set_query(query)
    with st.spinner("Searching..."):
        asyncio.run(component.search())

state = component.state
if state.error:
    st.markdown(f"<p class='search-error'>{html.escape(state.error)}</p>", unsafe_allow_html=True)

_render_movies(component, state.movies, key_prefix="movie")

t_col, f_col, _ = st.columns([1, 1, 3])
with t_col:
    next_label = "Dark" if component.state.theme.value == "light" else "Light"
    if st.button(f"Switch Theme {next_label} Mode", key="toggle_theme"):
        component.toggle_theme()
        _safe_rerun()
with f_col:
    fav_label = "Hide" if component.state.show_favorites else "Show"
    if st.button(f"{fav_label} Favorite Movies", key="toggle_favorites"):
        component.toggle_favorites_visibility()
        _safe_rerun()

if component.state.show_favorites:
    _render_favorites(component)
