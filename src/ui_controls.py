"""Session-state helpers for the Streamlit app."""

import streamlit as st

from component import MovieSearch
from omdb_api import OMDbAPI
from ui_theme import BrowserThemeStore, apply_theme
from theme import ThemeController


def _init_state() -> None:
    defaults = {
        "query_input": "",
    }
    for k, v in defaults.items():
        st.session_state.setdefault(k, v)


def _get_component() -> MovieSearch:
    """One `MovieSearch` per browser session, created on first run."""
    if "movie_search" not in st.session_state:
        st.session_state["movie_search"] = MovieSearch(
            OMDbAPI(),
            theme=ThemeController(BrowserThemeStore(), apply=apply_theme),
        )
    return st.session_state["movie_search"]


def _safe_rerun() -> None:
    try:
        if hasattr(st, "rerun"):
            st.rerun()
            return
        if hasattr(st, "experimental_rerun"):
            st.experimental_rerun()
            return
    except Exception:
        pass
