"""Streamlit side of the theme: localStorage bridge and page colors."""

from typing import Dict, List, Optional

import streamlit as st
from streamlit import components

from models import ThemePreference
from theme import THEME_KEY, theme_colors

SESSION_KEY = "ui_theme"
QUERY_KEY = "ui_theme"


def maybe_apply_theme_from_query() -> None:
    """If ?ui_theme=X is present, copy it into the session and drop the param.

    The bootstrap script below puts the browser's saved theme there on the
    first load of a tab. Other query params are kept.
    """
    qp: Dict[str, List[str]]
    try:
        qp = dict(st.query_params)
    except Exception:
        try:
            qp = st.experimental_get_query_params()  # type: ignore[attr-defined]
        except Exception:
            qp = {}
    if not qp or QUERY_KEY not in qp:
        return
    raw = qp.pop(QUERY_KEY)
    val: Optional[str] = raw[0] if isinstance(raw, list) else str(raw)
    if val:
        st.session_state[SESSION_KEY] = val
    try:
        st.query_params.clear()
        for k, v in qp.items():
            st.query_params[k] = v
    except Exception:
        try:
            qp_simple = {k: (v[0] if isinstance(v, list) else v) for k, v in qp.items()}
            st.experimental_set_query_params(**qp_simple)  # type: ignore[attr-defined]
        except Exception:
            pass


def inject_theme_bootstrap() -> None:
    """Hydrate the server from localStorage once per tab.

    Avoids redirect loops with a sessionStorage flag.
    """
    cur = st.session_state.get(SESSION_KEY) or ""
    html = f"""
    <script>
      (function(){{
        try {{
          const serverTheme = {cur!r};
          const bootKey = 'ui_theme_boot';
          const ls = localStorage.getItem({THEME_KEY!r});
          const booted = sessionStorage.getItem(bootKey);
          if (ls && !booted && ls !== serverTheme) {{
            const url = new URL(parent.location);
            url.searchParams.set({QUERY_KEY!r}, ls);
            sessionStorage.setItem(bootKey, '1');
            parent.location.replace(url.toString());
          }}
        }} catch(e){{}}
      }})();
    </script>
    """
    try:
        components.v1.html(html, height=0)  # type: ignore[attr-defined]
    except Exception:
        pass


def _run_script(js: str) -> None:
    """Execute `js` in a zero-height component iframe.

    Markdown never runs <script> tags; component iframes do.
    """
    try:
        components.v1.html(f"<script>{js}</script>", height=0)  # type: ignore[attr-defined]
    except Exception:
        pass


def _save_js(value: str) -> str:
    return f"try {{ localStorage.setItem({THEME_KEY!r}, {value!r}); }} catch(e) {{}}"


class BrowserThemeStore:
    """`ThemeStore` backed by the browser's localStorage.

    Reads go through the session (hydrated by `inject_theme_bootstrap`). Writes
    update the session and save the value in localStorage.
    """

    def get(self) -> Optional[str]:
        return st.session_state.get(SESSION_KEY)

    def set(self, value: str) -> None:
        st.session_state[SESSION_KEY] = value
        _run_script(_save_js(value))


def apply_theme(theme: ThemePreference) -> None:
    """Paint page background/foreground for `theme`.

    A saved theme is written back to localStorage on every run, so a save made
    in a run that was cut short by a rerun still lands.
    """
    background, foreground = theme_colors(theme)
    css = f"""
    <style>
      :root {{ --page-bg: {background}; --page-fg: {foreground}; }}
      .stApp, [data-testid="stAppViewContainer"], [data-testid="stHeader"] {{
        background-color: var(--page-bg);
        color: var(--page-fg);
      }}
      .stApp p, .stApp label, .stApp h1, .stApp h2, .stApp h3 {{ color: var(--page-fg); }}
    </style>
    """
    st.markdown(css, unsafe_allow_html=True)

    js = (
        f"try {{ parent.document.body.style.backgroundColor = '{background}'; "
        f"parent.document.body.style.color = '{foreground}'; }} catch(e) {{}}"
    )
    persisted = st.session_state.get(SESSION_KEY)
    if persisted == theme.value:
        js += " " + _save_js(persisted)
    _run_script(js)
