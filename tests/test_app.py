import os
import sys

import pytest
import requests
from streamlit.testing.v1 import AppTest


# Ensure src/ is importable when tests run from project root
HERE = os.path.dirname(__file__)
SRC = os.path.abspath(os.path.join(HERE, "..", "src"))
if SRC not in sys.path:
    sys.path.insert(0, SRC)

import theme  # noqa: E402

APP = os.path.join(SRC, "app.py")

RESPONSES = {
    "batman": {
        "Response": "True",
        "Search": [{"Title": "Batman", "Year": "1989", "imdbID": "tt0096895", "Poster": "N/A"}],
    },
    "zzzznotfound": {"Response": "False", "Error": "Movie not found!"},
}


class FakeResponse:
    def __init__(self, payload):
        self.payload = payload

    def raise_for_status(self):
        pass

    def json(self):
        return self.payload


@pytest.fixture(autouse=True)
def fake_omdb(monkeypatch):
    monkeypatch.setenv("OMDB_API_KEY", "test")
    monkeypatch.setenv("OMDB_BASE_URL", "https://omdb.test/")
    calls = []

    def fake_get(self, url, **kwargs):
        query = kwargs["params"]["s"]
        calls.append(query)
        return FakeResponse(RESPONSES[query])

    monkeypatch.setattr(requests.Session, "get", fake_get)
    return calls


def _app():
    at = AppTest.from_file(APP, default_timeout=10)
    at.run()
    assert not at.exception
    return at


def _markdown(at):
    return [m.value for m in at.markdown]


def _scripts(at):
    return [el.proto.srcdoc for el in at.get("iframe")]


def _search(at, query):
    at.text_input(key="query_input").input(query)
    next(b for b in at.button if b.label == "Search").click()
    at.run()
    assert not at.exception


def test_fresh_session_starts_light():
    at = _app()
    assert at.button(key="toggle_theme").label == "Switch Theme Dark Mode"
    assert any("Welcome to NGK Movie Recommender" in m for m in _markdown(at))


def test_saved_theme_hydrated_from_query_param():
    at = AppTest.from_file(APP, default_timeout=10)
    at.query_params["ui_theme"] = "dark"
    at.run()
    assert not at.exception
    assert at.session_state["ui_theme"] == "dark"
    assert at.button(key="toggle_theme").label == "Switch Theme Light Mode"


def test_unknown_saved_theme_falls_back_to_light():
    at = AppTest.from_file(APP, default_timeout=10)
    at.query_params["ui_theme"] = "purple"
    at.run()
    assert at.button(key="toggle_theme").label == "Switch Theme Dark Mode"


def test_toggle_saves_theme_in_browser():
    at = _app()
    assert not any("localStorage.setItem" in s for s in _scripts(at))

    at.button(key="toggle_theme").click().run()
    assert at.session_state["ui_theme"] == "dark"
    assert at.button(key="toggle_theme").label == "Switch Theme Light Mode"
    assert any("localStorage.setItem('theme', 'dark')" in s for s in _scripts(at))

    at.button(key="toggle_theme").click().run()
    assert at.session_state["ui_theme"] == "light"
    assert any("localStorage.setItem('theme', 'light')" in s for s in _scripts(at))


def test_nothing_rendered_before_theme_initialized(monkeypatch):
    monkeypatch.setattr(theme.ThemeController, "initialize", lambda self, store: None)
    at = AppTest.from_file(APP, default_timeout=10)
    at.run()
    assert not at.exception
    assert not any("Welcome" in m for m in _markdown(at))
    assert len(at.button) == 0


def test_search_renders_card(fake_omdb):
    at = _app()
    _search(at, "batman")
    assert fake_omdb == ["batman"]
    assert any("<h3>Batman (1989)</h3>" in m for m in _markdown(at))


def test_search_failure_shows_api_message():
    at = _app()
    _search(at, "zzzznotfound")
    assert any("Movie not found!" in m for m in _markdown(at))
    assert not any("<h3>" in m for m in _markdown(at))


def test_empty_search_makes_no_call(fake_omdb):
    at = _app()
    _search(at, "")
    assert fake_omdb == []


def test_favorites_panel():
    at = _app()
    assert at.button(key="toggle_favorites").label == "Show Favorite Movies"

    at.button(key="toggle_favorites").click().run()
    assert at.button(key="toggle_favorites").label == "Hide Favorite Movies"
    assert any("No favorite movies added yet." in m for m in _markdown(at))

    _search(at, "batman")
    at.button(key="movie_tt0096895_0_fav").click().run()
    at.button(key="movie_tt0096895_0_fav").click().run()
    titles = [m for m in _markdown(at) if "<h3>Batman (1989)</h3>" in m]
    # one result card plus one favorite card
    assert len(titles) == 2
    assert not any("No favorite movies added yet." in m for m in _markdown(at))
    assert len(at.session_state["movie_search"].state.favorites) == 1


def test_browser_store_reads_and_writes_session():
    def script():
        import streamlit as st

        from ui_theme import BrowserThemeStore

        store = BrowserThemeStore()
        st.text(f"before={store.get()}")
        if st.button("Save dark", key="save"):
            store.set("dark")
        st.text(f"after={store.get()}")

    at = AppTest.from_function(script, default_timeout=10)
    at.run()
    assert at.text[0].value == "before=None"
    assert at.text[1].value == "after=None"

    at.button(key="save").click().run()
    assert at.session_state["ui_theme"] == "dark"
    assert at.text[1].value == "after=dark"
    assert any("localStorage.setItem('theme', 'dark')" in s for s in _scripts(at))
