"""Immutable UI state and the reducer that drives it.

Every user interaction becomes an action; `reduce` maps (state, action) to a
new `AppState` without touching Streamlit, the network or storage. Side effects
live in the executor, the theme controller and the page script.
"""

import logging
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Mapping, Optional, Tuple, Union

from models import MovieSummary, SearchError, SearchResult, SearchSuccess, ThemePreference

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppState:
    query: str = ""
    movies: Tuple[MovieSummary, ...] = ()
    error: str = ""
    favorites: Tuple[MovieSummary, ...] = ()
    show_favorites: bool = False
    # None until the persisted theme has been read and applied
    theme: Optional[ThemePreference] = None
    latest_request: int = 0
    reviews: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))


# --- Actions ---
@dataclass(frozen=True)
class QueryChanged:
    query: str


@dataclass(frozen=True)
class SearchStarted:
    query: str


@dataclass(frozen=True)
class SearchResolved:
    request_id: int
    result: SearchResult


@dataclass(frozen=True)
class FavoriteAdded:
    movie: MovieSummary


@dataclass(frozen=True)
class FavoritesVisibilityToggled:
    pass


@dataclass(frozen=True)
class ThemeInitialized:
    theme: ThemePreference


@dataclass(frozen=True)
class ThemeToggled:
    pass


@dataclass(frozen=True)
class ReviewDrafted:
    imdb_id: str
    text: str


Action = Union[
    QueryChanged,
    SearchStarted,
    SearchResolved,
    FavoriteAdded,
    FavoritesVisibilityToggled,
    ThemeInitialized,
    ThemeToggled,
    ReviewDrafted,
]


def is_ready(state: AppState) -> bool:
    """True once the theme is initialized; nothing is rendered before that."""
    return state.theme is not None


def is_favorite(state: AppState, imdb_id: str) -> bool:
    return any(f.imdb_id == imdb_id for f in state.favorites)


def reduce(state: AppState, action: Action) -> AppState:
    if isinstance(action, QueryChanged):
        return replace(state, query=action.query)

    if isinstance(action, SearchStarted):
        # Previous results stay on screen until this request resolves
        return replace(state, query=action.query, error="", latest_request=state.latest_request + 1)

    if isinstance(action, SearchResolved):
        if action.request_id != state.latest_request:
            logger.debug(
                "Dropping stale search response %s (latest %s)", action.request_id, state.latest_request
            )
            return state
        if isinstance(action.result, SearchSuccess):
            return replace(state, movies=tuple(action.result.movies), error="")
        if isinstance(action.result, SearchError):
            return replace(state, movies=(), error=action.result.message)
        raise TypeError(f"Unknown search result {action.result!r}")

    if isinstance(action, FavoriteAdded):
        if is_favorite(state, action.movie.imdb_id):
            return state
        return replace(state, favorites=state.favorites + (action.movie,))

    if isinstance(action, FavoritesVisibilityToggled):
        return replace(state, show_favorites=not state.show_favorites)

    if isinstance(action, ThemeInitialized):
        if state.theme is not None:
            return state
        return replace(state, theme=action.theme)

    if isinstance(action, ThemeToggled):
        if state.theme is None:
            raise RuntimeError("Theme toggled before initialization")
        return replace(state, theme=state.theme.toggled())

    if isinstance(action, ReviewDrafted):
        reviews = dict(state.reviews)
        reviews[action.imdb_id] = action.text
        return replace(state, reviews=MappingProxyType(reviews))

    raise TypeError(f"Unknown action {action!r}")


class AppStore:
    """Holds the current `AppState`; all changes go through `dispatch`."""

    def __init__(self, state: Optional[AppState] = None):
        self.state = state or AppState()

    def dispatch(self, action: Action) -> AppState:
        new_state = reduce(self.state, action)
        if new_state is not self.state:
            logger.debug("%s applied", type(action).__name__)
        self.state = new_state
        return new_state
