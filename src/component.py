"""The movie search component: one store shared by search, favorites and theme."""

from typing import Optional

from models import MovieSummary, SearchResult, ThemePreference
from omdb_api import OMDbAPI
from search import QueryExecutor
from state import (
    AppState,
    AppStore,
    FavoriteAdded,
    FavoritesVisibilityToggled,
    QueryChanged,
    ReviewDrafted,
    is_ready,
)
from theme import MemoryThemeStore, ThemeController, ThemeStore


class MovieSearch:
    """Facade the page talks to. Holds no Streamlit state of its own.

    Parameters
    - api: OMDb client (defaults to one configured from the environment)
    - theme_store: durable slot for the theme (defaults to in-memory)
    - theme: controller override; built from `theme_store` when omitted
    """
    def __init__(
        self,
        api: Optional[OMDbAPI] = None,
        theme_store: Optional[ThemeStore] = None,
        *,
        theme: Optional[ThemeController] = None,
        store: Optional[AppStore] = None,
    ):
        self.store = store or AppStore()
        self.executor = QueryExecutor(api or OMDbAPI())
        self.theme = theme or ThemeController(theme_store or MemoryThemeStore())

    @property
    def state(self) -> AppState:
        return self.store.state

    @property
    def ready(self) -> bool:
        return is_ready(self.store.state)

    @property
    def configured(self) -> bool:
        """False when no OMDb key is set; OMDb will then reject every search."""
        return self.executor.api.configured

    # --- Query executor ---
    def set_query(self, query: str) -> None:
        self.store.dispatch(QueryChanged(query))

    async def search(self, query: Optional[str] = None) -> Optional[SearchResult]:
        """Search for `query` (or the current query text)."""
        if query is None:
            query = self.store.state.query
        return await self.executor.run(query, self.store)

    # --- Favorites ledger ---
    def add_favorite(self, movie: MovieSummary) -> None:
        self.store.dispatch(FavoriteAdded(movie))

    def toggle_favorites_visibility(self) -> None:
        self.store.dispatch(FavoritesVisibilityToggled())

    # --- Theme controller ---
    def initialize_theme(self) -> ThemePreference:
        return self.theme.initialize(self.store)

    def toggle_theme(self) -> ThemePreference:
        return self.theme.toggle(self.store)

    # --- Reviews (draft only, never stored or sent) ---
    def draft_review(self, imdb_id: str, text: str) -> None:
        self.store.dispatch(ReviewDrafted(imdb_id, text))
