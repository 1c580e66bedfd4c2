"""Light/dark theme preference: storage capability and controller."""

import logging
from typing import Callable, Dict, Optional, Protocol, Tuple

from models import ThemePreference
from state import AppStore, ThemeInitialized, ThemeToggled

logger = logging.getLogger(__name__)

THEME_KEY = "theme"

# (background, foreground)
THEME_COLORS: Dict[ThemePreference, Tuple[str, str]] = {
    ThemePreference.LIGHT: ("#fff", "#333"),
    ThemePreference.DARK: ("#141414", "#fff"),
}


class ThemeStore(Protocol):
    """One durable key-value slot holding "light" or "dark"."""

    def get(self) -> Optional[str]:
        ...

    def set(self, value: str) -> None:
        ...


class MemoryThemeStore:
    def __init__(self, value: Optional[str] = None):
        self.value = value

    def get(self) -> Optional[str]:
        return self.value

    def set(self, value: str) -> None:
        self.value = value


def theme_colors(theme: ThemePreference) -> Tuple[str, str]:
    return THEME_COLORS[theme]


class ThemeController:
    """Reads, flips, persists and applies the theme preference.

    `apply` receives the effective theme after every change; the page uses it
    to restyle the document.
    """

    def __init__(self, storage: ThemeStore, apply: Optional[Callable[[ThemePreference], None]] = None):
        self.storage = storage
        self.apply = apply or (lambda _theme: None)

    def initialize(self, store: AppStore) -> ThemePreference:
        """Load the persisted theme once. Later calls just reapply the current one."""
        if store.state.theme is not None:
            self.apply(store.state.theme)
            return store.state.theme
        raw = self.storage.get()
        theme = ThemePreference.parse(raw)
        if raw is not None and raw != theme.value:
            logger.info("Ignoring unrecognized stored theme %r", raw)
        self.apply(theme)
        store.dispatch(ThemeInitialized(theme))
        return theme

    def toggle(self, store: AppStore) -> ThemePreference:
        state = store.dispatch(ThemeToggled())
        self.storage.set(state.theme.value)
        self.apply(state.theme)
        return state.theme
