"""Value types shared by the search, favorites and theme logic."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Union


@dataclass(frozen=True)
class MovieSummary:
    """One OMDb search hit. Identity is `imdb_id`."""

    imdb_id: str
    title: str
    year: str
    poster: str = ""

    @classmethod
    def from_payload(cls, raw: Dict[str, Any]) -> "MovieSummary":
        """Build from an OMDb `Search` entry.

        Raises KeyError when `imdbID` or `Title` is missing.
        """
        return cls(
            imdb_id=str(raw["imdbID"]),
            title=str(raw["Title"]),
            year=str(raw.get("Year") or ""),
            poster=str(raw.get("Poster") or ""),
        )

    @property
    def display_title(self) -> str:
        return f"{self.title} ({self.year})"

    @property
    def poster_url(self) -> Optional[str]:
        """Poster URL, or None when OMDb has no image ("N/A")."""
        if not self.poster or self.poster == "N/A":
            return None
        return self.poster


@dataclass(frozen=True)
class SearchSuccess:
    movies: Tuple[MovieSummary, ...]


@dataclass(frozen=True)
class SearchError:
    message: str


SearchResult = Union[SearchSuccess, SearchError]


class ThemePreference(str, Enum):
    LIGHT = "light"
    DARK = "dark"

    @classmethod
    def parse(cls, raw: Optional[str]) -> "ThemePreference":
        """Validate a persisted value; anything unrecognized means light."""
        try:
            return cls(raw)
        except ValueError:
            return cls.LIGHT

    def toggled(self) -> "ThemePreference":
        return ThemePreference.DARK if self is ThemePreference.LIGHT else ThemePreference.LIGHT
