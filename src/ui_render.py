"""Movie card rendering for the Streamlit app."""

import html
from typing import Sequence

import streamlit as st

from component import MovieSearch
from models import MovieSummary

GRID_COLUMNS = 4
POSTER_WIDTH = 220
FAVORITE_POSTER_WIDTH = 140


def _card_title(movie: MovieSummary) -> None:
    st.markdown(
        f"<div class='title-row'><h3>{html.escape(movie.display_title)}</h3></div>",
        unsafe_allow_html=True,
    )


def _render_movies(component: MovieSearch, movies: Sequence[MovieSummary], *, key_prefix: str) -> None:
    """Result grid: poster, title, favorite button and review box per movie."""
    cols = st.columns(GRID_COLUMNS)
    reviews = component.state.reviews
    for idx, movie in enumerate(movies):
        with cols[idx % GRID_COLUMNS]:
            # imdbID alone is not always unique in OMDb result lists
            card_key = f"{key_prefix}_{movie.imdb_id}_{idx}"
            url = movie.poster_url
            if url:
                st.image(url, width=POSTER_WIDTH)
            _card_title(movie)
            if st.button("Add to Favorites", key=f"{card_key}_fav"):
                component.add_favorite(movie)
                st.toast(f"Added {movie.title}") if hasattr(st, "toast") else st.success(f"Added {movie.title}")

            review_key = f"{card_key}_review"

            def _on_review_change(imdb_id=movie.imdb_id, k=review_key):
                component.draft_review(imdb_id, st.session_state.get(k, ""))

            review_kwargs = {}
            if review_key not in st.session_state:
                review_kwargs["value"] = reviews.get(movie.imdb_id, "")
            st.text_area(
                "Review",
                key=review_key,
                placeholder="Add your review",
                label_visibility="collapsed",
                on_change=_on_review_change,
                **review_kwargs,
            )


def _render_favorites(component: MovieSearch) -> None:
    favorites = component.state.favorites
    if not favorites:
        st.write("No favorite movies added yet.")
        return
    cols = st.columns(GRID_COLUMNS)
    for idx, movie in enumerate(favorites):
        with cols[idx % GRID_COLUMNS]:
            url = movie.poster_url
            if url:
                st.image(url, width=FAVORITE_POSTER_WIDTH)
            _card_title(movie)
