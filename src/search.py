"""Query executor: OMDb search -> `SearchResult` -> store."""

import asyncio
import logging
from typing import Any, Dict, Optional

from models import MovieSummary, SearchError, SearchResult, SearchSuccess
from omdb_api import OMDbAPI, OMDbError
from state import AppStore, SearchResolved, SearchStarted

logger = logging.getLogger(__name__)

GENERIC_ERROR = "Failed to fetch data"


def normalize_query(query: Optional[str]) -> str:
    """Trim surrounding whitespace; a blank query counts as empty and is never sent."""
    return (query or "").strip()


def parse_search_payload(data: Dict[str, Any]) -> SearchResult:
    """Map an OMDb search body to a `SearchResult`.

    `Response == "True"` yields the parsed movies in order; anything else yields
    the API's own `Error` text. Raises ValueError when a success body has no
    usable `Search` list.
    """
    if data.get("Response") == "True":
        raw = data.get("Search")
        if not isinstance(raw, list) or not raw:
            raise ValueError("success response without Search results")
        try:
            movies = tuple(MovieSummary.from_payload(m) for m in raw)
        except (KeyError, TypeError, AttributeError) as e:
            raise ValueError(f"malformed Search entry: {e}") from e
        return SearchSuccess(movies)
    message = data.get("Error")
    if not isinstance(message, str):
        raise ValueError("failure response without Error message")
    return SearchError(message)


class QueryExecutor:
    def __init__(self, api: OMDbAPI):
        self.api = api

    async def search(self, query: str) -> Optional[SearchResult]:
        """Run one search. Returns None (and does nothing) for an empty query."""
        query = normalize_query(query)
        if not query:
            return None
        try:
            data = await asyncio.to_thread(self.api.search, query)
            result = parse_search_payload(data)
        except (OMDbError, ValueError) as e:
            logger.warning("Search %r failed: %s", query, e)
            return SearchError(GENERIC_ERROR)
        if isinstance(result, SearchError):
            logger.info("Search %r rejected by OMDb: %s", query, result.message)
        return result

    async def run(self, query: str, store: AppStore) -> Optional[SearchResult]:
        """Search and publish the outcome to `store`.

        Each call takes a fresh request id; a response that arrives after a
        newer search was dispatched is discarded by the reducer.
        """
        query = normalize_query(query)
        if not query:
            return None
        store.dispatch(SearchStarted(query))
        request_id = store.state.latest_request
        result = await self.search(query)
        if result is not None:
            store.dispatch(SearchResolved(request_id, result))
        return result
