"""Thin wrapper around the OMDb HTTP API used by the UI.

Responsibilities
- Build a `requests.Session` tuned for OMDb (retries are off unless configured)
- Run title searches (`s=<query>`) and return the decoded JSON body
- Wrap transport, status and decoding failures in `OMDbError`
"""

import logging
import os
from typing import Any, Dict, Optional

import requests
from requests import Session
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://www.omdbapi.com/"


class OMDbError(Exception):
    """Raised when OMDb cannot be reached or answers with something unreadable."""


class OMDbAPI:
    """Simple client for the OMDb search endpoint.

    Parameters
    - api_key: OMDb key. Falls back to env var `OMDB_API_KEY`.
    - base_url: Endpoint URL. Falls back to env var `OMDB_BASE_URL`.
    - timeout: Seconds per request. Falls back to env var `OMDB_TIMEOUT` (30).
    - max_retries: Adapter retries on 429/5xx. Falls back to `OMDB_MAX_RETRIES` (0).
    """
    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        *,
        timeout: Optional[float] = None,
        max_retries: Optional[int] = None,
    ):
        if api_key is None:
            api_key = os.environ.get("OMDB_API_KEY")
        if base_url is None:
            base_url = os.environ.get("OMDB_BASE_URL")
        if timeout is None:
            timeout = float(os.environ.get("OMDB_TIMEOUT", "30"))
        if max_retries is None:
            max_retries = int(os.environ.get("OMDB_MAX_RETRIES", "0"))
        self.api_key = api_key or ""
        self.base_url = base_url or DEFAULT_BASE_URL
        self.timeout = timeout
        self.max_retries = max_retries
        self.session = self._build_session()

    def _build_session(self) -> Session:
        """Return a `requests.Session` mounted with the configured retry policy."""
        s = requests.Session()
        retry = Retry(
            total=self.max_retries,
            connect=self.max_retries,
            read=self.max_retries,
            status=self.max_retries,
            backoff_factor=0.5,
            status_forcelist=[429, 500, 502, 503, 504],
            allowed_methods={"GET"},
            raise_on_status=False,
        )
        adapter = HTTPAdapter(max_retries=retry)
        s.mount("http://", adapter)
        s.mount("https://", adapter)
        return s

    def _get_headers(self) -> Dict[str, str]:
        return {"Accept": "application/json"}

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    # --- Search ---
    def search(self, query: str) -> Dict[str, Any]:
        """Search titles matching `query`.

        Returns the decoded body, either
        `{"Response": "True", "Search": [...]}` or `{"Response": "False", "Error": "..."}`.
        Raises `OMDbError` on network errors, non-2xx statuses or non-JSON bodies.
        """
        params = {"apikey": self.api_key, "s": query}
        try:
            response = self.session.get(
                self.base_url, headers=self._get_headers(), params=params, timeout=self.timeout
            )
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as e:
            raise OMDbError(f"OMDb request failed: {e}") from e
        except ValueError as e:
            raise OMDbError(f"OMDb returned malformed JSON: {e}") from e
        if not isinstance(data, dict):
            raise OMDbError(f"OMDb returned unexpected payload type {type(data).__name__}")
        logger.debug("OMDb search %r -> Response=%s", query, data.get("Response"))
        return data

    def close(self) -> None:
        self.session.close()
