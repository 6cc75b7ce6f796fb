"""Fetch web pages and extract their contact handles."""

from __future__ import annotations

import logging

import requests
from requests import Response

from .config import DEFAULT_USER_AGENT
from .extraction import parse_handles_from_html
from .models import HandleCollection, PageData

logger = logging.getLogger(__name__)


class PageFetcher:
    """Download HTML pages over HTTP and run handle extraction on them."""

    def __init__(
        self,
        *,
        session: requests.Session | None = None,
        http_timeout: float = 20,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        self.session = session or requests.Session()
        self.http_timeout = http_timeout
        self.user_agent = user_agent

    def fetch_html(self, url: str) -> str | None:
        """Fetch raw HTML for a URL, returning None when the request fails."""

        try:
            response: Response = self.session.get(
                url, headers={"User-Agent": self.user_agent}, timeout=self.http_timeout
            )
            response.raise_for_status()
            return response.text
        except requests.RequestException as exc:
            logger.warning("Failed to fetch %s: %s", url, exc)
            return None

    def fetch_handles(self, url: str, data: PageData | None = None) -> HandleCollection | None:
        """Fetch a page and extract its handles; None if the page could not be fetched."""

        page_html = self.fetch_html(url)
        if page_html is None:
            return None
        return parse_handles_from_html(page_html, data)
