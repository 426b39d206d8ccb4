"""
Infrastructure adapter: JSON news API over HTTP → INewsProvider.

Expects GET {base_url}/news/{symbol} to answer {"articles": [{"title", "url"}, ...]}.
"""

import logging
from typing import Optional

import httpx

from src.domain.entities.article import Article
from src.domain.errors import FetchError
from src.domain.ports.news_port import INewsProvider

log = logging.getLogger(__name__)


class HttpNewsProvider(INewsProvider):
    """Fetches headline lists from a news REST endpoint with httpx."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    async def fetch_articles(self, symbol: str) -> list[Article]:
        url = f"{self._base_url}/news/{symbol}"
        log.debug(f"GET {url}")
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                response = await client.get(url)
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPError as exc:
            raise FetchError(f"News request for {symbol!r} failed: {exc}", symbol) from exc
        except ValueError as exc:
            raise FetchError(f"News response for {symbol!r} is not JSON", symbol) from exc

        try:
            return [
                Article(title=item["title"], url=item["url"])
                for item in payload.get("articles", [])
            ]
        except (AttributeError, KeyError, TypeError) as exc:
            raise FetchError(f"Malformed news payload for {symbol!r}: {exc}", symbol) from exc
