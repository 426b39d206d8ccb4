"""
Use-case: retrieve recent news articles for a given symbol.
The news feed is read directly by the presentation layer and never goes
through the store.
"""

from src.domain.entities.article import Article
from src.domain.ports.news_port import INewsProvider


class GetNewsArticlesUseCase:
    def __init__(self, provider: INewsProvider) -> None:
        self._provider = provider

    async def execute(self, symbol: str) -> list[Article]:
        """Fetch articles for *symbol* (uppercased).

        Raises:
            ValueError: if *symbol* is blank.
            FetchError: propagated from the INewsProvider on API failure.
        """
        if not symbol or not symbol.strip():
            raise ValueError("symbol must be a non-empty string")
        return await self._provider.fetch_articles(symbol.upper().strip())
