"""
Port (interface) for news feed providers.
Infrastructure adapters (e.g. HttpNewsProvider) must implement this interface.
"""

from abc import ABC, abstractmethod

from src.domain.entities.article import Article


class INewsProvider(ABC):
    @abstractmethod
    async def fetch_articles(self, symbol: str) -> list[Article]: ...
