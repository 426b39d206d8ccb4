"""
Port (interface) for historical stock data providers.
Infrastructure adapters (e.g. YFinanceStockDataProvider) must implement this interface.
"""

from abc import ABC, abstractmethod

from src.domain.entities.stock_price import TimeSeries


class IStockDataProvider(ABC):
    @abstractmethod
    async def fetch_historical_series(self, symbol: str) -> TimeSeries:
        """Return the closing-price series for *symbol*, oldest first.

        Raises:
            FetchError: if the provider has no data for *symbol* or the call fails.
        """
        ...
