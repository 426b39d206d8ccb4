"""
Infrastructure adapter: yfinance → IStockDataProvider.
All yfinance-specific details (Ticker.history(), DataFrame rows) are confined here;
the rest of the codebase depends only on IStockDataProvider.
"""

import asyncio
import logging

import yfinance as yf

from src.domain.entities.stock_price import PricePoint, TimeSeries
from src.domain.errors import FetchError
from src.domain.ports.stock_data_port import IStockDataProvider

log = logging.getLogger(__name__)


class YFinanceStockDataProvider(IStockDataProvider):
    """Fetches daily closing prices from Yahoo Finance via the yfinance library."""

    def __init__(self, period: str = "3mo", interval: str = "1d") -> None:
        self._period = period
        self._interval = interval

    async def fetch_historical_series(self, symbol: str) -> TimeSeries:
        # yfinance is blocking; keep the event loop free while it downloads.
        return await asyncio.to_thread(self._load_series, symbol)

    def _load_series(self, symbol: str) -> TimeSeries:
        log.debug(f"yfinance history {symbol} period={self._period} interval={self._interval}")
        try:
            history = yf.Ticker(symbol).history(period=self._period, interval=self._interval)
        except Exception as exc:
            raise FetchError(f"History request for {symbol!r} failed: {exc}", symbol) from exc

        if not history.empty:
            # partial sessions come back with a NaN close
            history = history.dropna(subset=["Close"])
        if history.empty:
            raise FetchError(f"No historical data available for symbol: {symbol!r}", symbol)

        return tuple(
            PricePoint(
                date=date.strftime("%Y-%m-%d"),
                close=round(float(row["Close"]), 4),
            )
            for date, row in history.iterrows()
        )
