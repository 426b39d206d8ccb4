"""
Use-case: load the historical price series for a symbol into the stock slice.
Depends only on Domain ports and the application store: no infrastructure imports.
"""

import logging

from src.application.state.actions import fetch_failure, fetch_start, fetch_success
from src.application.state.store import Store
from src.domain.errors import error_message
from src.domain.ports.stock_data_port import IStockDataProvider

log = logging.getLogger(__name__)


class FetchStockDataUseCase:
    def __init__(self, store: Store, provider: IStockDataProvider) -> None:
        self._store = store
        self._provider = provider

    async def execute(self, symbol: str) -> None:
        """Fetch the series for *symbol* (uppercased) and record the outcome.

        fetchStart is dispatched before the provider is called, so listeners
        always see loading=True ahead of the terminal success or failure.
        Overlapping calls are not cancelled; whichever finishes last wins.
        """
        self._store.dispatch(fetch_start())

        if not symbol or not symbol.strip():
            self._store.dispatch(fetch_failure("symbol must be a non-empty string"))
            return

        normalized = symbol.upper().strip()
        try:
            data = await self._provider.fetch_historical_series(normalized)
        except Exception as exc:
            log.warning(f"Fetching history for {normalized} failed: {exc}")
            self._store.dispatch(fetch_failure(error_message(exc)))
            return

        self._store.dispatch(fetch_success(data))
