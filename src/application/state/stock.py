"""
Stock slice: the most recently fetched price series and its load status.
"""

from dataclasses import dataclass, replace
from typing import Optional

from src.application.state.actions import Action, StockActionKind
from src.application.state.slice import Slice
from src.domain.entities.stock_price import TimeSeries


@dataclass(frozen=True)
class StockState:
    data: TimeSeries = ()
    loading: bool = False
    error: Optional[str] = None


def _fetch_start(state: StockState, action: Action) -> StockState:
    return replace(state, loading=True, error=None)


def _fetch_success(state: StockState, action: Action) -> StockState:
    return replace(state, data=action.payload, loading=False)


def _fetch_failure(state: StockState, action: Action) -> StockState:
    # data keeps the last good series
    return replace(state, error=action.payload, loading=False)


stock_slice: Slice[StockState] = Slice(
    "stock",
    StockState(),
    StockActionKind,
    {
        StockActionKind.FETCH_START: _fetch_start,
        StockActionKind.FETCH_SUCCESS: _fetch_success,
        StockActionKind.FETCH_FAILURE: _fetch_failure,
    },
)
