"""
Portfolio slice: the ordered list of holdings the user is tracking.

Symbols are not required to be unique. removeStock drops every matching
holding; updateStock replaces the first one.
"""

from dataclasses import dataclass, replace

from src.application.state.actions import Action, PortfolioActionKind
from src.application.state.slice import Slice
from src.domain.entities.holding import Holding


@dataclass(frozen=True)
class PortfolioState:
    stocks: tuple[Holding, ...] = ()


def _add_stock(state: PortfolioState, action: Action) -> PortfolioState:
    return replace(state, stocks=state.stocks + (action.payload,))


def _remove_stock(state: PortfolioState, action: Action) -> PortfolioState:
    remaining = tuple(h for h in state.stocks if h.symbol != action.payload)
    if len(remaining) == len(state.stocks):
        return state
    return replace(state, stocks=remaining)


def _update_stock(state: PortfolioState, action: Action) -> PortfolioState:
    holding: Holding = action.payload
    for index, current in enumerate(state.stocks):
        if current.symbol == holding.symbol:
            stocks = state.stocks[:index] + (holding,) + state.stocks[index + 1:]
            return replace(state, stocks=stocks)
    return state


portfolio_slice: Slice[PortfolioState] = Slice(
    "portfolio",
    PortfolioState(),
    PortfolioActionKind,
    {
        PortfolioActionKind.ADD_STOCK: _add_stock,
        PortfolioActionKind.REMOVE_STOCK: _remove_stock,
        PortfolioActionKind.UPDATE_STOCK: _update_stock,
    },
)
