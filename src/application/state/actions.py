"""
Action records and plain action creators for the dashboard store.

Every action kind is a "<slice>/<operation>" string. Kinds are closed per
slice as string enums so each slice can check at construction time that it
handles every one of them.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from src.domain.entities.holding import Holding
from src.domain.entities.stock_price import TimeSeries
from src.domain.entities.user import User


@dataclass(frozen=True)
class Action:
    kind: str
    payload: Any = None

    @property
    def slice_name(self) -> str:
        """The slice that owns this action (the kind prefix before '/')."""
        return self.kind.split("/", 1)[0]


class AuthActionKind(str, Enum):
    LOGIN_SUCCESS = "auth/loginSuccess"
    LOGIN_FAILURE = "auth/loginFailure"
    LOGOUT = "auth/logout"


class PortfolioActionKind(str, Enum):
    ADD_STOCK = "portfolio/addStock"
    REMOVE_STOCK = "portfolio/removeStock"
    UPDATE_STOCK = "portfolio/updateStock"


class StockActionKind(str, Enum):
    FETCH_START = "stock/fetchStart"
    FETCH_SUCCESS = "stock/fetchSuccess"
    FETCH_FAILURE = "stock/fetchFailure"


# ---------------------------------------------------------------------------
# auth
# ---------------------------------------------------------------------------
def login_success(user: User) -> Action:
    return Action(AuthActionKind.LOGIN_SUCCESS.value, user)


def login_failure(message: str) -> Action:
    return Action(AuthActionKind.LOGIN_FAILURE.value, message)


def logout() -> Action:
    return Action(AuthActionKind.LOGOUT.value)


# ---------------------------------------------------------------------------
# portfolio
# ---------------------------------------------------------------------------
def add_stock(holding: Holding) -> Action:
    return Action(PortfolioActionKind.ADD_STOCK.value, holding)


def remove_stock(symbol: str) -> Action:
    return Action(PortfolioActionKind.REMOVE_STOCK.value, symbol)


def update_stock(holding: Holding) -> Action:
    return Action(PortfolioActionKind.UPDATE_STOCK.value, holding)


# ---------------------------------------------------------------------------
# stock
# ---------------------------------------------------------------------------
def fetch_start() -> Action:
    return Action(StockActionKind.FETCH_START.value)


def fetch_success(data: TimeSeries) -> Action:
    return Action(StockActionKind.FETCH_SUCCESS.value, data)


def fetch_failure(message: str) -> Action:
    return Action(StockActionKind.FETCH_FAILURE.value, message)


# ---------------------------------------------------------------------------
# Synchronous creators exposed to the presentation layer
# ---------------------------------------------------------------------------
def add_stock_portfolio(holding: Holding) -> Action:
    """Build the action that appends *holding* to the portfolio."""
    return add_stock(holding)


def remove_stock_from_portfolio(symbol: str) -> Action:
    """Build the action that drops every holding of *symbol* from the portfolio."""
    return remove_stock(symbol)


def update_stock_in_portfolio(holding: Holding) -> Action:
    """Build the action that replaces the holding with the same symbol, if any."""
    return update_stock(holding)
