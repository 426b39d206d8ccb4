"""
Application store: the single mutable root of the dashboard state.

The store is constructed explicitly by the composition root and passed to
whatever needs it; there is no module-level instance. All access happens on
one asyncio event loop, so dispatch runs to completion without locks.
"""

import logging
from dataclasses import dataclass, field, replace
from typing import Callable, Mapping, Optional

from src.application.state.actions import Action
from src.application.state.auth import AuthState, auth_slice
from src.application.state.portfolio import PortfolioState, portfolio_slice
from src.application.state.slice import Slice
from src.application.state.stock import StockState, stock_slice

log = logging.getLogger(__name__)

Listener = Callable[["AppState"], None]


@dataclass(frozen=True)
class AppState:
    """Immutable snapshot of the whole state tree."""

    auth: AuthState = field(default_factory=AuthState)
    portfolio: PortfolioState = field(default_factory=PortfolioState)
    stock: StockState = field(default_factory=StockState)


DEFAULT_SLICES: Mapping[str, Slice] = {
    auth_slice.name: auth_slice,
    portfolio_slice.name: portfolio_slice,
    stock_slice.name: stock_slice,
}


class Store:
    """Holds the current AppState and is the only place it is replaced.

    Example:
        store = Store()
        unsubscribe = store.subscribe(lambda state: print(state.portfolio))
        store.dispatch(add_stock_portfolio(Holding("AAPL", 10, 150)))
        unsubscribe()
    """

    def __init__(self, slices: Optional[Mapping[str, Slice]] = None) -> None:
        self._slices = dict(slices or DEFAULT_SLICES)
        unknown = set(self._slices) - set(AppState.__dataclass_fields__)
        if unknown:
            raise ValueError(f"AppState has no field for slices: {', '.join(sorted(unknown))}")

        self._state = AppState(
            **{name: s.initial_state for name, s in self._slices.items()}
        )
        self._listeners: list[Listener] = []

    def get_state(self) -> AppState:
        return self._state

    def dispatch(self, action: Action) -> None:
        """Apply *action* to its owning slice and notify every listener.

        Unknown slices and unknown kinds leave the current snapshot in place;
        listeners are still notified.
        """
        owner = self._slices.get(action.slice_name)
        if owner is None or not owner.handles(action.kind):
            log.debug(f"No handler for action {action.kind!r}, state unchanged")
        else:
            current = getattr(self._state, owner.name)
            updated = owner.reduce(current, action)
            if updated is not current:
                self._state = replace(self._state, **{owner.name: updated})
            log.debug(f"Dispatched {action.kind!r}")

        snapshot = self._state
        for listener in list(self._listeners):
            listener(snapshot)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register *listener* to be called after every dispatch.

        Returns:
            A function that removes the listener. Calling it more than once is a no-op.
        """
        self._listeners.append(listener)
        subscribed = True

        def unsubscribe() -> None:
            nonlocal subscribed
            if subscribed:
                subscribed = False
                self._listeners.remove(listener)

        return unsubscribe


def create_store() -> Store:
    """Build a store with the auth, portfolio and stock slices."""
    return Store()
