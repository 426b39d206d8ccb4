"""
Generic state slice: an initial value plus one pure handler per action kind.
"""

from enum import Enum
from typing import Callable, Generic, Mapping, TypeVar

from src.application.state.actions import Action

S = TypeVar("S")

Handler = Callable[[S, Action], S]


class Slice(Generic[S]):
    """An independently owned region of the application state.

    The handler table must cover exactly the members of *kinds*; a slice that
    forgets a kind (or handles a foreign one) fails at construction time.

    Example:
        auth_slice = Slice("auth", AuthState(), AuthActionKind, {...})
        new_state = auth_slice.reduce(state, login_success(user))
    """

    def __init__(
        self,
        name: str,
        initial_state: S,
        kinds: type[Enum],
        handlers: Mapping[Enum, Handler],
    ) -> None:
        missing = [kind.value for kind in kinds if kind not in handlers]
        if missing:
            raise ValueError(f"Slice {name!r} has no handler for: {', '.join(missing)}")
        foreign = [str(kind) for kind in handlers if not isinstance(kind, kinds)]
        if foreign:
            raise ValueError(f"Slice {name!r} handles unknown kinds: {', '.join(foreign)}")

        self.name = name
        self.initial_state = initial_state
        self._handlers = {kind.value: handler for kind, handler in handlers.items()}

    def reduce(self, state: S, action: Action) -> S:
        """Return the state after *action*, or *state* itself if the kind is not ours."""
        handler = self._handlers.get(action.kind)
        if handler is None:
            return state
        return handler(state, action)

    def handles(self, kind: str) -> bool:
        return kind in self._handlers
