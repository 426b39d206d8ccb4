"""
Use-case: sign a user in and record the outcome in the auth slice.
Depends only on Domain ports and the application store: no infrastructure imports.
"""

import logging

from src.application.state.actions import login_failure, login_success, logout
from src.application.state.store import Store
from src.domain.errors import error_message
from src.domain.ports.auth_port import IAuthenticator

log = logging.getLogger(__name__)


class LoginUserUseCase:
    def __init__(self, store: Store, authenticator: IAuthenticator) -> None:
        self._store = store
        self._authenticator = authenticator

    async def execute(self, email: str, password: str) -> None:
        """Authenticate and dispatch loginSuccess or loginFailure.

        Never raises: any collaborator failure becomes a loginFailure carrying
        the error text, so views read it from state.auth.error.
        """
        try:
            user = await self._authenticator.authenticate(email, password)
        except Exception as exc:
            log.warning(f"Login failed for {email!r}: {exc}")
            self._store.dispatch(login_failure(error_message(exc)))
            return

        self._store.dispatch(login_success(user))


class LogoutUserUseCase:
    def __init__(self, store: Store) -> None:
        self._store = store

    def execute(self) -> None:
        self._store.dispatch(logout())
