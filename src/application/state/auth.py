"""
Auth slice: who is signed in and the last login error.
"""

from dataclasses import dataclass, replace
from typing import Optional

from src.application.state.actions import Action, AuthActionKind
from src.application.state.slice import Slice
from src.domain.entities.user import User


@dataclass(frozen=True)
class AuthState:
    user: Optional[User] = None
    is_authenticated: bool = False
    error: Optional[str] = None


def _login_success(state: AuthState, action: Action) -> AuthState:
    return replace(state, user=action.payload, is_authenticated=True)


def _login_failure(state: AuthState, action: Action) -> AuthState:
    # The previous user is kept; views must gate on is_authenticated.
    return replace(state, error=action.payload, is_authenticated=False)


def _logout(state: AuthState, action: Action) -> AuthState:
    return replace(state, user=None, is_authenticated=False, error=None)


auth_slice: Slice[AuthState] = Slice(
    "auth",
    AuthState(),
    AuthActionKind,
    {
        AuthActionKind.LOGIN_SUCCESS: _login_success,
        AuthActionKind.LOGIN_FAILURE: _login_failure,
        AuthActionKind.LOGOUT: _logout,
    },
)
