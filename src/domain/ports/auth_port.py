"""
Port (interface) for credential-based authentication services.
Infrastructure adapters (e.g. CognitoAuthenticator) must implement this interface.
"""

from abc import ABC, abstractmethod

from src.domain.entities.user import User


class IAuthenticator(ABC):
    @abstractmethod
    async def authenticate(self, email: str, password: str) -> User:
        """Verify the credentials and return the signed-in user.

        Raises:
            AuthError: if the credentials are rejected or the service is unreachable.
        """
        ...
