"""
Infrastructure adapter: AWS Cognito user pool → IAuthenticator.

Exchanges an email/password pair for an ID token with the USER_PASSWORD_AUTH
flow, then validates the token and maps its claims to a User. boto3 is
blocking, so the exchange runs in a worker thread.
"""

import asyncio
import logging
from typing import Any, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from src.domain.entities.user import User
from src.domain.errors import AuthError
from src.domain.ports.auth_port import IAuthenticator
from src.domain.ports.token_validator_port import ITokenValidator

log = logging.getLogger(__name__)


class CognitoAuthenticator(IAuthenticator):
    """Signs users in against a Cognito app client."""

    def __init__(
        self,
        client_id: str,
        validator: ITokenValidator,
        region: str = "us-east-1",
        client: Optional[Any] = None,
    ) -> None:
        self._client_id = client_id
        self._validator = validator
        self._client = client or boto3.client("cognito-idp", region_name=region)

    async def authenticate(self, email: str, password: str) -> User:
        return await asyncio.to_thread(self._authenticate, email, password)

    def _authenticate(self, email: str, password: str) -> User:
        log.debug(f"Cognito initiate_auth for {email!r}")
        try:
            response = self._client.initiate_auth(
                ClientId=self._client_id,
                AuthFlow="USER_PASSWORD_AUTH",
                AuthParameters={"USERNAME": email, "PASSWORD": password},
            )
        except ClientError as exc:
            raise AuthError(exc.response.get("Error", {}).get("Message", str(exc))) from exc
        except BotoCoreError as exc:
            raise AuthError(f"Authentication service unavailable: {exc}") from exc

        result = response.get("AuthenticationResult")
        if not result:
            challenge = response.get("ChallengeName", "UNKNOWN")
            raise AuthError(f"Additional sign-in step required: {challenge}")

        try:
            claims = self._validator.validate(result["IdToken"])
        except ValueError as exc:
            raise AuthError(str(exc)) from exc

        return User(
            uid=claims["sub"],
            email=claims.get("email", email),
            display_name=claims.get("name"),
        )
