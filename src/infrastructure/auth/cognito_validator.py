"""
Infrastructure adapter: AWS Cognito JWKS → ITokenValidator.

Validates RS256-signed Cognito ID tokens by fetching the public JWKS endpoint
and verifying signature, audience, issuer, and token_use claim.
JWKS are cached per-instance so repeated logins skip the HTTP round trip.
"""

from typing import Optional

import httpx
from jose import JWTError, jwt

from src.domain.ports.token_validator_port import ITokenValidator


class CognitoTokenValidator(ITokenValidator):
    """Validates Cognito ID tokens against the user pool's public JWKS."""

    def __init__(
        self,
        user_pool_id: str,
        client_id: str,
        region: str = "us-east-1",
    ) -> None:
        self._client_id = client_id
        self._issuer = f"https://cognito-idp.{region}.amazonaws.com/{user_pool_id}"
        self._jwks_url = f"{self._issuer}/.well-known/jwks.json"
        self._jwks: Optional[dict] = None

    def _get_jwks(self) -> dict:
        if self._jwks is None:
            response = httpx.get(self._jwks_url, timeout=10)
            response.raise_for_status()
            self._jwks = response.json()
        return self._jwks

    def validate(self, token: str) -> dict:
        """Decode and validate a Cognito ID token.

        Raises:
            ValueError: on any validation failure (bad signature, expiry,
                        wrong audience/issuer, wrong token_use, JWKS unreachable).
        """
        try:
            jwks = self._get_jwks()
            kid = jwt.get_unverified_header(token).get("kid")
            rsa_key = next(
                (key for key in jwks.get("keys", []) if key["kid"] == kid),
                None,
            )
            if not rsa_key:
                raise ValueError("Matching key not found in JWKS; token may be stale.")

            claims = jwt.decode(
                token,
                rsa_key,
                algorithms=["RS256"],
                audience=self._client_id,
                issuer=self._issuer,
            )
        except JWTError as exc:
            raise ValueError(f"Token validation failed: {exc}") from exc
        except httpx.HTTPError as exc:
            raise ValueError(f"Could not load signing keys: {exc}") from exc

        if claims.get("token_use") != "id":
            raise ValueError(
                f"Invalid token_use: expected 'id', got {claims.get('token_use')!r}"
            )
        return claims
