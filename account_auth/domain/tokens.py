"""Signed session tokens issued after registration and login."""

import time
from dataclasses import dataclass
from typing import Any

import jwt

from .ports import Account

ACCESS_TOKEN = "access"
REFRESH_TOKEN = "refresh"


@dataclass(frozen=True)
class TokenIssuer:
    """
    Issues HMAC-signed JWTs carrying ``accountId`` and ``role`` claims.

    Access and refresh tokens share one secret and one claim shape; they
    differ in lifetime and in the ``tokenType`` claim.
    """

    secret: str
    algorithm: str = "HS256"
    access_ttl_seconds: int = 60 * 60
    refresh_ttl_seconds: int = 7 * 24 * 60 * 60

    def issue_access_token(self, account: Account) -> str:
        """Return a token for ``account`` that expires after the access TTL."""
        return self._issue(account, ACCESS_TOKEN, self.access_ttl_seconds)

    def issue_refresh_token(self, account: Account) -> str:
        """Return a token for ``account`` that expires after the refresh TTL."""
        return self._issue(account, REFRESH_TOKEN, self.refresh_ttl_seconds)

    def decode(self, token: str) -> dict[str, Any]:
        """
        Decode and verify a token issued by this issuer.

        Raises:
            jwt.PyJWTError: If the signature is invalid or the token expired
        """
        return jwt.decode(token, self.secret, algorithms=[self.algorithm])

    def _issue(self, account: Account, token_type: str, ttl_seconds: int) -> str:
        now = int(time.time())
        payload: dict[str, Any] = {
            "accountId": account.account_id,
            "role": account.role.value,
            "tokenType": token_type,
            "iat": now,
            "exp": now + ttl_seconds,
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)
