"""
Token Service

Issues and verifies stateless HS256 bearer tokens.

Tokens carry ``user_id``, ``iat`` and ``exp``. There is no server-side
session store and no revocation list: a token stays valid until ``exp`` even
if the account is deleted or its password changed in the meantime.
"""

from datetime import UTC, datetime, timedelta
from enum import Enum
from typing import Union

from jose import JWTError, jwt
from jose.exceptions import JWTClaimsError

from libs.result import Error, Result, Return


class TokenFailure(str, Enum):
    """Why a token was rejected. The HTTP layer answers 401 for all of them."""

    MALFORMED = "MALFORMED"
    BAD_SIGNATURE = "BAD_SIGNATURE"
    EXPIRED = "EXPIRED"


_MESSAGES = {
    TokenFailure.MALFORMED: "Token is malformed",
    TokenFailure.BAD_SIGNATURE: "Token signature is invalid",
    TokenFailure.EXPIRED: "Token has expired",
}


def _failure(kind: TokenFailure) -> Result[str]:
    return Return.err(Error(kind.value, _MESSAGES[kind]))


class TokenService:
    """
    Signs and checks access tokens with one process-wide secret.

    The secret and TTL are fixed at construction and never change afterwards.

    Args:
        secret: HMAC signing key (required, non-empty)
        ttl: token lifetime, as a timedelta or a number of seconds
        algorithm: JWS algorithm, HS256 by default
    """

    def __init__(
        self,
        secret: str,
        ttl: Union[timedelta, int] = timedelta(hours=24),
        algorithm: str = "HS256",
    ):
        if not secret:
            raise ValueError("JWT secret is not configured")
        if not isinstance(ttl, timedelta):
            ttl = timedelta(seconds=ttl)
        if ttl < timedelta(0):
            raise ValueError("Token TTL cannot be negative")
        self._secret = secret
        self._algorithm = algorithm
        self._ttl = ttl

    @property
    def ttl(self) -> timedelta:
        return self._ttl

    def issue(self, identity: str) -> str:
        """
        Generate an access token for a user.

        Args:
            identity: User ID

        Returns:
            JWT token string expiring after the configured TTL
        """
        now = datetime.now(UTC)
        payload = {
            "user_id": str(identity),
            "iat": now,
            "exp": now + self._ttl,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> Result[str]:
        """
        Verify a token and return the identity it was issued for.

        Returns:
            Result with the user ID, or an Error whose code is one of
            MALFORMED, BAD_SIGNATURE, EXPIRED
        """
        if not token or not isinstance(token, str):
            return _failure(TokenFailure.MALFORMED)

        try:
            header = jwt.get_unverified_header(token)
            jwt.get_unverified_claims(token)
        except JWTError:
            return _failure(TokenFailure.MALFORMED)

        if header.get("alg") != self._algorithm:
            return _failure(TokenFailure.MALFORMED)

        try:
            # Expiry is checked below so that exp == now counts as expired
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"verify_exp": False},
            )
        except JWTClaimsError:
            return _failure(TokenFailure.MALFORMED)
        except JWTError:
            return _failure(TokenFailure.BAD_SIGNATURE)

        identity = claims.get("user_id")
        expires_at = claims.get("exp")
        if not isinstance(identity, str) or not identity:
            return _failure(TokenFailure.MALFORMED)
        if isinstance(expires_at, bool) or not isinstance(expires_at, (int, float)):
            return _failure(TokenFailure.MALFORMED)

        if datetime.now(UTC).timestamp() >= expires_at:
            return _failure(TokenFailure.EXPIRED)

        return Return.ok(identity)
