"""Issuing and validation of signed session tokens."""

import logging
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

import jwt

from foodbuddy_users.domain.errors import ConfigurationError, InvalidOrExpiredToken
from foodbuddy_users.domain.models import SessionClaims

logger = logging.getLogger(__name__)

_REQUIRED_CLAIMS = ("userId", "email", "role", "reputation")


class TokenService:
    """Issues and validates HS256 JWT bearer tokens carrying identity claims."""

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        expiration_hours: int = 24,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        if not secret_key:
            logger.error("JWT secret is empty; token issuance and validation will be refused.")
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._expiration = timedelta(hours=expiration_hours)
        self._clock = clock or (lambda: datetime.now(tz=timezone.utc))

    def issue_token(self, user_id: str, email: str, role: str, reputation: int) -> str:
        """
        Create a signed token for a user.

        Args:
            user_id: User ID
            email: User email
            role: Role claim
            reputation: Reputation snapshot at issuance

        Returns:
            JWT token string expiring ``expiration_hours`` after issuance

        Raises:
            ConfigurationError: If no signing secret is configured
        """
        if not self._secret_key:
            raise ConfigurationError("Token signing secret is not configured.")
        issued_at = self._clock()
        payload = {
            "userId": user_id,
            "email": email,
            "role": role,
            "reputation": reputation,
            "iat": issued_at,
            "exp": issued_at + self._expiration,
        }
        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)

    def validate_token(self, token: str) -> SessionClaims:
        """
        Verify signature, expiry and claim shape of a token.

        Raises:
            InvalidOrExpiredToken: On any signature, format, expiry or claim mismatch
        """
        if not self._secret_key or not token:
            raise InvalidOrExpiredToken()
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require": ["exp", "iat"]},
            )
        except jwt.InvalidTokenError as exc:
            raise InvalidOrExpiredToken() from exc

        if any(claim not in payload for claim in _REQUIRED_CLAIMS):
            raise InvalidOrExpiredToken()
        user_id, email, role, reputation = (payload[claim] for claim in _REQUIRED_CLAIMS)
        if not isinstance(user_id, str) or not user_id:
            raise InvalidOrExpiredToken()
        if not isinstance(email, str) or not isinstance(role, str):
            raise InvalidOrExpiredToken()
        if isinstance(reputation, bool) or not isinstance(reputation, int):
            raise InvalidOrExpiredToken()

        return SessionClaims(
            user_id=user_id,
            email=email,
            role=role,
            reputation=reputation,
            issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
            expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
        )
