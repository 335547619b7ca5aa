from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from ...domain.errors import (
    DuplicateEmail,
    InvalidCode,
    InvalidPassword,
    UserNotFound,
    ValidationFailure,
)
from ...domain.identifiers import new_identifier
from ...domain.models import User
from ...domain.ports.persistence import PersistenceGateway
from ...services.email_service import EmailService
from ...services.password_hasher import PasswordHasher
from ...services.token_service import TokenService
from ...services.verification_codes import VerificationCodeGenerator
from .account_gate import is_banned, require_verified

logger = logging.getLogger(__name__)

ROLE_USER = "user"


@dataclass(slots=True)
class ProfileUpdate:
    """Partial profile update; ``None`` means the field was not supplied."""

    name: Optional[str] = None
    phone_number: Optional[int] = None

    def to_fields(self) -> Dict[str, Any]:
        fields: Dict[str, Any] = {}
        if self.name is not None:
            fields["name"] = self.name
        if self.phone_number is not None:
            fields["phone_number"] = self.phone_number
        return fields


@dataclass(slots=True)
class LoginResult:
    user: User
    access_token: str
    token_type: str = "bearer"


class AccountService:
    """Orchestrates the account lifecycle: signup, verification, login, profile and bans."""

    def __init__(
        self,
        persistence: PersistenceGateway,
        password_hasher: PasswordHasher,
        token_service: TokenService,
        code_generator: VerificationCodeGenerator,
        email_service: Optional[EmailService] = None,
    ) -> None:
        self._persistence = persistence
        self._hasher = password_hasher
        self._tokens = token_service
        self._codes = code_generator
        self._email = email_service

    # Registration -----------------------------------------------------------
    def signup(self, email: str, password: str, name: str = "", phone_number: int = 0) -> User:
        if not email:
            raise ValidationFailure("Email is required.")
        if not password:
            raise ValidationFailure("Password is required.")
        if self._persistence.get_user_by_email(email):
            raise DuplicateEmail()

        code = self._codes.generate()
        user = User(
            id=new_identifier("usr"),
            email=email,
            password_hash=self._hasher.hash(password),
            name=name,
            phone_number=phone_number,
            reputation=0,
            verification_code=code,
            is_verified=False,
            is_banned=False,
        )
        created = self._persistence.create_user(user)
        logger.info("Registered user %s", created.id)
        self._deliver_code(created.email, code)
        return created

    def verify_email(self, email: str, code: str) -> User:
        user = self._persistence.get_user_by_email(email)
        if not user:
            raise UserNotFound()
        if not self._codes.matches(user.verification_code, code):
            raise InvalidCode()

        # Zero rows means the code was consumed or replaced since it was read.
        if self._persistence.consume_verification_code(user.id, user.verification_code) == 0:
            raise InvalidCode()
        logger.info("Verified email for user %s", user.id)
        return self._get_user(user.id)

    def resend_verification_code(self, email: str) -> None:
        user = self._persistence.get_user_by_email(email)
        if not user:
            raise UserNotFound()
        if user.is_verified:
            raise ValidationFailure("Email already verified.")

        code = self._codes.generate()
        if self._persistence.set_verification_code(user.id, code) == 0:
            raise UserNotFound()
        self._deliver_code(user.email, code)

    # Authentication ---------------------------------------------------------
    def login(self, email: str, password: str) -> LoginResult:
        """Check credentials and issue a bearer token.

        Login is deliberately not gated on verification or ban state; only the
        token-based profile lookup enforces the verification gate.
        """
        user = self._persistence.get_user_by_email(email)
        if not user:
            raise UserNotFound()
        if not self._hasher.verify(password, user.password_hash):
            raise InvalidPassword()

        token = self._tokens.issue_token(user.id, user.email, ROLE_USER, user.reputation)
        return LoginResult(user=user, access_token=token)

    # Profile ----------------------------------------------------------------
    def get_profile(self, user_id: str) -> User:
        _require_id(user_id)
        return self._get_user(user_id)

    def get_profile_by_token(self, token: str) -> User:
        claims = self._tokens.validate_token(token)
        user = self._get_user(claims.user_id)
        return require_verified(user)

    def update_profile(self, user_id: str, update: ProfileUpdate) -> User:
        _require_id(user_id)
        if self._persistence.update_user_fields(user_id, update.to_fields()) == 0:
            raise UserNotFound()
        return self._get_user(user_id)

    def list_users(self) -> List[User]:
        return self._persistence.list_users()

    # Moderation -------------------------------------------------------------
    def check_ban(self, user_id: str) -> bool:
        _require_id(user_id)
        return is_banned(self._get_user(user_id))

    def ban_user(self, user_id: str) -> None:
        self._set_banned(user_id, True)

    def unban_user(self, user_id: str) -> None:
        self._set_banned(user_id, False)

    def _set_banned(self, user_id: str, banned: bool) -> None:
        _require_id(user_id)
        user = self._get_user(user_id)
        if user.is_banned == banned:
            logger.debug("User %s already has is_banned=%s", user_id, banned)
            return
        if self._persistence.set_banned(user_id, banned) == 0:
            raise UserNotFound()
        logger.info("%s user %s", "Banned" if banned else "Unbanned", user_id)

    # Helpers ----------------------------------------------------------------
    def _get_user(self, user_id: str) -> User:
        user = self._persistence.get_user_by_id(user_id)
        if not user:
            raise UserNotFound()
        return user

    def _deliver_code(self, email: str, code: str) -> None:
        if self._email is None:
            return
        if not self._email.send_verification_code(email, code):
            logger.warning("Verification code could not be mailed to %s", email)


def _require_id(user_id: str) -> None:
    if not user_id or not user_id.strip():
        raise ValidationFailure("User ID is required.")
