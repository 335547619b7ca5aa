"""Error taxonomy shared by every account operation.

Services raise these and never recover locally; the HTTP layer turns them
into the ``success: false`` envelope.
"""

from __future__ import annotations


class AccountError(Exception):
    """Base class for every failure surfaced to callers."""

    code = "account_error"
    default_message = "Account operation failed."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)


class DuplicateEmail(AccountError):
    code = "duplicate_email"
    default_message = "Email already registered."


class UserNotFound(AccountError):
    code = "user_not_found"
    default_message = "User not found."


class InvalidPassword(AccountError):
    code = "invalid_password"
    default_message = "Invalid password."


class InvalidCode(AccountError):
    code = "invalid_code"
    default_message = "Invalid verification code."


class InvalidOrExpiredToken(AccountError):
    code = "invalid_or_expired_token"
    default_message = "Invalid or expired token."


class UserNotVerified(AccountError):
    code = "user_not_verified"
    default_message = "Email not verified. Please verify your email first."


class UserBanned(AccountError):
    code = "user_banned"
    default_message = "User is banned."


class AddressNotFoundOrNotOwned(AccountError):
    code = "address_not_found"
    default_message = "Address not found or does not belong to user."


class ValidationFailure(AccountError):
    code = "validation_failure"
    default_message = "Request validation failed."


class StorageFailure(AccountError):
    code = "storage_failure"
    default_message = "Storage operation failed."


class ConfigurationError(AccountError):
    code = "configuration_error"
    default_message = "Service is not configured correctly."
