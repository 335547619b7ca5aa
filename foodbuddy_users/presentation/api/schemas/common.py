from typing import Annotated

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, BaseModel

# Largest phone number the users table stores; SQLite INTEGER is 64-bit.
MAX_PHONE_NUMBER = 999_999_999_999_999


def _check_email(value: str) -> str:
    # Validate only; the address is stored exactly as submitted.
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as exc:
        raise ValueError(str(exc)) from exc
    return value


SubmittedEmail = Annotated[str, AfterValidator(_check_email)]


class OperationResponse(BaseModel):
    """Envelope shared by every successful response."""

    success: bool = True
    message: str


class ErrorResponse(BaseModel):
    """Envelope returned for every failed operation."""

    success: bool = False
    message: str
    error: str
