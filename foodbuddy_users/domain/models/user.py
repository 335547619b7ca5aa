"""User domain model for account lifecycle management."""

from datetime import datetime, timezone
from typing import Optional


class User:
    """
    User entity representing a FoodBuddy account.

    Attributes:
        id: Opaque unique identifier (``usr_`` prefixed)
        email: User email address (unique, case-sensitive as stored)
        password_hash: bcrypt hash of the password, never the plaintext
        name: Display name
        phone_number: Phone number stored as a non-negative integer
        reputation: Reputation score, mutated by events outside this service
        verification_code: Outstanding email verification code, cleared once consumed
        is_verified: Whether the email has been verified (false -> true only)
        is_banned: Whether the account is banned by an administrator
        created_at: Account creation timestamp
        updated_at: Last update timestamp
    """

    def __init__(
        self,
        id: str,
        email: str,
        password_hash: str,
        name: str = "",
        phone_number: int = 0,
        reputation: int = 0,
        verification_code: Optional[str] = None,
        is_verified: bool = False,
        is_banned: bool = False,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        self.id = id
        self.email = email
        self.password_hash = password_hash
        self.name = name
        self.phone_number = phone_number
        self.reputation = reputation
        self.verification_code = verification_code
        self.is_verified = is_verified
        self.is_banned = is_banned
        self.created_at = created_at or datetime.now(timezone.utc)
        self.updated_at = updated_at or datetime.now(timezone.utc)

    def __repr__(self) -> str:
        return f"<User id={self.id} email={self.email} verified={self.is_verified} banned={self.is_banned}>"
