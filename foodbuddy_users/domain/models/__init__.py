"""Domain models for the FoodBuddy user service."""

from .address import Address
from .session import SessionClaims
from .user import User

__all__ = [
    "Address",
    "SessionClaims",
    "User",
]
