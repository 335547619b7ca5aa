"""Precondition checks applied before sensitive account operations."""

from __future__ import annotations

from ...domain.errors import UserBanned, UserNotVerified
from ...domain.models import User


def require_verified(user: User) -> User:
    if not user.is_verified:
        raise UserNotVerified()
    return user


def require_not_banned(user: User) -> User:
    if user.is_banned:
        raise UserBanned()
    return user


def is_banned(user: User) -> bool:
    return user.is_banned
