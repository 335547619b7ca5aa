from __future__ import annotations

from typing import Any, Dict, List, Optional, Protocol

from ..models import Address, User


class UserRepository(Protocol):
    """Persistence functions related to user accounts.

    Mutators return the number of rows affected; zero means the user does not
    exist and it is up to the caller to surface that.
    """

    def create_user(self, user: User) -> User:
        ...

    def get_user_by_email(self, email: str) -> Optional[User]:
        ...

    def get_user_by_id(self, user_id: str) -> Optional[User]:
        ...

    def update_user_fields(self, user_id: str, fields: Dict[str, Any]) -> int:
        ...

    def set_verified(self, user_id: str, is_verified: bool) -> int:
        ...

    def set_banned(self, user_id: str, is_banned: bool) -> int:
        ...

    def set_verification_code(self, user_id: str, code: Optional[str]) -> int:
        ...

    def consume_verification_code(self, user_id: str, code: str) -> int:
        """Mark the user verified and clear the code, only if ``code`` is still the stored one."""
        ...

    def list_users(self) -> List[User]:
        ...


class AddressRepository(Protocol):
    """Persistence functions for the address book, scoped by owning user."""

    def insert_address(
        self,
        user_id: str,
        street_name: str,
        locality: str,
        state: str,
        pincode: str,
    ) -> Address:
        ...

    def list_addresses(self, user_id: str) -> List[Address]:
        ...

    def update_address_scoped(self, user_id: str, address_id: str, fields: Dict[str, Any]) -> int:
        ...

    def delete_address_scoped(self, user_id: str, address_id: str) -> int:
        ...


class PersistenceGateway(
    UserRepository,
    AddressRepository,
    Protocol,
):
    """Composite gateway combining every persistence concern used by the app."""

    def close(self) -> None:
        ...
