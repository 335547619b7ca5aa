from __future__ import annotations

import logging
from typing import List

from ...domain.errors import AddressNotFoundOrNotOwned, UserNotFound, ValidationFailure
from ...domain.models import Address
from ...domain.ports.persistence import PersistenceGateway

logger = logging.getLogger(__name__)


class AddressService:
    """Address book operations, every mutation scoped by (address ID, owning user ID)."""

    def __init__(self, persistence: PersistenceGateway) -> None:
        self._persistence = persistence

    def add_address(
        self,
        user_id: str,
        *,
        street_name: str,
        locality: str,
        state: str,
        pincode: str,
    ) -> Address:
        _require_id(user_id, "User ID")
        if not self._persistence.get_user_by_id(user_id):
            raise UserNotFound()
        address = self._persistence.insert_address(
            user_id,
            street_name=street_name,
            locality=locality,
            state=state,
            pincode=pincode,
        )
        logger.info("Added address %s for user %s", address.id, user_id)
        return address

    def get_addresses(self, user_id: str) -> List[Address]:
        _require_id(user_id, "User ID")
        return self._persistence.list_addresses(user_id)

    def edit_address(
        self,
        user_id: str,
        address_id: str,
        *,
        street_name: str,
        locality: str,
        state: str,
        pincode: str,
    ) -> None:
        _require_id(user_id, "User ID")
        _require_id(address_id, "Address ID")
        affected = self._persistence.update_address_scoped(
            user_id,
            address_id,
            {
                "street_name": street_name,
                "locality": locality,
                "state": state,
                "pincode": pincode,
            },
        )
        # A foreign address and a missing one are indistinguishable to the caller.
        if affected == 0:
            raise AddressNotFoundOrNotOwned()

    def delete_address(self, user_id: str, address_id: str) -> None:
        _require_id(user_id, "User ID")
        _require_id(address_id, "Address ID")
        if self._persistence.delete_address_scoped(user_id, address_id) == 0:
            raise AddressNotFoundOrNotOwned()
        logger.info("Deleted address %s for user %s", address_id, user_id)


def _require_id(value: str, label: str) -> None:
    if not value or not value.strip():
        raise ValidationFailure(f"{label} is required.")
