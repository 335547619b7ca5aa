"""Pydantic schemas for the address book endpoints."""

from typing import List

from pydantic import BaseModel, Field

from .common import OperationResponse


class AddressPayload(BaseModel):
    street_name: str
    locality: str
    state: str
    pincode: str = Field(pattern=r"^\d{6}$")


class AddressResponse(AddressPayload):
    address_id: str


class AddAddressResponse(OperationResponse):
    address_id: str


class GetAddressesResponse(OperationResponse):
    addresses: List[AddressResponse]
