"""API router for a user's address book."""

from fastapi import APIRouter, Depends, status

from ....application.services.address_service import AddressService
from ....core.dependencies import get_address_service
from ..schemas.address_schemas import (
    AddAddressResponse,
    AddressPayload,
    AddressResponse,
    GetAddressesResponse,
)
from ..schemas.common import OperationResponse

router = APIRouter(prefix="/api/users/{user_id}/addresses", tags=["addresses"])


@router.post("", response_model=AddAddressResponse, status_code=status.HTTP_201_CREATED)
def add_address(
    user_id: str,
    payload: AddressPayload,
    address_service: AddressService = Depends(get_address_service),
) -> AddAddressResponse:
    address = address_service.add_address(user_id, **payload.model_dump())
    return AddAddressResponse(message="Address added successfully", address_id=address.id)


@router.get("", response_model=GetAddressesResponse)
def get_addresses(
    user_id: str,
    address_service: AddressService = Depends(get_address_service),
) -> GetAddressesResponse:
    addresses = address_service.get_addresses(user_id)
    return GetAddressesResponse(
        message="Addresses retrieved successfully",
        addresses=[
            AddressResponse(
                address_id=address.id,
                street_name=address.street_name,
                locality=address.locality,
                state=address.state,
                pincode=address.pincode,
            )
            for address in addresses
        ],
    )


@router.put("/{address_id}", response_model=OperationResponse)
def edit_address(
    user_id: str,
    address_id: str,
    payload: AddressPayload,
    address_service: AddressService = Depends(get_address_service),
) -> OperationResponse:
    address_service.edit_address(user_id, address_id, **payload.model_dump())
    return OperationResponse(message="Address edited successfully")


@router.delete("/{address_id}", response_model=OperationResponse)
def delete_address(
    user_id: str,
    address_id: str,
    address_service: AddressService = Depends(get_address_service),
) -> OperationResponse:
    address_service.delete_address(user_id, address_id)
    return OperationResponse(message="Address deleted successfully")
