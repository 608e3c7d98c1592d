"""
Address API endpoints
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from storefront.api.deps import get_current_user
from storefront.database import get_db
from storefront.models.user import User
from storefront.services.address_service import AddressService
from storefront.schemas.address import (
    AddressCreate,
    AddressUpdate,
    AddressResponse,
    AddressListResponse,
    MessageResponse
)

router = APIRouter(prefix="/addresses", tags=["addresses"])


def get_address_service(db: Session = Depends(get_db)) -> AddressService:
    """Dependency to get AddressService instance"""
    return AddressService(db)


@router.get("", response_model=AddressListResponse, summary="Get my addresses")
def get_addresses(
    user: User = Depends(get_current_user),
    service: AddressService = Depends(get_address_service)
):
    """Addresses of the current user, default first, then newest first"""
    return service.get_addresses(user)


@router.get("/{address_id}", response_model=AddressResponse, summary="Get address by ID")
def get_address(
    address_id: int,
    user: User = Depends(get_current_user),
    service: AddressService = Depends(get_address_service)
):
    return service.get_address(address_id, user)


@router.post("", response_model=AddressResponse, status_code=status.HTTP_201_CREATED, summary="Create address")
def create_address(
    data: AddressCreate,
    user: User = Depends(get_current_user),
    service: AddressService = Depends(get_address_service)
):
    """
    Create a new address
    
    With **default_address** set, the user's previous default is cleared.
    """
    return service.create_address(data, user)


@router.put("/{address_id}", response_model=AddressResponse, summary="Update address")
def update_address(
    address_id: int,
    data: AddressUpdate,
    user: User = Depends(get_current_user),
    service: AddressService = Depends(get_address_service)
):
    return service.update_address(address_id, data, user)


@router.delete("/{address_id}", response_model=MessageResponse, summary="Delete address")
def delete_address(
    address_id: int,
    user: User = Depends(get_current_user),
    service: AddressService = Depends(get_address_service)
):
    """
    Delete an address
    
    Deleting the default promotes the most recent remaining address.
    """
    service.delete_address(address_id, user)
    return MessageResponse(message="Address deleted successfully")
