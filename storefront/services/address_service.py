"""
Address Service - Business Logic Layer
"""
import logging
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from storefront.models.address import Address
from storefront.models.user import User
from storefront.repositories.address_repository import AddressRepository
from storefront.schemas.address import (
    AddressCreate,
    AddressUpdate,
    AddressResponse,
    AddressListResponse
)
from storefront.services.errors import BadRequestError, NotFoundError

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = (
    "country_region", "first_name", "last_name", "address",
    "city", "state", "pin_code", "phone", "default_address"
)


class AddressService:
    """Service layer for a user's address book"""
    
    def __init__(self, db: Session):
        self.repository = AddressRepository(db)
    
    def _get_or_404(self, address_id: int, user: User) -> Address:
        address = self.repository.get_for_user(address_id, user.id)
        if not address:
            raise NotFoundError("Address not found")
        return address
    
    def get_addresses(self, user: User) -> AddressListResponse:
        """Get the user's addresses, default first"""
        addresses = self.repository.get_all_for_user(user.id)
        return AddressListResponse(
            addresses=[AddressResponse.model_validate(a) for a in addresses],
            count=len(addresses)
        )
    
    def get_address(self, address_id: int, user: User) -> AddressResponse:
        """Get one of the user's addresses"""
        return AddressResponse.model_validate(self._get_or_404(address_id, user))
    
    def create_address(self, data: AddressCreate, user: User) -> AddressResponse:
        """Create an address; a new default replaces the user's previous one"""
        try:
            address = self.repository.create(user.id, data.model_dump())
        except SQLAlchemyError as e:
            logger.error("Error creating address for user %s: %s", user.id, e)
            raise BadRequestError("Could not save address")
        
        logger.info("Address %s created for user %s (default=%s)", address.id, user.id, address.default_address)
        return AddressResponse.model_validate(address)
    
    def update_address(self, address_id: int, data: AddressUpdate, user: User) -> AddressResponse:
        """Update an address; becoming default clears the user's other defaults"""
        address = self._get_or_404(address_id, user)
        update_data = {
            field: value
            for field, value in data.model_dump(exclude_unset=True).items()
            if value is not None or field not in REQUIRED_FIELDS
        }
        
        try:
            address = self.repository.update(address, update_data)
        except SQLAlchemyError as e:
            logger.error("Error updating address %s: %s", address_id, e)
            raise BadRequestError("Could not save address")
        return AddressResponse.model_validate(address)
    
    def delete_address(self, address_id: int, user: User) -> None:
        """Delete an address, promoting another one if it was the default"""
        address = self._get_or_404(address_id, user)
        try:
            promoted = self.repository.delete(address)
        except SQLAlchemyError as e:
            logger.error("Error deleting address %s: %s", address_id, e)
            raise BadRequestError("Could not delete address")
        
        if promoted:
            logger.info("Address %s promoted to default for user %s", promoted.id, user.id)
