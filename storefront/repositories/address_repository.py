"""
Address Repository - Data Access Layer

Writes that touch the default flag of more than one row run inside a single
transaction so a user never ends up with two defaults. Deleted addresses stay
in the table for the orders that shipped to them and are hidden from every
lookup here.
"""
from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy import desc

from storefront.database import transaction
from storefront.models.address import Address


class AddressRepository:
    """Repository for Address CRUD operations"""
    
    def __init__(self, db: Session):
        self.db = db
    
    def _live(self, user_id: int):
        return self.db.query(Address).filter(
            Address.user_id == user_id,
            Address.is_deleted.is_(False)
        )
    
    def get_all_for_user(self, user_id: int) -> List[Address]:
        """Get a user's addresses, default first, then newest first"""
        return self._live(user_id).order_by(
            desc(Address.default_address), desc(Address.created_at), desc(Address.id)
        ).all()
    
    def get_for_user(self, address_id: int, user_id: int) -> Optional[Address]:
        """Get address by ID if it belongs to the user"""
        return self._live(user_id).filter(Address.id == address_id).first()
    
    def count_defaults(self, user_id: int) -> int:
        """Number of addresses flagged as default for a user"""
        return self._live(user_id).filter(Address.default_address.is_(True)).count()
    
    def _clear_defaults(self, user_id: int, exclude_id: Optional[int] = None) -> int:
        query = self._live(user_id).filter(Address.default_address.is_(True))
        if exclude_id is not None:
            query = query.filter(Address.id != exclude_id)
        return query.update({Address.default_address: False}, synchronize_session="fetch")
    
    def create(self, user_id: int, address_data: dict) -> Address:
        """Create new address, clearing the user's previous default if needed"""
        address = Address(user_id=user_id, **address_data)
        with transaction(self.db):
            if address.default_address:
                self._clear_defaults(user_id)
            self.db.add(address)
        self.db.refresh(address)
        return address
    
    def update(self, address: Address, update_data: dict) -> Address:
        """Apply field updates, clearing other defaults if this one becomes default"""
        with transaction(self.db):
            if update_data.get("default_address"):
                self._clear_defaults(address.user_id, exclude_id=address.id)
            for field, value in update_data.items():
                setattr(address, field, value)
        self.db.refresh(address)
        return address
    
    def delete(self, address: Address) -> Optional[Address]:
        """
        Delete an address
        
        The row is flagged as deleted rather than removed. If it was the
        default, the user's most recently created remaining address becomes
        the default.
        
        Returns:
            The promoted address, or None
        """
        promoted = None
        with transaction(self.db):
            was_default = address.default_address
            address.is_deleted = True
            address.default_address = False
            self.db.flush()
            
            if was_default:
                promoted = self._live(address.user_id).order_by(
                    desc(Address.created_at), desc(Address.id)
                ).first()
                if promoted:
                    promoted.default_address = True
        return promoted
