"""
Pydantic schemas for address request/response validation
"""
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional
from datetime import datetime


class AddressBase(BaseModel):
    """Base Address schema"""
    country_region: str = Field(..., min_length=1, max_length=100)
    first_name: str = Field(..., min_length=1, max_length=50)
    last_name: str = Field(..., min_length=1, max_length=50)
    address: str = Field(..., min_length=1, max_length=255)
    apartment_suite: Optional[str] = Field(None, max_length=255)
    city: str = Field(..., min_length=1, max_length=100)
    state: str = Field(..., min_length=1, max_length=100)
    pin_code: str = Field(..., min_length=1, max_length=20)
    phone: str = Field(..., min_length=1, max_length=30)


class AddressCreate(AddressBase):
    """Schema for creating a new address"""
    default_address: bool = False


class AddressUpdate(BaseModel):
    """Schema for updating an address (all fields optional)"""
    country_region: Optional[str] = Field(None, min_length=1, max_length=100)
    first_name: Optional[str] = Field(None, min_length=1, max_length=50)
    last_name: Optional[str] = Field(None, min_length=1, max_length=50)
    address: Optional[str] = Field(None, min_length=1, max_length=255)
    apartment_suite: Optional[str] = Field(None, max_length=255)
    city: Optional[str] = Field(None, min_length=1, max_length=100)
    state: Optional[str] = Field(None, min_length=1, max_length=100)
    pin_code: Optional[str] = Field(None, min_length=1, max_length=20)
    phone: Optional[str] = Field(None, min_length=1, max_length=30)
    default_address: Optional[bool] = None


class AddressResponse(AddressBase):
    """Schema for address response"""
    id: int
    user_id: int
    default_address: bool
    created_at: datetime
    updated_at: datetime
    
    model_config = ConfigDict(from_attributes=True)


class AddressListResponse(BaseModel):
    """Schema for list of addresses response"""
    addresses: list[AddressResponse]
    count: int


class MessageResponse(BaseModel):
    message: str
