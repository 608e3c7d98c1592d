"""
Pydantic schemas for order request/response validation
"""
from pydantic import AliasChoices, BaseModel, Field, ConfigDict
from typing import List, Optional
from datetime import datetime

from storefront.schemas.address import AddressResponse
from storefront.schemas.product import ProductSummary
from storefront.schemas.user import UserSummary


class OrderItemCreate(BaseModel):
    """Requested line item; quantity is checked by the order service"""
    product: int = Field(..., description="Product ID")
    quantity: int = Field(..., description="Quantity to order")


class OrderCreate(BaseModel):
    """
    Schema for creating a new order
    
    Fields are optional here so the order service can report missing
    values in a fixed order.
    """
    products: Optional[List[OrderItemCreate]] = Field(None, description="Line items")
    shipping_address: Optional[int] = Field(None, description="Shipping address ID")
    payment_method: Optional[str] = Field(None, description="Payment method")


class OrderStatusUpdate(BaseModel):
    """Schema for updating order status"""
    status: Optional[str] = Field(None, description="Order status")


class OrderLineResponse(BaseModel):
    """Line item with the catalog product expanded"""
    product_id: int
    product: Optional[ProductSummary]
    quantity: int
    price: float = Field(..., description="Unit price at the time of order")
    
    model_config = ConfigDict(from_attributes=True)


class OrderBase(BaseModel):
    """Fields shared by order responses"""
    id: int
    order_id: str
    products: List[OrderLineResponse] = Field(validation_alias=AliasChoices("products", "items"))
    total_amount: float
    status: str
    shipping_address: Optional[AddressResponse]
    payment_method: str
    payment_status: str
    created_at: datetime
    updated_at: datetime
    
    model_config = ConfigDict(from_attributes=True)


class OrderResponse(OrderBase):
    """Schema for a single order with the user expanded"""
    user: UserSummary


class OrderSummaryResponse(OrderBase):
    """Schema for an order in the current user's order list"""
    user_id: int


class OrderListResponse(BaseModel):
    """Schema for list of orders response"""
    orders: list[OrderSummaryResponse]
    count: int


class OrderEvent(BaseModel):
    """Envelope for events published to the message broker"""
    event_type: str
    event_id: str
    event_version: str = "1.0"
    timestamp: str
    source: str
    data: dict
