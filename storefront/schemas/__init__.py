"""
Schemas package
"""
from storefront.schemas.address import (
    AddressCreate,
    AddressUpdate,
    AddressResponse,
    AddressListResponse,
    MessageResponse
)
from storefront.schemas.order import (
    OrderItemCreate,
    OrderCreate,
    OrderStatusUpdate,
    OrderResponse,
    OrderSummaryResponse,
    OrderListResponse,
    OrderEvent
)
from storefront.schemas.product import (
    ProductImage,
    ProductCreate,
    ProductUpdate,
    ProductResponse,
    ProductSummary,
    ProductListResponse,
    ExploreResponse
)
from storefront.schemas.user import (
    RegisterRequest,
    LoginRequest,
    ProfileUpdate,
    UserCreate,
    UserUpdate,
    UserResponse,
    UserSummary,
    UserListResponse,
    AuthResponse
)

__all__ = [
    "AddressCreate",
    "AddressUpdate",
    "AddressResponse",
    "AddressListResponse",
    "MessageResponse",
    "OrderItemCreate",
    "OrderCreate",
    "OrderStatusUpdate",
    "OrderResponse",
    "OrderSummaryResponse",
    "OrderListResponse",
    "OrderEvent",
    "ProductImage",
    "ProductCreate",
    "ProductUpdate",
    "ProductResponse",
    "ProductSummary",
    "ProductListResponse",
    "ExploreResponse",
    "RegisterRequest",
    "LoginRequest",
    "ProfileUpdate",
    "UserCreate",
    "UserUpdate",
    "UserResponse",
    "UserSummary",
    "UserListResponse",
    "AuthResponse"
]
