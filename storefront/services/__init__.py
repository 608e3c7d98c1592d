"""
Services package
"""
from storefront.services.address_service import AddressService
from storefront.services.auth_service import AuthService
from storefront.services.order_service import OrderService
from storefront.services.product_service import ProductService
from storefront.services.user_service import UserService

__all__ = ["AddressService", "AuthService", "OrderService", "ProductService", "UserService"]
