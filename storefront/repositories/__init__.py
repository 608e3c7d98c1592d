"""
Repositories package
"""
from storefront.repositories.address_repository import AddressRepository
from storefront.repositories.order_repository import OrderRepository
from storefront.repositories.product_repository import ProductRepository
from storefront.repositories.user_repository import UserRepository

__all__ = ["AddressRepository", "OrderRepository", "ProductRepository", "UserRepository"]
