"""
SQLAlchemy models package
"""
from storefront.models.user import User
from storefront.models.product import Product
from storefront.models.address import Address
from storefront.models.order import Order, OrderItem

__all__ = ["User", "Product", "Address", "Order", "OrderItem"]
