"""
Storefront API - catalog, address book, orders and authentication
"""
