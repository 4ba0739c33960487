"""
Repositories package
"""
from tiendapp.repositories.contact_repository import ContactRepository
from tiendapp.repositories.order_repository import OrderRepository
from tiendapp.repositories.product_repository import ProductRepository
from tiendapp.repositories.user_repository import UserRepository

__all__ = [
    "ContactRepository",
    "OrderRepository",
    "ProductRepository",
    "UserRepository"
]
