"""
Schemas package
"""
from tiendapp.schemas.contact import Contact, Region
from tiendapp.schemas.order import Order, OrderStatus
from tiendapp.schemas.product import Product, ProductDescriptor
from tiendapp.schemas.user import User

__all__ = [
    "Contact",
    "Region",
    "Order",
    "OrderStatus",
    "Product",
    "ProductDescriptor",
    "User"
]
