"""
SQLAlchemy table models
"""
from tiendapp.models.contact import ContactRow
from tiendapp.models.order import OrderRow
from tiendapp.models.product import ProductRow
from tiendapp.models.user import UserRow

__all__ = [
    "ContactRow",
    "OrderRow",
    "ProductRow",
    "UserRow"
]
