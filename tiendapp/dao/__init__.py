"""
Access objects, one per table
"""
from tiendapp.dao.base import BaseDao
from tiendapp.dao.contact_dao import ContactDao
from tiendapp.dao.order_dao import OrderDao
from tiendapp.dao.product_dao import ProductDao
from tiendapp.dao.user_dao import UserDao

__all__ = [
    "BaseDao",
    "ContactDao",
    "OrderDao",
    "ProductDao",
    "UserDao"
]
