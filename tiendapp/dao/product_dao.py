"""
Product access object
"""
from tiendapp.dao.base import BaseDao
from tiendapp.models.product import ProductRow
from tiendapp.schemas.product import Product


class ProductDao(BaseDao[ProductRow, Product]):
    """CRUD for catalog products, newest first"""

    row_type = ProductRow
    entity_type = Product
