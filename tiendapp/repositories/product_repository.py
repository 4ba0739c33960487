"""
Product Repository
"""
from typing import List, Optional, Sequence

from tiendapp.dao.product_dao import ProductDao
from tiendapp.reactive import LiveQuery
from tiendapp.schemas.product import Product


class ProductRepository:
    """Pass-through to the product access object"""

    def __init__(self, dao: ProductDao):
        self.dao = dao
        self.all_products: LiveQuery[Product] = dao.get_all()

    async def insert_product(self, product: Product) -> int:
        return await self.dao.insert(product)

    async def insert_all(self, products: Sequence[Product]) -> List[int]:
        return await self.dao.insert_all(products)

    async def update_product(self, product: Product) -> bool:
        return await self.dao.update(product)

    async def delete_product(self, product: Product) -> bool:
        return await self.dao.delete(product)

    async def get_product_by_id(self, product_id: int) -> Optional[Product]:
        return await self.dao.get_by_id(product_id)

    async def clear_all_products(self) -> None:
        await self.dao.delete_all()

    async def count_products(self) -> int:
        return await self.dao.count()
