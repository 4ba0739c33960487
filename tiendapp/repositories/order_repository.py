"""
Order Repository
"""
from typing import Optional

from tiendapp.dao.order_dao import OrderDao
from tiendapp.reactive import LiveQuery
from tiendapp.schemas.order import Order, OrderStatus


class OrderRepository:
    """Pass-through to the order access object"""

    def __init__(self, dao: OrderDao):
        self.dao = dao
        self.all_orders: LiveQuery[Order] = dao.get_all()

    def get_orders_by_user(self, user_id: int) -> LiveQuery[Order]:
        return self.dao.get_by_user(user_id)

    async def insert_order(self, order: Order) -> int:
        return await self.dao.insert(order)

    async def update_order(self, order: Order) -> bool:
        return await self.dao.update(order)

    async def update_status(self, order_id: int, status: OrderStatus) -> bool:
        return await self.dao.update_status(order_id, status)

    async def delete_order(self, order: Order) -> bool:
        return await self.dao.delete(order)

    async def get_order_by_id(self, order_id: int) -> Optional[Order]:
        return await self.dao.get_by_id(order_id)

    async def count_orders(self) -> int:
        return await self.dao.count()

    async def clear_all_orders(self) -> None:
        await self.dao.delete_all()
