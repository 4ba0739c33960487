"""
Order access object
"""
import asyncio
from typing import Any, Sequence

from sqlalchemy import desc

from tiendapp.dao.base import BaseDao
from tiendapp.models.order import OrderRow
from tiendapp.reactive import LiveQuery
from tiendapp.schemas.order import Order, OrderStatus


class OrderDao(BaseDao[OrderRow, Order]):
    """CRUD for orders, most recent first"""

    row_type = OrderRow
    entity_type = Order

    def ordering(self) -> Sequence[Any]:
        return (desc(OrderRow.created_at), desc(OrderRow.id))

    def get_by_user(self, user_id: int) -> LiveQuery[Order]:
        """Reactive list of the orders owned by user_id"""
        return self.live(OrderRow.user_id == user_id)

    async def update_status(self, order_id: int, status: OrderStatus) -> bool:
        """Set the status of one order; False when no such order"""
        updated = await asyncio.to_thread(self._update_status_sync, order_id, OrderStatus(status))
        if updated:
            self._changed()
        return updated

    def _update_status_sync(self, order_id: int, status: OrderStatus) -> bool:
        with self.store.session() as db:
            row = db.get(OrderRow, order_id)
            if row is None:
                return False
            row.status = status.value
            db.commit()
            return True
