"""
Order view-state
"""
import asyncio
import logging
from typing import List, Optional

from tiendapp.reactive import LiveQuery, Observable, Subscription
from tiendapp.repositories.order_repository import OrderRepository
from tiendapp.schemas.order import Order, OrderStatus
from tiendapp.schemas.product import Product
from tiendapp.schemas.user import User
from tiendapp.viewstate.base import ViewState

logger = logging.getLogger(__name__)


class OrderViewState(ViewState):
    """
    Two independently observed order lists

    ``all_orders`` follows the whole table. ``user_orders`` stays empty until
    load_orders_by_user() is called and then follows that user's orders; it
    does not react to logins on its own.
    """

    def __init__(self, repository: OrderRepository):
        super().__init__()
        self.repository = repository
        self.all_orders: Observable[List[Order]] = self.collect(repository.all_orders)
        self.user_orders: Observable[List[Order]] = Observable([])
        self.loaded_user_id: Optional[int] = None
        self.user_query: Optional[LiveQuery[Order]] = None
        self._user_subscription: Optional[Subscription] = None

    def load_orders_by_user(self, user_id: int) -> None:
        if self._user_subscription is not None:
            self._user_subscription.cancel()
        self.loaded_user_id = user_id
        self.user_query = self.repository.get_orders_by_user(user_id)
        self._user_subscription = self.user_query.subscribe(self._set_user_orders)

    def _set_user_orders(self, orders: List[Order]) -> None:
        self.user_orders.value = orders

    def place_order(self, user: Optional[User], product: Product, quantity: int = 1) -> Optional[asyncio.Task]:
        """
        Order quantity units of product for user

        The total is fixed here from the current price. Stock is only
        checked, never decremented.
        """
        if user is None:
            self.message.value = "Debe iniciar sesión para realizar un pedido"
            return None
        if product.stock <= 0:
            self.message.value = "Producto sin stock"
            return None
        if quantity < 1:
            self.message.value = "Cantidad inválida"
            return None

        order = Order(
            user_id=user.id,
            product_id=product.id,
            quantity=quantity,
            total=product.price * quantity
        )
        return self.insert_order(order)

    def insert_order(self, order: Order) -> asyncio.Task:
        return self.launch(self._insert(order))

    async def _insert(self, order: Order) -> int:
        order_id = await self.repository.insert_order(order)
        self.message.value = "Pedido registrado correctamente"
        logger.info("Order %s placed by user %s", order_id, order.user_id)
        return order_id

    def update_order(self, order: Order) -> asyncio.Task:
        return self.launch(self._update(order))

    async def _update(self, order: Order) -> bool:
        updated = await self.repository.update_order(order)
        self.message.value = "Pedido actualizado correctamente"
        return updated

    def update_status(self, order: Order, status: OrderStatus) -> Optional[asyncio.Task]:
        try:
            status = OrderStatus(status)
        except ValueError:
            self.message.value = "Estado de pedido inválido"
            return None
        return self.launch(self._update_status(order.id, status))

    async def _update_status(self, order_id: int, status: OrderStatus) -> bool:
        updated = await self.repository.update_status(order_id, status)
        self.message.value = "Pedido actualizado correctamente"
        return updated

    def delete_order(self, order: Order) -> asyncio.Task:
        return self.launch(self._delete(order))

    async def _delete(self, order: Order) -> bool:
        deleted = await self.repository.delete_order(order)
        self.message.value = "Pedido eliminado correctamente"
        return deleted

    def close(self) -> None:
        if self._user_subscription is not None:
            self._user_subscription.cancel()
            self._user_subscription = None
        super().close()
