"""
Pydantic schema for orders
"""
import time
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


def now_millis() -> int:
    return int(time.time() * 1000)


class OrderStatus(str, Enum):
    PENDING = "Pendiente"
    SHIPPED = "Enviado"
    DELIVERED = "Entregado"


class Order(BaseModel):
    """Order of one product by one user"""
    id: int = Field(0, description="Identity key, 0 assigns a new one")
    user_id: int
    product_id: int
    quantity: int
    total: int = Field(..., description="Price times quantity when the order was placed")
    status: OrderStatus = OrderStatus.PENDING
    created_at: int = Field(default_factory=now_millis, description="Epoch milliseconds")

    model_config = ConfigDict(from_attributes=True, frozen=True)
