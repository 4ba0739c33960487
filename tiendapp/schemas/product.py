"""
Pydantic schemas for products and bundled catalog entries
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from tiendapp.config import settings


def _truncate(value):
    """Accept integer or decimal numbers, dropping any fraction"""
    if isinstance(value, bool):
        raise ValueError("boolean is not a number")
    if isinstance(value, float):
        return int(value)
    if isinstance(value, str):
        return int(float(value))
    return value


class Product(BaseModel):
    """Catalog product"""
    id: int = Field(0, description="Identity key, 0 assigns a new one")
    name: str
    description: str = ""
    price: int
    image_url: Optional[str] = None
    stock: int = 0

    model_config = ConfigDict(from_attributes=True, frozen=True)


class ProductDescriptor(BaseModel):
    """One entry of the bundled products.json asset"""
    name: str = Field(..., alias="nombre")
    description: str = Field("", alias="descripcion")
    price: int = Field(0, alias="precio")
    stock: int = Field(default_factory=lambda: settings.DEFAULT_STOCK, alias="stock")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("price", "stock", mode="before")
    @classmethod
    def truncate_number(cls, value, info):
        if value is None and info.field_name == "stock":
            return settings.DEFAULT_STOCK
        return _truncate(value)
