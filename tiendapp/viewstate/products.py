"""
Product catalog view-state
"""
import asyncio
from typing import Optional

from tiendapp.reactive import LiveQuery, Observable
from tiendapp.repositories.product_repository import ProductRepository
from tiendapp.schemas.product import Product
from tiendapp.services.catalog_seeder import CatalogSeeder
from tiendapp.viewstate.base import ViewState
from tiendapp.viewstate.forms import (
    ProductForm,
    product_form_error,
    product_form_from,
    product_from_form,
    update_product_field,
)


class ProductViewState(ViewState):
    """Catalog list plus the admin product editor"""

    def __init__(self, repository: ProductRepository, seeder: CatalogSeeder):
        super().__init__()
        self.repository = repository
        self.all_products: LiveQuery[Product] = repository.all_products
        self.form: Observable[ProductForm] = Observable(ProductForm())
        self.seeding = self.launch(seeder.seed_if_empty())

    def insert_product(self, product: Product) -> asyncio.Task:
        return self.launch(self._insert(product))

    async def _insert(self, product: Product) -> int:
        product_id = await self.repository.insert_product(product)
        self.message.value = "Producto agregado correctamente"
        return product_id

    def update_product(self, product: Product) -> asyncio.Task:
        return self.launch(self._update(product))

    async def _update(self, product: Product) -> bool:
        updated = await self.repository.update_product(product)
        self.message.value = "Producto actualizado correctamente"
        return updated

    def delete_product(self, product: Product) -> asyncio.Task:
        return self.launch(self._delete(product))

    async def _delete(self, product: Product) -> bool:
        deleted = await self.repository.delete_product(product)
        self.message.value = "Producto eliminado correctamente"
        return deleted

    # Editor

    def new_product(self) -> None:
        self.form.value = ProductForm()

    def edit_product(self, product: Product) -> None:
        self.form.value = product_form_from(product)

    def on_form_change(self, field: str, value: str) -> None:
        self.form.value = update_product_field(self.form.value, field, value)

    def submit_product_form(self) -> Optional[asyncio.Task]:
        """Insert or update from the editor; None when the form is incomplete"""
        form = self.form.value
        error = product_form_error(form)
        if error is not None:
            self.message.value = error
            return None

        product = product_from_form(form)
        if form.is_editing:
            return self.update_product(product)
        return self.insert_product(product)
