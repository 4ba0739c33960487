"""
Catalog Seeder - populates an empty product table from the bundled catalog
"""
import asyncio
import logging
from typing import List, Optional

from tiendapp.repositories.product_repository import ProductRepository
from tiendapp.schemas.product import Product, ProductDescriptor
from tiendapp.services.assets import AssetLoader
from tiendapp.services.images import ImageResolver

logger = logging.getLogger(__name__)


class CatalogSeeder:
    """
    One-time catalog seeding

    The product count is checked on every run, so a failed or skipped run is
    only attempted again on the next start. Concurrent calls on one seeder
    share a single in-flight run.
    """

    def __init__(
        self,
        repository: ProductRepository,
        assets: Optional[AssetLoader] = None,
        images: Optional[ImageResolver] = None,
    ):
        self.repository = repository
        self.assets = assets or AssetLoader()
        self.images = images or ImageResolver()
        self._inflight: Optional[asyncio.Task] = None

    async def seed_if_empty(self) -> int:
        """
        Seed the catalog when the product table is empty

        Returns:
            Number of products inserted, 0 when skipped or failed
        """
        task = self._inflight
        if task is None or task.done():
            task = asyncio.get_running_loop().create_task(self._seed())
            self._inflight = task
        return await asyncio.shield(task)

    def build_product(self, descriptor: ProductDescriptor) -> Product:
        return Product(
            id=0,
            name=descriptor.name,
            description=descriptor.description,
            price=descriptor.price,
            image_url=self.images.resolve(descriptor.name),
            stock=descriptor.stock
        )

    def _build_catalog(self) -> List[Product]:
        return [self.build_product(d) for d in self.assets.load_product_descriptors()]

    async def _seed(self) -> int:
        try:
            count = await self.repository.count_products()
            if count > 0:
                logger.debug("Catalog has %d products, seeding skipped", count)
                return 0

            products = await asyncio.to_thread(self._build_catalog)
            await self.repository.insert_all(products)
            logger.info("Seeded catalog with %d products", len(products))
            return len(products)
        except Exception:
            logger.exception("Catalog seeding failed")
            return 0
