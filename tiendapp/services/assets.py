"""
Loader for the bundled JSON assets
"""
import json
import logging
from pathlib import Path
from typing import Any, List, Optional

from pydantic import TypeAdapter, ValidationError

from tiendapp.config import settings
from tiendapp.exceptions import AssetError
from tiendapp.schemas.contact import Region
from tiendapp.schemas.product import ProductDescriptor

logger = logging.getLogger(__name__)

_regions_adapter = TypeAdapter(List[Region])
_products_adapter = TypeAdapter(List[ProductDescriptor])


class AssetLoader:
    """Reads read-only assets shipped with the package"""

    def __init__(self, assets_dir: Optional[Path] = None):
        self.assets_dir = Path(assets_dir) if assets_dir is not None else settings.ASSETS_DIR

    def load_json(self, name: str) -> Any:
        """
        Parse one asset file

        Raises:
            AssetError: If the file cannot be read or is not valid JSON
        """
        path = self.assets_dir / name
        try:
            with path.open(encoding="utf-8") as f:
                return json.load(f)
        except OSError as e:
            raise AssetError(f"Cannot read asset {path}: {e}") from e
        except json.JSONDecodeError as e:
            raise AssetError(f"Invalid JSON in asset {path}: {e}") from e

    def load_regions(self) -> List[Region]:
        """Region list in file order; any failure yields an empty list"""
        try:
            return _regions_adapter.validate_python(self.load_json(settings.REGIONS_ASSET))
        except (AssetError, ValidationError):
            logger.exception("Could not load regions from %s", settings.REGIONS_ASSET)
            return []

    def load_product_descriptors(self) -> List[ProductDescriptor]:
        """
        Catalog entries used to seed an empty product table

        Raises:
            AssetError: If the file cannot be read or an entry is malformed
        """
        data = self.load_json(settings.PRODUCTS_ASSET)
        try:
            return _products_adapter.validate_python(data)
        except ValidationError as e:
            raise AssetError(f"Invalid product catalog in {settings.PRODUCTS_ASSET}: {e}") from e
