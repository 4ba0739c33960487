"""
Product image resolution for seeded catalog entries
"""
import logging
from pathlib import Path
from typing import Dict, Optional, Set

from tiendapp.config import settings

logger = logging.getLogger(__name__)

# Product name -> bundled image identifier
DEFAULT_IMAGE_MAP: Dict[str, str] = {
    "Auriculares Bluetooth": "audifonos",
    "Smartwatch Deportivo": "relojdeportivo",
    "Cámara 4K Compacta": "camara",
    "Teclado Mecánico RGB": "tecladomecanicorgb",
}


class ImageResolver:
    """Maps product names to bundled image URIs"""

    def __init__(
        self,
        images_dir: Optional[Path] = None,
        image_map: Optional[Dict[str, str]] = None,
        default_image: Optional[str] = None,
        uri_prefix: Optional[str] = None,
    ):
        self.images_dir = Path(images_dir) if images_dir is not None else settings.IMAGES_DIR
        self.image_map = DEFAULT_IMAGE_MAP if image_map is None else image_map
        self.default_image = default_image or settings.DEFAULT_IMAGE
        self.uri_prefix = settings.IMAGE_URI_PREFIX if uri_prefix is None else uri_prefix
        self._available: Optional[Set[str]] = None

    @property
    def available(self) -> Set[str]:
        """Identifiers of the image files present in images_dir"""
        if self._available is None:
            if self.images_dir.is_dir():
                self._available = {p.stem for p in self.images_dir.iterdir() if p.is_file()}
            else:
                logger.warning("Image directory %s not found", self.images_dir)
                self._available = set()
        return self._available

    def identifier_for(self, product_name: str) -> str:
        """Mapped identifier, or the default one when unmapped or missing"""
        identifier = self.image_map.get(product_name, self.default_image)
        if identifier not in self.available:
            return self.default_image
        return identifier

    def resolve(self, product_name: str) -> str:
        return f"{self.uri_prefix}{self.identifier_for(product_name)}"
