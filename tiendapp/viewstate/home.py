"""
Home screen carousel state
"""
from typing import List, Optional

from tiendapp.config import settings
from tiendapp.reactive import Observable


class HomeViewState:
    """Index of the image shown by the home carousel"""

    def __init__(self, images: Optional[List[str]] = None):
        self.images = list(images if images is not None else settings.CAROUSEL_IMAGES)
        self.current_image_index: Observable[int] = Observable(0)

    def next_image(self) -> None:
        if not self.images:
            return
        self.current_image_index.value = (self.current_image_index.value + 1) % len(self.images)

    def previous_image(self) -> None:
        if not self.images:
            return
        index = self.current_image_index.value - 1
        self.current_image_index.value = len(self.images) - 1 if index < 0 else index

    def go_to_image(self, index: int) -> None:
        if 0 <= index < len(self.images):
            self.current_image_index.value = index
