"""
Configuration settings for TiendApp
"""
from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings

PACKAGE_DIR = Path(__file__).resolve().parent


class Settings(BaseSettings):
    """Application settings"""

    # Database
    DATABASE_URL: str = "sqlite:///tiendapp_database.db"
    SCHEMA_VERSION: int = 2
    DESTRUCTIVE_MIGRATION: bool = False
    SQL_ECHO: bool = False

    # Service
    SERVICE_NAME: str = "tiendapp"
    LOG_LEVEL: str = "INFO"

    # Bundled assets
    ASSETS_DIR: Path = PACKAGE_DIR / "assets"
    PRODUCTS_ASSET: str = "products.json"
    REGIONS_ASSET: str = "regiones.json"
    IMAGES_DIR: Path = PACKAGE_DIR / "assets" / "images"
    IMAGE_URI_PREFIX: str = "asset://images/"
    DEFAULT_IMAGE: str = "logo"
    DEFAULT_STOCK: int = 10

    # Forms
    SAVED_AUTO_CLEAR_SECONDS: float = 1.0

    # Home carousel
    CAROUSEL_IMAGES: List[str] = ["logo", "tecno", "tecno3"]

    class Config:
        env_file = ".env"
        case_sensitive = True


# Create global settings instance
settings = Settings()
