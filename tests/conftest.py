"""Shared pytest fixtures for tiendapp tests."""

import json

import pytest

from tiendapp.dao import ContactDao, OrderDao, ProductDao, UserDao
from tiendapp.database import Store
from tiendapp.repositories import ContactRepository, OrderRepository, ProductRepository, UserRepository
from tiendapp.services.assets import AssetLoader
from tiendapp.services.catalog_seeder import CatalogSeeder
from tiendapp.services.images import ImageResolver

CATALOG = [
    {"nombre": "Auriculares Bluetooth", "descripcion": "Inalámbricos", "precio": 29990, "stock": 5},
    {"nombre": "Smartwatch Deportivo", "descripcion": "Con GPS", "precio": 59990.75},
    {"nombre": "Mouse Gamer", "precio": 15990, "stock": 0},
]

REGIONS = [
    {"id": 7, "nombre": "Metropolitana"},
    {"id": 6, "nombre": "Valparaíso"},
]


@pytest.fixture
def store():
    """Fresh in-memory store per test."""
    store = Store("sqlite://", schema_version=2, destructive_migration=False, echo=False).open()
    yield store
    store.close()


@pytest.fixture
def contact_dao(store):
    return ContactDao(store)


@pytest.fixture
def user_dao(store):
    return UserDao(store)


@pytest.fixture
def product_dao(store):
    return ProductDao(store)


@pytest.fixture
def order_dao(store):
    return OrderDao(store)


@pytest.fixture
def assets_dir(tmp_path):
    """Asset directory holding a small catalog and region list."""
    directory = tmp_path / "assets"
    directory.mkdir()
    (directory / "products.json").write_text(json.dumps(CATALOG), encoding="utf-8")
    (directory / "regiones.json").write_text(json.dumps(REGIONS), encoding="utf-8")
    return directory


@pytest.fixture
def images_dir(tmp_path):
    """Image directory with the placeholder and one mapped product image."""
    directory = tmp_path / "images"
    directory.mkdir()
    (directory / "logo.svg").write_text("<svg/>", encoding="utf-8")
    (directory / "audifonos.svg").write_text("<svg/>", encoding="utf-8")
    return directory


@pytest.fixture
def assets(assets_dir):
    return AssetLoader(assets_dir)


@pytest.fixture
def images(images_dir):
    return ImageResolver(images_dir=images_dir, default_image="logo", uri_prefix="asset://images/")


@pytest.fixture
def contact_repository(contact_dao, assets):
    return ContactRepository(contact_dao, assets)


@pytest.fixture
def user_repository(user_dao):
    return UserRepository(user_dao)


@pytest.fixture
def product_repository(product_dao):
    return ProductRepository(product_dao)


@pytest.fixture
def order_repository(order_dao):
    return OrderRepository(order_dao)


@pytest.fixture
def seeder(product_repository, assets, images):
    return CatalogSeeder(product_repository, assets, images)
