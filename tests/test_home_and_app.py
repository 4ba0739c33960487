"""Tests for the home carousel and the application wiring."""

import asyncio

from tiendapp.database import Store
from tiendapp.main import TiendApp
from tiendapp.schemas import User
from tiendapp.viewstate import HomeViewState


def test_carousel_wraps_around():
    home = HomeViewState(["a", "b", "c"])
    home.previous_image()
    assert home.current_image_index.value == 2
    home.next_image()
    assert home.current_image_index.value == 0
    home.go_to_image(1)
    assert home.current_image_index.value == 1
    home.go_to_image(7)
    assert home.current_image_index.value == 1


def test_app_wires_shared_view_states(assets, images):
    async def scenario():
        app = TiendApp(Store("sqlite://"), assets, images)
        assert app.catalog is app.catalog
        assert await app.catalog.seeding == 3

        await app.users.insert_user(User(name="Ana", email="ana@test.cl", password="secreto"))
        app.login.on_email_change("ana@test.cl")
        app.login.on_password_change("secreto")
        await app.login.login_user()
        assert app.session.current_user.value.name == "Ana"

        products = await app.products.all_products.snapshot()
        in_stock = next(p for p in products if p.stock > 0)
        order_id = await app.order_book.place_order(app.session.current_user.value, in_stock)
        assert (await app.orders.get_order_by_id(order_id)).total == in_stock.price

        app.close()
        app.store.close()

    asyncio.run(scenario())


def test_configure_logging_applies_level(monkeypatch):
    import logging

    from tiendapp.main import configure_logging

    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    configure_logging("debug")
    assert calls[0]["level"] == "DEBUG"


def test_empty_carousel_keeps_index():
    home = HomeViewState(images=[])
    home.next_image()
    home.previous_image()
    home.go_to_image(0)
    assert home.current_image_index.value == 0
