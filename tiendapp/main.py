"""
TiendApp composition root
"""
import logging
from functools import cached_property
from typing import Optional

from tiendapp.config import settings
from tiendapp.dao import ContactDao, OrderDao, ProductDao, UserDao
from tiendapp.database import Store, get_store
from tiendapp.repositories import ContactRepository, OrderRepository, ProductRepository, UserRepository
from tiendapp.services.assets import AssetLoader
from tiendapp.services.catalog_seeder import CatalogSeeder
from tiendapp.services.images import ImageResolver
from tiendapp.viewstate import (
    ContactViewState,
    HomeViewState,
    LoginViewState,
    OrderViewState,
    ProductViewState,
    RegisterViewState,
    SessionViewState,
)

logger = logging.getLogger(__name__)


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging from LOG_LEVEL"""
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
    )


class TiendApp:
    """
    Wires store, access objects, repositories and view-states

    View-state objects are built lazily, once per application, and must be
    first accessed from the presentation event loop.
    """

    def __init__(
        self,
        store: Optional[Store] = None,
        assets: Optional[AssetLoader] = None,
        images: Optional[ImageResolver] = None,
    ):
        self.store = store.open() if store is not None else get_store()
        self.assets = assets or AssetLoader()

        self.contacts = ContactRepository(ContactDao(self.store), self.assets)
        self.users = UserRepository(UserDao(self.store))
        self.products = ProductRepository(ProductDao(self.store))
        self.orders = OrderRepository(OrderDao(self.store))
        self.seeder = CatalogSeeder(self.products, self.assets, images or ImageResolver())
        logger.info("%s started", settings.SERVICE_NAME)

    @cached_property
    def session(self) -> SessionViewState:
        return SessionViewState(self.users)

    @cached_property
    def login(self) -> LoginViewState:
        return LoginViewState(self.users, self.session)

    @cached_property
    def register(self) -> RegisterViewState:
        return RegisterViewState(self.users)

    @cached_property
    def catalog(self) -> ProductViewState:
        return ProductViewState(self.products, self.seeder)

    @cached_property
    def order_book(self) -> OrderViewState:
        return OrderViewState(self.orders)

    @cached_property
    def contact_form(self) -> ContactViewState:
        return ContactViewState(self.contacts)

    @cached_property
    def home(self) -> HomeViewState:
        return HomeViewState()

    def close(self) -> None:
        """Close every view-state built so far"""
        for name in ("session", "login", "register", "catalog", "order_book", "contact_form"):
            view_state = self.__dict__.pop(name, None)
            if view_state is not None:
                view_state.close()
        logger.info("%s stopped", settings.SERVICE_NAME)
