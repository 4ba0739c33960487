"""
View-state objects, one per screen
"""
from tiendapp.viewstate.base import ViewState
from tiendapp.viewstate.contact import ContactViewState
from tiendapp.viewstate.home import HomeViewState
from tiendapp.viewstate.orders import OrderViewState
from tiendapp.viewstate.products import ProductViewState
from tiendapp.viewstate.session import LoginViewState, RegisterViewState, SessionViewState

__all__ = [
    "ViewState",
    "ContactViewState",
    "HomeViewState",
    "LoginViewState",
    "OrderViewState",
    "ProductViewState",
    "RegisterViewState",
    "SessionViewState"
]
