"""
Form state structs and their pure update functions

Forms are immutable; every update returns a new instance that the owning
view-state object publishes through its observable ``form`` slot.
"""
import re
from typing import Callable, Dict, Optional

from pydantic import BaseModel, ConfigDict

from tiendapp.schemas.product import Product
from tiendapp.utils import validation

PRICE_INPUT = re.compile(r"[0-9]*\.?[0-9]*")
STOCK_INPUT = re.compile(r"[0-9]*")


class ContactForm(BaseModel):
    """Contact form fields and their current error messages"""
    name: str = ""
    phone: str = ""
    email: str = ""
    region: str = ""
    message: str = ""

    name_error: Optional[str] = None
    phone_error: Optional[str] = None
    email_error: Optional[str] = None
    region_error: Optional[str] = None
    message_error: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @property
    def is_valid(self) -> bool:
        return all(getattr(self, f"{field}_error") is None for field in CONTACT_VALIDATORS)


CONTACT_VALIDATORS: Dict[str, Callable[[str], Optional[str]]] = {
    "name": validation.name_error,
    "phone": validation.phone_error,
    "email": validation.email_error,
    "region": validation.region_error,
    "message": validation.message_error,
}


def update_contact_field(form: ContactForm, field: str, value: str) -> ContactForm:
    """Set one field and recompute only that field's error"""
    if field not in CONTACT_VALIDATORS:
        raise ValueError(f"Unknown contact form field: {field}")
    # Input beyond the message limit is dropped
    if field == "message" and len(value) > validation.MESSAGE_MAX_LENGTH:
        return form
    return form.model_copy(update={field: value, f"{field}_error": CONTACT_VALIDATORS[field](value)})


def validate_contact_form(form: ContactForm) -> ContactForm:
    """Recompute the errors of every field at once"""
    return form.model_copy(update={
        f"{field}_error": validator(getattr(form, field))
        for field, validator in CONTACT_VALIDATORS.items()
    })


class LoginForm(BaseModel):
    email: str = ""
    password: str = ""

    model_config = ConfigDict(frozen=True)


class RegisterForm(BaseModel):
    name: str = ""
    email: str = ""
    password: str = ""

    model_config = ConfigDict(frozen=True)


def register_form_error(form: RegisterForm) -> Optional[str]:
    """First problem of a trimmed registration form, checked in field order"""
    if not validation.is_valid_name(form.name):
        return "Nombre inválido"
    if not validation.is_valid_email(form.email):
        return "Correo electrónico inválido"
    if not validation.is_valid_password(form.password):
        return f"La contraseña debe tener al menos {validation.PASSWORD_MIN_LENGTH} caracteres"
    return None


class ProductForm(BaseModel):
    """Admin product editor; numeric fields hold the raw text input"""
    product_id: int = 0
    name: str = ""
    description: str = ""
    price: str = ""
    stock: str = ""
    image_url: str = ""

    model_config = ConfigDict(frozen=True)

    @property
    def is_editing(self) -> bool:
        return self.product_id != 0


def product_form_from(product: Product) -> ProductForm:
    return ProductForm(
        product_id=product.id,
        name=product.name,
        description=product.description,
        price=str(product.price),
        stock=str(product.stock),
        image_url=product.image_url or ""
    )


def update_product_field(form: ProductForm, field: str, value: str) -> ProductForm:
    """Set one field; non-numeric input for price or stock is ignored"""
    if field == "price" and not PRICE_INPUT.fullmatch(value):
        return form
    if field == "stock" and not STOCK_INPUT.fullmatch(value):
        return form
    if field not in ("name", "description", "price", "stock", "image_url"):
        raise ValueError(f"Unknown product form field: {field}")
    return form.model_copy(update={field: value})


def _parse_price(value: str) -> Optional[int]:
    try:
        return int(float(value))
    except ValueError:
        return None


def product_form_error(form: ProductForm) -> Optional[str]:
    valid = (
        not validation.is_blank(form.name)
        and _parse_price(form.price) is not None
        and form.stock.isdigit()
    )
    if not valid:
        return "Por favor completa todos los campos correctamente"
    return None


def product_from_form(form: ProductForm) -> Product:
    """Build the product entity; the form must be valid"""
    return Product(
        id=form.product_id,
        name=form.name.strip(),
        description=form.description.strip(),
        price=_parse_price(form.price),
        image_url=form.image_url.strip() or None,
        stock=int(form.stock)
    )
