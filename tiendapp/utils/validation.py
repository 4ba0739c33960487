"""
Field validation for the storefront forms

Each field has a predicate and an error-message function. The message
functions return None for a valid value.
"""
import re
from typing import Optional

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 50
MESSAGE_MAX_LENGTH = 200
PASSWORD_MIN_LENGTH = 6

# A letter (accents and ñ included) followed by letters or spaces
NAME_PATTERN = re.compile(r"[a-zA-ZáéíóúÁÉÍÓÚñÑ][a-zA-ZáéíóúÁÉÍÓÚñÑ ]*")
# Chilean mobile: optional +56/56 country code, then 9 and eight digits
PHONE_PATTERN = re.compile(r"(\+56|56)?9[0-9]{8}")
EMAIL_PATTERN = re.compile(r"[A-Za-z0-9+_.-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")


def is_blank(value: str) -> bool:
    return not value.strip()


def is_valid_name(name: str) -> bool:
    if is_blank(name):
        return False
    if len(name) < NAME_MIN_LENGTH or len(name) > NAME_MAX_LENGTH:
        return False
    return NAME_PATTERN.fullmatch(name) is not None


def is_valid_phone(phone: str) -> bool:
    if is_blank(phone):
        return False
    return PHONE_PATTERN.fullmatch(phone) is not None


def is_valid_email(email: str) -> bool:
    if is_blank(email):
        return False
    return EMAIL_PATTERN.fullmatch(email) is not None


def is_valid_region(region: str) -> bool:
    return not is_blank(region)


def is_valid_message(message: str) -> bool:
    return not is_blank(message) and len(message) <= MESSAGE_MAX_LENGTH


def is_valid_password(password: str) -> bool:
    return len(password) >= PASSWORD_MIN_LENGTH


def name_error(name: str) -> Optional[str]:
    if is_blank(name):
        return "El nombre es requerido"
    if len(name) < NAME_MIN_LENGTH:
        return f"El nombre debe tener al menos {NAME_MIN_LENGTH} caracteres"
    if len(name) > NAME_MAX_LENGTH:
        return f"El nombre no puede exceder {NAME_MAX_LENGTH} caracteres"
    if not is_valid_name(name):
        return "El nombre solo puede contener letras y espacios"
    return None


def phone_error(phone: str) -> Optional[str]:
    if is_blank(phone):
        return "El teléfono es requerido"
    if not is_valid_phone(phone):
        return "Formato inválido. Use: +56912345678 o 912345678"
    return None


def email_error(email: str) -> Optional[str]:
    if is_blank(email):
        return "El correo electrónico es requerido"
    if not is_valid_email(email):
        return "Correo electrónico inválido"
    return None


def region_error(region: str) -> Optional[str]:
    if is_blank(region):
        return "Debe seleccionar una región"
    return None


def message_error(message: str) -> Optional[str]:
    if is_blank(message):
        return "El mensaje es requerido"
    if len(message) > MESSAGE_MAX_LENGTH:
        return f"El mensaje no puede exceder {MESSAGE_MAX_LENGTH} caracteres"
    return None


def password_error(password: str) -> Optional[str]:
    if is_blank(password):
        return "Debe ingresar su contraseña"
    if not is_valid_password(password):
        return f"La contraseña debe tener al menos {PASSWORD_MIN_LENGTH} caracteres"
    return None
