"""
Role labels and greetings for customers and administrators
"""


def get_role(is_admin: bool) -> str:
    return "Administrador" if is_admin else "Cliente"


def get_welcome_message(is_admin: bool, name: str) -> str:
    if is_admin:
        return f"Bienvenido, administrador {name}"
    return f"Hola {name}, ¡bienvenido a TiendApp!"
