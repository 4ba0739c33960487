"""
Session, login and registration view-states
"""
import asyncio
import logging
from typing import Optional

from tiendapp.reactive import LiveQuery, Observable
from tiendapp.repositories.user_repository import UserRepository
from tiendapp.schemas.user import User
from tiendapp.utils import roles
from tiendapp.utils.validation import is_blank, is_valid_email
from tiendapp.viewstate.base import ViewState
from tiendapp.viewstate.forms import LoginForm, RegisterForm, register_form_error

logger = logging.getLogger(__name__)

LOGIN_OK = "Inicio de sesión exitoso"
LOGIN_FAILED = "Credenciales incorrectas"
LOGGED_OUT = "Sesión cerrada"
EMAIL_TAKEN = "El correo ya está registrado"


class SessionViewState(ViewState):
    """
    Holds the authenticated user, if any

    Nothing is persisted: every cold start begins logged out.
    """

    def __init__(self, repository: UserRepository):
        super().__init__()
        self.repository = repository
        self.all_users: LiveQuery[User] = repository.all_users
        self.current_user: Observable[Optional[User]] = Observable(None)

    @property
    def is_logged_in(self) -> bool:
        return self.current_user.value is not None

    @property
    def is_admin(self) -> bool:
        user = self.current_user.value
        return user is not None and user.is_admin

    def role(self) -> Optional[str]:
        user = self.current_user.value
        return roles.get_role(user.is_admin) if user else None

    def welcome_message(self) -> Optional[str]:
        user = self.current_user.value
        return roles.get_welcome_message(user.is_admin, user.name) if user else None

    def login(self, email: str, password: str) -> asyncio.Task:
        return self.launch(self._login(email, password))

    async def _login(self, email: str, password: str) -> Optional[User]:
        user = await self.repository.login(email, password)
        if user is not None:
            self.current_user.value = user
            self.message.value = LOGIN_OK
            logger.info("User %s logged in", user.id)
        else:
            self.message.value = LOGIN_FAILED
        return user

    def logout(self) -> None:
        self.current_user.value = None
        self.message.value = LOGGED_OUT

    def register_user(self, user: User) -> asyncio.Task:
        return self.launch(self._register_user(user))

    async def _register_user(self, user: User) -> int:
        user_id = await self.repository.insert_user(user)
        self.message.value = "Usuario registrado correctamente"
        return user_id

    def update_profile(self, user: User) -> asyncio.Task:
        return self.launch(self._update_profile(user))

    async def _update_profile(self, user: User) -> bool:
        updated = await self.repository.update_user(user)
        self.current_user.value = user
        self.message.value = "Perfil actualizado correctamente"
        return updated


class LoginViewState(ViewState):
    """Login screen form; tells an unknown user apart from a wrong password"""

    def __init__(self, repository: UserRepository, session: Optional[SessionViewState] = None):
        super().__init__()
        self.repository = repository
        self.session = session
        self.form: Observable[LoginForm] = Observable(LoginForm())
        self.login_success: Observable[Optional[bool]] = Observable(None)

    def on_email_change(self, value: str) -> None:
        self.form.value = self.form.value.model_copy(update={"email": value})

    def on_password_change(self, value: str) -> None:
        self.form.value = self.form.value.model_copy(update={"password": value})

    def login_user(self) -> Optional[asyncio.Task]:
        """Check the form, then look the user up; None when the form is invalid"""
        email = self.form.value.email.strip()
        password = self.form.value.password.strip()

        if not is_valid_email(email):
            self.message.value = "Correo electrónico inválido"
            return None
        if is_blank(password):
            self.message.value = "Debe ingresar su contraseña"
            return None
        return self.launch(self._login(email, password))

    async def _login(self, email: str, password: str) -> Optional[User]:
        user = await self.repository.get_by_email(email)
        if user is None:
            self.message.value = "El usuario no existe"
            self.login_success.value = False
            return None
        if user.password != password:
            self.message.value = "Contraseña incorrecta"
            self.login_success.value = False
            return None

        self.message.value = LOGIN_OK
        self.login_success.value = True
        if self.session is not None:
            self.session.current_user.value = user
        return user


class RegisterViewState(ViewState):
    """Registration screen form"""

    def __init__(self, repository: UserRepository):
        super().__init__()
        self.repository = repository
        self.form: Observable[RegisterForm] = Observable(RegisterForm())
        self.registration_success: Observable[Optional[bool]] = Observable(None)

    def on_name_change(self, value: str) -> None:
        self.form.value = self.form.value.model_copy(update={"name": value})

    def on_email_change(self, value: str) -> None:
        self.form.value = self.form.value.model_copy(update={"email": value})

    def on_password_change(self, value: str) -> None:
        self.form.value = self.form.value.model_copy(update={"password": value})

    def register_user(self) -> Optional[asyncio.Task]:
        """Validate, then register unless the email is taken; None when invalid"""
        form = self.form.value
        trimmed = RegisterForm(
            name=form.name.strip(),
            email=form.email.strip(),
            password=form.password.strip()
        )
        error = register_form_error(trimmed)
        if error is not None:
            self.message.value = error
            return None
        return self.launch(self._register(trimmed))

    async def _register(self, form: RegisterForm) -> Optional[int]:
        existing = await self.repository.get_by_email(form.email)
        if existing is not None:
            self.message.value = EMAIL_TAKEN
            self.registration_success.value = False
            return None

        user_id = await self.repository.insert_user(
            User(name=form.name, email=form.email, password=form.password, is_admin=False)
        )
        self.message.value = "Usuario registrado exitosamente"
        self.registration_success.value = True
        logger.info("Registered user %s", user_id)
        return user_id
