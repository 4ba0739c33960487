"""Tests for the session, login and registration view-states."""

import asyncio

from tiendapp.schemas import User
from tiendapp.viewstate import LoginViewState, RegisterViewState, SessionViewState

ANA = User(name="Ana", email="ana@test.cl", password="secreto")


def test_login_and_logout(user_repository):
    async def scenario():
        await user_repository.insert_user(ANA)
        session = SessionViewState(user_repository)

        user = await session.login("ana@test.cl", "secreto")
        assert user.email == "ana@test.cl"
        assert session.current_user.value == user
        assert session.message.value == "Inicio de sesión exitoso"
        assert session.role() == "Cliente"
        assert session.welcome_message() == "Hola Ana, ¡bienvenido a TiendApp!"

        session.logout()
        assert session.current_user.value is None
        assert session.message.value == "Sesión cerrada"
        assert session.role() is None

    asyncio.run(scenario())


def test_failed_login_leaves_user_absent(user_repository):
    async def scenario():
        await user_repository.insert_user(ANA)
        session = SessionViewState(user_repository)

        assert await session.login("ana@test.cl", "incorrecta") is None
        assert session.current_user.value is None
        assert session.message.value == "Credenciales incorrectas"

        session.clear_message()
        assert await session.login("nadie@test.cl", "secreto") is None
        assert session.current_user.value is None
        assert session.message.value == "Credenciales incorrectas"

    asyncio.run(scenario())


def test_admin_session(user_repository):
    async def scenario():
        await user_repository.insert_user(User(name="Jefa", email="jefa@test.cl", password="admin123", is_admin=True))
        session = SessionViewState(user_repository)
        await session.login("jefa@test.cl", "admin123")

        assert session.is_admin
        assert session.role() == "Administrador"

    asyncio.run(scenario())


def test_update_profile(user_repository):
    async def scenario():
        user_id = await user_repository.insert_user(ANA)
        session = SessionViewState(user_repository)
        user = await session.login("ana@test.cl", "secreto")

        edited = user.model_copy(update={"name": "Ana María", "address": "Av. Siempre Viva 742"})
        assert await session.update_profile(edited) is True

        stored = await user_repository.get_user_by_id(user_id)
        assert stored.name == "Ana María"
        assert stored.address == "Av. Siempre Viva 742"
        assert session.current_user.value.name == "Ana María"
        assert session.message.value == "Perfil actualizado correctamente"

    asyncio.run(scenario())


def test_register_through_session(user_repository):
    async def scenario():
        session = SessionViewState(user_repository)
        user_id = await session.register_user(ANA)

        assert user_id > 0
        assert session.message.value == "Usuario registrado correctamente"

    asyncio.run(scenario())


def test_all_users_is_live(user_repository):
    async def scenario():
        session = SessionViewState(user_repository)
        seen = []
        session.all_users.subscribe(seen.append)
        await session.all_users.idle()

        await session.register_user(ANA)
        await session.all_users.idle()
        assert [u.email for u in seen[-1]] == ["ana@test.cl"]

    asyncio.run(scenario())


def fill_login(view_state, email, password):
    view_state.on_email_change(email)
    view_state.on_password_change(password)


def test_login_form_distinguishes_failures(user_repository):
    async def scenario():
        await user_repository.insert_user(ANA)
        view_state = LoginViewState(user_repository)

        fill_login(view_state, "nadie@test.cl", "secreto")
        await view_state.login_user()
        assert view_state.message.value == "El usuario no existe"
        assert view_state.login_success.value is False

        fill_login(view_state, "ana@test.cl", "otra")
        await view_state.login_user()
        assert view_state.message.value == "Contraseña incorrecta"

        fill_login(view_state, " ana@test.cl ", "secreto")
        user = await view_state.login_user()
        assert user.name == "Ana"
        assert view_state.message.value == "Inicio de sesión exitoso"
        assert view_state.login_success.value is True

    asyncio.run(scenario())


def test_login_form_rejects_bad_input_without_lookup(user_repository):
    async def scenario():
        view_state = LoginViewState(user_repository)

        fill_login(view_state, "no-es-correo", "secreto")
        assert view_state.login_user() is None
        assert view_state.message.value == "Correo electrónico inválido"

        fill_login(view_state, "ana@test.cl", "   ")
        assert view_state.login_user() is None
        assert view_state.message.value == "Debe ingresar su contraseña"
        assert view_state.login_success.value is None

    asyncio.run(scenario())


def test_login_form_sets_session_user(user_repository):
    async def scenario():
        await user_repository.insert_user(ANA)
        session = SessionViewState(user_repository)
        view_state = LoginViewState(user_repository, session)

        fill_login(view_state, "ana@test.cl", "secreto")
        await view_state.login_user()
        assert session.current_user.value.email == "ana@test.cl"

    asyncio.run(scenario())


def fill_register(view_state, name, email, password):
    view_state.on_name_change(name)
    view_state.on_email_change(email)
    view_state.on_password_change(password)


def test_register_new_user(user_repository):
    async def scenario():
        view_state = RegisterViewState(user_repository)
        fill_register(view_state, "Pedro", "pedro@test.cl", "clave123")

        user_id = await view_state.register_user()
        stored = await user_repository.get_user_by_id(user_id)

        assert stored.email == "pedro@test.cl"
        assert stored.is_admin is False
        assert view_state.registration_success.value is True
        assert view_state.message.value == "Usuario registrado exitosamente"

    asyncio.run(scenario())


def test_register_duplicate_email(user_repository):
    async def scenario():
        await user_repository.insert_user(ANA)
        view_state = RegisterViewState(user_repository)
        fill_register(view_state, "Ana Dos", "ana@test.cl", "otraclave")

        assert await view_state.register_user() is None
        assert view_state.registration_success.value is False
        assert view_state.message.value == "El correo ya está registrado"
        assert len(await user_repository.all_users.snapshot()) == 1

    asyncio.run(scenario())


def test_register_validation_order(user_repository):
    async def scenario():
        view_state = RegisterViewState(user_repository)

        fill_register(view_state, "P3dro", "pedro@test.cl", "clave123")
        assert view_state.register_user() is None
        assert view_state.message.value == "Nombre inválido"

        fill_register(view_state, "Pedro", "pedro", "clave123")
        assert view_state.register_user() is None
        assert view_state.message.value == "Correo electrónico inválido"

        fill_register(view_state, "Pedro", "pedro@test.cl", "123")
        assert view_state.register_user() is None
        assert view_state.message.value == "La contraseña debe tener al menos 6 caracteres"
        assert view_state.registration_success.value is None

    asyncio.run(scenario())
