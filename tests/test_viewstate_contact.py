"""Tests for the contact form view-state."""

import asyncio

from tiendapp.models import ContactRow
from tiendapp.services.assets import AssetLoader
from tiendapp.repositories import ContactRepository
from tiendapp.viewstate import ContactViewState
from tiendapp.viewstate.forms import ContactForm


def fill_valid(view_state):
    view_state.on_name_change("María José")
    view_state.on_phone_change("+56912345678")
    view_state.on_email_change("maria@test.cl")
    view_state.on_region_change("Metropolitana")
    view_state.on_message_change("Hola")


def test_valid_submission_saves_and_resets(contact_repository):
    async def scenario():
        view_state = ContactViewState(contact_repository)
        fill_valid(view_state)

        task = view_state.save_contact()
        assert task is not None
        assert view_state.is_loading.value is True
        await task

        contacts = await contact_repository.all_contacts.snapshot()
        assert len(contacts) == 1
        assert contacts[0].name == "María José"
        assert contacts[0].region == "Metropolitana"
        assert view_state.form.value == ContactForm()
        assert view_state.saved.value is True
        assert view_state.is_loading.value is False

        view_state.reset_saved()
        assert view_state.saved.value is False

    asyncio.run(scenario())


def test_invalid_submission_saves_nothing(contact_repository):
    async def scenario():
        view_state = ContactViewState(contact_repository)
        view_state.on_name_change("María José")
        view_state.on_email_change("maria@test")

        assert view_state.save_contact() is None

        form = view_state.form.value
        assert form.name_error is None
        assert form.phone_error == "El teléfono es requerido"
        assert form.email_error == "Correo electrónico inválido"
        assert form.region_error == "Debe seleccionar una región"
        assert form.message_error == "El mensaje es requerido"
        assert form.name == "María José"
        assert await contact_repository.get_contact_count() == 0
        assert view_state.saved.value is False

    asyncio.run(scenario())


def test_field_change_validates_only_that_field(contact_repository):
    async def scenario():
        view_state = ContactViewState(contact_repository)
        view_state.on_phone_change("123")

        form = view_state.form.value
        assert form.phone_error == "Formato inválido. Use: +56912345678 o 912345678"
        assert form.name_error is None
        assert form.email_error is None

    asyncio.run(scenario())


def test_fields_are_trimmed_on_save(contact_repository):
    async def scenario():
        view_state = ContactViewState(contact_repository)
        fill_valid(view_state)
        view_state.on_message_change("  Hola  ")
        await view_state.save_contact()

        contacts = await contact_repository.all_contacts.snapshot()
        assert contacts[0].message == "Hola"

    asyncio.run(scenario())


def test_message_over_limit_is_ignored(contact_repository):
    async def scenario():
        view_state = ContactViewState(contact_repository)
        view_state.on_message_change("x" * 200)
        view_state.on_message_change("x" * 201)

        assert len(view_state.form.value.message) == 200
        assert view_state.message_counter() == "200/200"

    asyncio.run(scenario())


def test_regions_loaded_at_construction(contact_repository):
    async def scenario():
        view_state = ContactViewState(contact_repository)
        await view_state.regions_loaded
        assert [r.name for r in view_state.regions.value] == ["Metropolitana", "Valparaíso"]

    asyncio.run(scenario())


def test_unreadable_regions_yield_empty_list(tmp_path, contact_dao):
    (tmp_path / "regiones.json").write_text("not json", encoding="utf-8")
    repository = ContactRepository(contact_dao, AssetLoader(tmp_path))

    async def scenario():
        view_state = ContactViewState(repository)
        await view_state.regions_loaded
        assert view_state.regions.value == []

    asyncio.run(scenario())


def test_saved_flag_auto_clears(contact_repository):
    async def scenario():
        view_state = ContactViewState(contact_repository)
        fill_valid(view_state)
        await view_state.save_contact()
        assert view_state.saved.value is True

        await view_state.schedule_saved_reset(delay=0.01)
        assert view_state.saved.value is False

    asyncio.run(scenario())


def test_storage_failure_resets_loading(store, contact_repository):
    ContactRow.__table__.drop(store.engine)

    async def scenario():
        view_state = ContactViewState(contact_repository)
        fill_valid(view_state)
        await view_state.save_contact()

        assert view_state.is_loading.value is False
        assert view_state.saved.value is False
        assert view_state.error.value is not None
        # Form kept so the user can retry
        assert view_state.form.value.name == "María José"

    asyncio.run(scenario())
