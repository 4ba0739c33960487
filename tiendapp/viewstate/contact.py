"""
Contact form view-state
"""
import asyncio
import logging
from typing import List, Optional

from tiendapp.config import settings
from tiendapp.reactive import Observable
from tiendapp.repositories.contact_repository import ContactRepository
from tiendapp.schemas.contact import Contact, Region
from tiendapp.utils.validation import MESSAGE_MAX_LENGTH
from tiendapp.viewstate.base import ViewState
from tiendapp.viewstate.forms import ContactForm, update_contact_field, validate_contact_form

logger = logging.getLogger(__name__)


class ContactViewState(ViewState):
    """
    Contact form: editing, validation and saving

    Each field change re-validates that field only. save_contact() validates
    all fields together and saves only when every one of them passes; a
    successful save raises ``saved`` and resets the form.
    """

    def __init__(self, repository: ContactRepository):
        super().__init__()
        self.repository = repository
        self.form: Observable[ContactForm] = Observable(ContactForm())
        self.regions: Observable[List[Region]] = Observable([])
        self.is_loading: Observable[bool] = Observable(False)
        self.saved: Observable[bool] = Observable(False)
        self.regions_loaded = self.launch(self._load_regions())

    async def _load_regions(self) -> None:
        self.regions.value = await self.repository.load_regions()

    def on_field_change(self, field: str, value: str) -> None:
        self.form.value = update_contact_field(self.form.value, field, value)

    def on_name_change(self, value: str) -> None:
        self.on_field_change("name", value)

    def on_phone_change(self, value: str) -> None:
        self.on_field_change("phone", value)

    def on_email_change(self, value: str) -> None:
        self.on_field_change("email", value)

    def on_region_change(self, value: str) -> None:
        self.on_field_change("region", value)

    def on_message_change(self, value: str) -> None:
        self.on_field_change("message", value)

    def message_counter(self) -> str:
        return f"{len(self.form.value.message)}/{MESSAGE_MAX_LENGTH}"

    def validate_form(self) -> bool:
        self.form.value = validate_contact_form(self.form.value)
        return self.form.value.is_valid

    def save_contact(self) -> Optional[asyncio.Task]:
        """Validate every field, then save; returns None when validation fails"""
        if not self.validate_form():
            return None

        form = self.form.value
        contact = Contact(
            id=0,
            name=form.name.strip(),
            phone=form.phone.strip(),
            email=form.email.strip(),
            region=form.region,
            message=form.message.strip()
        )
        self.is_loading.value = True
        return self.launch(self._save(contact))

    async def _save(self, contact: Contact) -> None:
        try:
            await self.repository.insert_contact(contact)
            self.saved.value = True
            self.clear_form()
            logger.info("Contact message saved from %s", contact.email)
        finally:
            self.is_loading.value = False

    def clear_form(self) -> None:
        self.form.value = ContactForm()

    def reset_saved(self) -> None:
        self.saved.value = False

    def schedule_saved_reset(self, delay: Optional[float] = None) -> asyncio.Task:
        """Clear ``saved`` once delay seconds have passed"""
        delay = settings.SAVED_AUTO_CLEAR_SECONDS if delay is None else delay
        return self.launch(self._reset_saved_later(delay))

    async def _reset_saved_later(self, delay: float) -> None:
        await asyncio.sleep(delay)
        self.reset_saved()
