"""
Contact Repository
"""
import asyncio
from typing import List, Optional

from tiendapp.dao.contact_dao import ContactDao
from tiendapp.reactive import LiveQuery
from tiendapp.schemas.contact import Contact, Region
from tiendapp.services.assets import AssetLoader


class ContactRepository:
    """Contact messages from the store and regions from the bundled asset"""

    def __init__(self, dao: ContactDao, assets: Optional[AssetLoader] = None):
        self.dao = dao
        self.assets = assets or AssetLoader()
        self.all_contacts: LiveQuery[Contact] = dao.get_all()

    async def insert_contact(self, contact: Contact) -> int:
        return await self.dao.insert(contact)

    async def get_contact_by_id(self, contact_id: int) -> Optional[Contact]:
        return await self.dao.get_by_id(contact_id)

    async def delete_contact(self, contact: Contact) -> bool:
        return await self.dao.delete(contact)

    async def delete_all_contacts(self) -> None:
        await self.dao.delete_all()

    async def get_contact_count(self) -> int:
        return await self.dao.count()

    async def load_regions(self) -> List[Region]:
        """Bundled region list, empty when it cannot be read"""
        return await asyncio.to_thread(self.assets.load_regions)
