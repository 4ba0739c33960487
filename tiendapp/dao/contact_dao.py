"""
Contact access object
"""
from tiendapp.dao.base import BaseDao
from tiendapp.models.contact import ContactRow
from tiendapp.schemas.contact import Contact


class ContactDao(BaseDao[ContactRow, Contact]):
    """CRUD for contact messages, newest first"""

    row_type = ContactRow
    entity_type = Contact
