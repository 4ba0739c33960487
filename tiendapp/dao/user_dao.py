"""
User access object
"""
import asyncio
from typing import Optional

from tiendapp.dao.base import BaseDao
from tiendapp.models.user import UserRow
from tiendapp.schemas.user import User


class UserDao(BaseDao[UserRow, User]):
    """CRUD for users plus email and credential lookups"""

    row_type = UserRow
    entity_type = User

    async def get_by_email(self, email: str) -> Optional[User]:
        """First user registered with email, or None"""
        return await asyncio.to_thread(self._first_sync, UserRow.email == email)

    async def login(self, email: str, password: str) -> Optional[User]:
        """User whose email and password both match exactly, or None"""
        return await asyncio.to_thread(
            self._first_sync,
            UserRow.email == email,
            UserRow.password == password
        )
