"""
User Repository
"""
from typing import Optional

from tiendapp.dao.user_dao import UserDao
from tiendapp.reactive import LiveQuery
from tiendapp.schemas.user import User


class UserRepository:
    """Pass-through to the user access object"""

    def __init__(self, dao: UserDao):
        self.dao = dao
        self.all_users: LiveQuery[User] = dao.get_all()

    async def insert_user(self, user: User) -> int:
        return await self.dao.insert(user)

    async def update_user(self, user: User) -> bool:
        return await self.dao.update(user)

    async def delete_user(self, user: User) -> bool:
        return await self.dao.delete(user)

    async def get_user_by_id(self, user_id: int) -> Optional[User]:
        return await self.dao.get_by_id(user_id)

    async def get_by_email(self, email: str) -> Optional[User]:
        return await self.dao.get_by_email(email)

    async def login(self, email: str, password: str) -> Optional[User]:
        return await self.dao.login(email, password)

    async def clear_all_users(self) -> None:
        await self.dao.delete_all()
