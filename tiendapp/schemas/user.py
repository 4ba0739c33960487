"""
Pydantic schema for users
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """Registered user; the password is stored as entered"""
    id: int = Field(0, description="Identity key, 0 assigns a new one")
    name: str
    email: str
    password: str
    address: Optional[str] = None
    phone: Optional[str] = None
    is_admin: bool = False

    model_config = ConfigDict(from_attributes=True, frozen=True)
