"""
Pydantic schemas for contact messages and regions
"""
from pydantic import BaseModel, ConfigDict, Field


class Contact(BaseModel):
    """Message submitted through the contact form"""
    id: int = Field(0, description="Identity key, 0 assigns a new one")
    name: str
    phone: str
    email: str
    region: str = Field(..., description="Region name picked from the bundled list")
    message: str = Field(..., description="Free text, at most 200 characters")

    model_config = ConfigDict(from_attributes=True, frozen=True)


class Region(BaseModel):
    """Entry of the bundled region list"""
    id: int
    name: str = Field(..., alias="nombre")

    model_config = ConfigDict(frozen=True, populate_by_name=True)
