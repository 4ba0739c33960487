"""
SQLAlchemy User model
"""
from sqlalchemy import Boolean, Column, Integer, String

from tiendapp.database import Base


class UserRow(Base):
    """Registered customer or administrator"""

    __tablename__ = "users"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    # Not unique at the schema level; registration checks for duplicates
    email = Column(String(255), nullable=False, index=True)
    password = Column(String(255), nullable=False)
    address = Column(String(500), nullable=True)
    phone = Column(String(20), nullable=True)
    is_admin = Column(Boolean, nullable=False, default=False)

    def __repr__(self):
        return f"<UserRow(id={self.id}, email='{self.email}', is_admin={self.is_admin})>"
