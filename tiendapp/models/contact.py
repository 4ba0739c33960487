"""
SQLAlchemy Contact model
"""
from sqlalchemy import Column, Integer, String, Text

from tiendapp.database import Base


class ContactRow(Base):
    """Contact form submission"""

    __tablename__ = "contacts"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(50), nullable=False)
    phone = Column(String(20), nullable=False)
    email = Column(String(255), nullable=False)
    region = Column(String(100), nullable=False)
    message = Column(Text, nullable=False)

    def __repr__(self):
        return f"<ContactRow(id={self.id}, name='{self.name}', region='{self.region}')>"
