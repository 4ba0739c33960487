"""
SQLAlchemy Product model
"""
from sqlalchemy import Column, Integer, String, Text

from tiendapp.database import Base


class ProductRow(Base):
    """Catalog product"""

    __tablename__ = "products"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=False, default="")
    price = Column(Integer, nullable=False)
    image_url = Column(String(500), nullable=True)
    stock = Column(Integer, nullable=False, default=0)

    def __repr__(self):
        return f"<ProductRow(id={self.id}, name='{self.name}', price={self.price}, stock={self.stock})>"
