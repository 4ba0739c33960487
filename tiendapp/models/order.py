"""
SQLAlchemy Order model
"""
from sqlalchemy import BigInteger, Column, Integer, String

from tiendapp.database import Base


class OrderRow(Base):
    """Order placed by a user for one product"""

    __tablename__ = "orders"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    # Logical references only, no foreign key constraints
    user_id = Column(Integer, nullable=False, index=True)
    product_id = Column(Integer, nullable=False, index=True)
    quantity = Column(Integer, nullable=False)
    total = Column(Integer, nullable=False)  # Frozen at order time
    status = Column(String(20), nullable=False, default="Pendiente")
    created_at = Column(BigInteger, nullable=False, index=True)  # Epoch milliseconds

    def __repr__(self):
        return f"<OrderRow(id={self.id}, user_id={self.user_id}, product_id={self.product_id}, status='{self.status}')>"
