import enum

from sqlalchemy import Column, Enum, Float, ForeignKey, Integer, String
from sqlalchemy.orm import relationship
from shared.config.database import Base, DB_SCHEMA


class OrderStatus(str, enum.Enum):
    PENDING = "PENDING"      # placed, not yet processed
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"


class Order(Base):
    __tablename__ = "orders"
    __table_args__ = {"schema": DB_SCHEMA}

    id = Column(Integer, primary_key=True, index=True)
    customer_id = Column(Integer, ForeignKey(f"{DB_SCHEMA}.customers.id"), nullable=False)
    pizza_id = Column(Integer, nullable=False)
    # Snapshots of the catalog at order time, not joins
    pizza_name = Column(String(255), nullable=True)
    quantity = Column(Integer, nullable=False)
    total_price = Column(Float, nullable=False)
    status = Column(
        Enum(OrderStatus, native_enum=False, length=16),
        nullable=False,
        default=OrderStatus.PENDING,
    )

    customer = relationship("Customer", back_populates="orders", lazy="selectin")
