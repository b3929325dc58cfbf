from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from shared.config.database import Base, DB_SCHEMA

class Customer(Base):
    __tablename__ = "customers"
    __table_args__ = {"schema": DB_SCHEMA}

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    # Lookup key for repeat orders; uniqueness is not enforced
    email = Column(String(255), nullable=False, index=True)
    phone = Column(String(64), nullable=False)

    orders = relationship("Order", back_populates="customer")
