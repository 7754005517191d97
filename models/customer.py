# models/customer.py
import uuid

from sqlalchemy import Column, String, Uuid
from sqlalchemy.orm import relationship

from database.base import Base


class Customer(Base):
    __tablename__ = "customers"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    fname = Column(String, nullable=False)
    lname = Column(String, nullable=True)
    email = Column(String, nullable=False, unique=True)

    addresses = relationship("Address", back_populates="customer")


__all__ = ["Customer"]
