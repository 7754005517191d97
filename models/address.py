# models/address.py
import uuid

from sqlalchemy import Column, ForeignKey, String, UniqueConstraint, Uuid
from sqlalchemy.orm import relationship

from database.base import Base


class Address(Base):
    __tablename__ = "addresses"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    customer_id = Column(Uuid, ForeignKey("customers.id"), nullable=False, index=True)
    nickname = Column(String, nullable=True)
    street1 = Column(String, nullable=False)
    street2 = Column(String, nullable=True)
    city = Column(String, nullable=True)
    state = Column(String, nullable=True)
    zipcode = Column(String, nullable=True)

    customer = relationship("Customer", back_populates="addresses")

    __table_args__ = (
        # one customer cannot register the same street twice
        UniqueConstraint("customer_id", "street1", name="uq_addresses_customer_street1"),
    )


__all__ = ["Address"]
