# schemas/address.py
from __future__ import annotations

from typing import Optional
from uuid import UUID

from pydantic import BaseModel


class AddressBase(BaseModel):
    nickname: Optional[str] = None
    street1: str
    street2: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zipcode: Optional[str] = None


class AddressCreate(AddressBase):
    pass


class AddressResponse(AddressBase):
    id: UUID
    customer_id: UUID

    class Config:
        from_attributes = True
