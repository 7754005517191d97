# schemas/customer.py
from __future__ import annotations

from typing import Optional
from uuid import UUID

from pydantic import BaseModel


class CustomerCreate(BaseModel):
    fname: str
    lname: Optional[str] = None
    email: str


class CustomerResponse(BaseModel):
    id: UUID
    fname: str
    lname: Optional[str] = None
    email: str

    class Config:
        from_attributes = True
