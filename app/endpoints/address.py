# app/endpoints/address.py
from __future__ import annotations

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from core.exceptions import ConflictError, NotFoundError
from database.session import get_db
from crud import address as crud
from schemas.address import AddressResponse, AddressCreate

router = APIRouter(prefix="/customer/{customer_id}/addresses", tags=["Address"])


@router.get("", response_model=List[AddressResponse])
def list_addresses(customer_id: UUID, db: Session = Depends(get_db)):
    return crud.list_for_customer(db, customer_id)


@router.post("", response_model=AddressResponse)
def create_address(
    customer_id: UUID,
    payload: AddressCreate,
    db: Session = Depends(get_db),
):
    try:
        return crud.create(db, customer_id, payload.model_dump())
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.detail)
    except ConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.detail)
