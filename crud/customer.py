# crud/customer.py
from __future__ import annotations

import logging
import uuid
from typing import Optional, List, Dict, Any

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from core.exceptions import ConflictError
from models.customer import Customer

log = logging.getLogger("customer")


def list_customers(db: Session) -> List[Customer]:
    stmt = select(Customer)
    return db.execute(stmt).scalars().all()


def get(db: Session, customer_id: uuid.UUID) -> Optional[Customer]:
    return db.get(Customer, customer_id)


def create(db: Session, data: Dict[str, Any]) -> Customer:
    """Insert one customer under a freshly generated id.

    Any ``id`` present in ``data`` is ignored. A duplicate email raises
    ``ConflictError`` after the session is rolled back.
    """
    obj = Customer(
        id=uuid.uuid4(),
        fname=data["fname"],
        lname=data.get("lname"),
        email=data["email"],
    )
    db.add(obj)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        log.warning("customer insert rejected: %s", e.orig)
        raise ConflictError("customer with this email already exists") from e
    db.refresh(obj)
    log.info("customer created id=%s", obj.id)
    return obj
