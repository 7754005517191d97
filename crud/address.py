# crud/address.py
from __future__ import annotations

import logging
import uuid
from typing import List, Dict, Any

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from core.exceptions import ConflictError, NotFoundError
from models.address import Address
from models.customer import Customer

log = logging.getLogger("address")

_FIELDS = ("nickname", "street1", "street2", "city", "state", "zipcode")


def list_for_customer(db: Session, customer_id: uuid.UUID) -> List[Address]:
    stmt = select(Address).where(Address.customer_id == customer_id)
    return db.execute(stmt).scalars().all()


def create(db: Session, customer_id: uuid.UUID, data: Dict[str, Any]) -> Address:
    """Insert one address for ``customer_id`` under a freshly generated id.

    The owner always comes from ``customer_id``; ``id``/``customer_id`` keys
    in ``data`` are ignored. The store's foreign key decides whether the
    customer exists, so the lookup below only runs on the failure path to
    tell a missing customer (``NotFoundError``) from a duplicate street
    (``ConflictError``).
    """
    obj = Address(
        id=uuid.uuid4(),
        customer_id=customer_id,
        **{k: data.get(k) for k in _FIELDS},
    )
    db.add(obj)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        log.warning("address insert rejected for customer %s: %s", customer_id, e.orig)
        if db.get(Customer, customer_id) is None:
            raise NotFoundError("customer not found") from e
        raise ConflictError("address with this street1 already exists for customer") from e
    db.refresh(obj)
    log.info("address created id=%s customer_id=%s", obj.id, customer_id)
    return obj
