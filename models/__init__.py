# models/__init__.py

from models import customer
from models import address

__all__ = [
    "customer",
    "address",
]
