from fastapi import APIRouter, FastAPI
from app.endpoints import customer, address, system

router = APIRouter()

router.include_router(customer.router)
router.include_router(address.router)
router.include_router(system.router)

def register_routers(app: FastAPI) -> None:
    app.include_router(router)
