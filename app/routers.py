from fastapi import APIRouter, FastAPI
from app.endpoints import customer

router = APIRouter()

router.include_router(customer.router)

def register_routers(app: FastAPI) -> None:
    app.include_router(router)
