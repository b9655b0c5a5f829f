from fastapi import APIRouter

from .queue import router as queue_router
from .status import router as status_router

api_router = APIRouter()
api_router.include_router(queue_router, tags=["queue"])
api_router.include_router(status_router, tags=["status"])
