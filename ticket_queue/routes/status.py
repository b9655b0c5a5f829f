from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..db import get_db
from ..schemas import AdminStatsRead, CustomerStatusRead
from ..services import status as status_service

router = APIRouter()


@router.get("/status-customer", response_model=CustomerStatusRead)
def customer_status(db: Session = Depends(get_db)) -> CustomerStatusRead:
    return status_service.get_customer_status(db)


@router.get("/status-admin", response_model=AdminStatsRead)
def admin_status(db: Session = Depends(get_db)) -> AdminStatsRead:
    return status_service.get_admin_stats(db)
