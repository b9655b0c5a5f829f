from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..db import get_db
from ..schemas import TicketCreate, TicketRead, TicketStatusUpdate
from ..services import status as status_service
from ..services import tickets as tickets_service

router = APIRouter()


@router.post("/queue", response_model=TicketRead, status_code=201)
def create_queue_ticket(payload: TicketCreate, db: Session = Depends(get_db)) -> TicketRead:
    return tickets_service.create_ticket(db, payload.name)


@router.get("/queue", response_model=list[TicketRead])
def list_queue_tickets(db: Session = Depends(get_db)) -> list[TicketRead]:
    return status_service.list_tickets(db)


@router.put("/queue", response_model=TicketRead)
def update_queue_ticket(
    payload: TicketStatusUpdate, db: Session = Depends(get_db)
) -> TicketRead:
    return tickets_service.update_status(db, payload.id, payload.status)
