"""Read-only views over today's tickets."""
from dataclasses import dataclass
from datetime import date
import logging

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..config import settings
from ..errors import StoreUnavailableError
from ..models import Ticket, TicketStatusEnum
from ..models.base import localnow

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StatusSummary:
    count: int
    min_number: int
    max_number: int


@dataclass(frozen=True)
class CustomerStatus:
    current_number: int
    queue_count: int


@dataclass(frozen=True)
class AdminStats:
    total: int
    queuing: int
    processed: int
    finished: int


def current_day() -> date:
    return localnow(settings.queue_timezone).date()


def list_tickets(db: Session, today: date | None = None) -> list[Ticket]:
    day = today or current_day()
    try:
        return list(
            db.scalars(
                select(Ticket).where(Ticket.day == day).order_by(Ticket.number.desc())
            )
        )
    except SQLAlchemyError as exc:
        logger.error("list_tickets failed: day=%s error=%s", day, exc)
        raise StoreUnavailableError("Failed to fetch queues") from exc


def get_customer_status(db: Session, today: date | None = None) -> CustomerStatus:
    """Who is being served now, and how many are still waiting.

    The lowest Processed number wins; with nobody in service the highest
    Finished number is shown instead, and 0 before anyone has been called.
    """
    day = today or current_day()
    summary = _summarize_day(db, day, "get_customer_status")
    processed = summary.get(TicketStatusEnum.PROCESSED)
    finished = summary.get(TicketStatusEnum.FINISHED)
    queuing = summary.get(TicketStatusEnum.QUEUING)

    if processed is not None:
        current_number = processed.min_number
    elif finished is not None:
        current_number = finished.max_number
    else:
        current_number = 0
    return CustomerStatus(
        current_number=current_number,
        queue_count=queuing.count if queuing else 0,
    )


def get_admin_stats(db: Session, today: date | None = None) -> AdminStats:
    day = today or current_day()
    summary = _summarize_day(db, day, "get_admin_stats")

    def _count(status: TicketStatusEnum) -> int:
        entry = summary.get(status)
        return entry.count if entry else 0

    queuing = _count(TicketStatusEnum.QUEUING)
    processed = _count(TicketStatusEnum.PROCESSED)
    finished = _count(TicketStatusEnum.FINISHED)
    return AdminStats(
        total=queuing + processed + finished,
        queuing=queuing,
        processed=processed,
        finished=finished,
    )


def _summarize_day(
    db: Session, day: date, operation: str
) -> dict[TicketStatusEnum, StatusSummary]:
    # One grouped query so every figure comes from the same snapshot.
    stmt = (
        select(
            Ticket.status,
            func.count(Ticket.id),
            func.min(Ticket.number),
            func.max(Ticket.number),
        )
        .where(Ticket.day == day)
        .group_by(Ticket.status)
    )
    try:
        rows = db.execute(stmt).all()
    except SQLAlchemyError as exc:
        logger.error("%s failed: day=%s error=%s", operation, day, exc)
        raise StoreUnavailableError("Failed to fetch queue status") from exc
    return {
        TicketStatusEnum(status): StatusSummary(
            count=count, min_number=min_number, max_number=max_number
        )
        for status, count, min_number, max_number in rows
    }
