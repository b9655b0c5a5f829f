"""Ticket allocation and status changes.

Numbers come from one counter row per day in ``ticket_day_sequences``. The
row is bumped with a single ``UPDATE ... SET last_number = last_number + 1``
before the ticket is inserted, so the write lock on that row serializes
concurrent joins for the same day. A unique constraint on
``queue_tickets(day, number)`` backs this up at the store level.
"""
from datetime import date, datetime
import logging
import time

from sqlalchemy import func, select, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError
from sqlalchemy.orm import Session

from ..config import settings
from ..errors import (
    NotFoundError,
    StoreUnavailableError,
    TransientStoreError,
    ValidationError,
)
from ..models import Ticket, TicketDaySequence, TicketStatusEnum
from ..models.base import localnow

logger = logging.getLogger(__name__)

NAME_MAX_LENGTH = 255

# Unconstrained: staff may move any ticket to any status, including back to
# Queuing to correct a mistake. Tighten here if a forward-only flow is wanted.
ALLOWED_TRANSITIONS: dict[TicketStatusEnum, frozenset[TicketStatusEnum]] = {
    status: frozenset(TicketStatusEnum) for status in TicketStatusEnum
}

# serialization_failure, deadlock_detected, lock_not_available
TRANSIENT_SQLSTATES = {"40001", "40P01", "55P03"}
TRANSIENT_MESSAGES = (
    "database is locked",
    "database table is locked",
    "deadlock",
    "could not serialize",
    "lock wait timeout",
)


def create_ticket(db: Session, name: object, now: datetime | None = None) -> Ticket:
    clean_name = _validate_name(name)
    current_time = now or localnow(settings.queue_timezone)
    day = current_time.date()
    max_attempts = max(settings.allocation_max_retries, 1)

    for attempt in range(1, max_attempts + 1):
        number: int | None = None
        try:
            number = _claim_number(db, day, current_time)
            ticket = Ticket(
                number=number,
                day=day,
                created_at=current_time,
                updated_at=current_time,
                name=clean_name,
                status=TicketStatusEnum.QUEUING,
            )
            db.add(ticket)
            db.commit()
        except SQLAlchemyError as exc:
            db.rollback()
            if not is_transient_error(exc):
                logger.error(
                    "create_ticket failed: day=%s attempted_number=%s error=%s",
                    day,
                    number,
                    exc,
                )
                raise StoreUnavailableError("Failed to create queue entry") from exc
            logger.warning(
                "create_ticket conflict: day=%s attempted_number=%s attempt=%s/%s error=%s",
                day,
                number,
                attempt,
                max_attempts,
                exc,
            )
            if attempt < max_attempts:
                time.sleep(settings.allocation_retry_delay * attempt)
            continue

        db.refresh(ticket)
        logger.info(
            "Allocated ticket: day=%s number=%s id=%s", day, ticket.number, ticket.id
        )
        return ticket

    raise TransientStoreError(
        f"Failed to create queue entry after {max_attempts} attempts"
    )


def update_status(db: Session, ticket_id: object, status: object) -> Ticket:
    if not isinstance(ticket_id, str) or not ticket_id.strip():
        raise ValidationError("Queue ID is required")
    new_status = parse_status(status)

    try:
        ticket = db.get(Ticket, ticket_id)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("update_status lookup failed: id=%s error=%s", ticket_id, exc)
        raise StoreUnavailableError("Failed to update queue status") from exc
    if ticket is None:
        raise NotFoundError(f"Queue entry not found: {ticket_id}")

    previous = ticket.status
    check_transition(previous, new_status)
    # Rollback expires the instance, so keep what the error log needs.
    day, number = ticket.day, ticket.number
    ticket.status = new_status
    try:
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error(
            "update_status failed: id=%s day=%s number=%s error=%s",
            ticket_id,
            day,
            number,
            exc,
        )
        if is_transient_error(exc):
            raise TransientStoreError("Failed to update queue status") from exc
        raise StoreUnavailableError("Failed to update queue status") from exc

    db.refresh(ticket)
    logger.info(
        "Ticket status changed: id=%s number=%s %s -> %s",
        ticket.id,
        ticket.number,
        _status_value(previous),
        _status_value(new_status),
    )
    return ticket


def parse_status(value: object) -> TicketStatusEnum:
    try:
        return TicketStatusEnum(value)
    except ValueError:
        raise ValidationError(
            "Valid status is required (Queuing, Processed, or Finished)"
        ) from None


def check_transition(current: TicketStatusEnum, new: TicketStatusEnum) -> None:
    if new not in ALLOWED_TRANSITIONS[TicketStatusEnum(current)]:
        raise ValidationError(
            f"Cannot move ticket from {_status_value(current)} to {_status_value(new)}"
        )


def is_transient_error(exc: SQLAlchemyError) -> bool:
    if isinstance(exc, IntegrityError):
        # Only (day, number) and the counter's primary key are unique, so a
        # violation means another request won the race.
        return True
    if not isinstance(exc, OperationalError):
        return False
    if exc.connection_invalidated:
        return False
    sqlstate = getattr(exc.orig, "pgcode", None) or getattr(exc.orig, "sqlstate", None)
    if sqlstate in TRANSIENT_SQLSTATES:
        return True
    message = str(exc.orig).lower()
    return any(marker in message for marker in TRANSIENT_MESSAGES)


def _claim_number(db: Session, day: date, now: datetime) -> int:
    _ensure_day_sequence(db, day, now)
    db.execute(
        update(TicketDaySequence)
        .where(TicketDaySequence.day == day)
        .values(last_number=TicketDaySequence.last_number + 1, updated_at=now)
        .execution_options(synchronize_session=False)
    )
    return db.execute(
        select(TicketDaySequence.last_number).where(TicketDaySequence.day == day)
    ).scalar_one()


def _ensure_day_sequence(db: Session, day: date, now: datetime) -> None:
    # Seed from existing tickets so days written before the counter existed
    # keep counting densely.
    seed = (
        select(func.coalesce(func.max(Ticket.number), 0))
        .where(Ticket.day == day)
        .scalar_subquery()
    )
    values = {"day": day, "last_number": seed, "updated_at": now}
    dialect = db.get_bind().dialect.name
    if dialect == "sqlite":
        stmt = sqlite_insert(TicketDaySequence).values(**values)
        db.execute(stmt.on_conflict_do_nothing(index_elements=["day"]))
    elif dialect == "postgresql":
        stmt = pg_insert(TicketDaySequence).values(**values)
        db.execute(stmt.on_conflict_do_nothing(index_elements=["day"]))
    elif db.get(TicketDaySequence, day) is None:
        # A concurrent insert surfaces as IntegrityError and is retried.
        db.execute(TicketDaySequence.__table__.insert().values(**values))


def _validate_name(name: object) -> str:
    if not isinstance(name, str) or not name.strip():
        raise ValidationError("Name is required and must be a non-empty string")
    clean_name = name.strip()
    if len(clean_name) > NAME_MAX_LENGTH:
        raise ValidationError(f"Name must be at most {NAME_MAX_LENGTH} characters")
    return clean_name


def _status_value(value) -> str:
    return value.value if hasattr(value, "value") else str(value)
