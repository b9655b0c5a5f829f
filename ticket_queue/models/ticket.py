import uuid
from datetime import date, datetime
from enum import Enum

from sqlalchemy import (
    Date,
    DateTime,
    Enum as SAEnum,
    Index,
    Integer,
    String,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, utcnow


class TicketStatusEnum(str, Enum):
    QUEUING = "Queuing"
    PROCESSED = "Processed"
    FINISHED = "Finished"


def _new_ticket_id() -> str:
    return str(uuid.uuid4())


class Ticket(Base):
    __tablename__ = "queue_tickets"
    __table_args__ = (
        UniqueConstraint("day", "number", name="uq_queue_tickets_day_number"),
        Index("ix_queue_tickets_day", "day"),
        Index("ix_queue_tickets_status", "status"),
    )

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_ticket_id)
    number: Mapped[int] = mapped_column(Integer, nullable=False)
    day: Mapped[date] = mapped_column(Date, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=utcnow, onupdate=utcnow
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    status: Mapped[TicketStatusEnum] = mapped_column(
        SAEnum(
            TicketStatusEnum,
            native_enum=False,
            create_constraint=False,
            values_callable=lambda enum: [member.value for member in enum],
        ),
        nullable=False,
        default=TicketStatusEnum.QUEUING,
    )

    def __repr__(self) -> str:
        return f"<Ticket(day={self.day}, number={self.number}, status={self.status})>"
