from .base import Base
from .ticket import Ticket, TicketStatusEnum
from .ticket_sequence import TicketDaySequence

__all__ = [
    "Base",
    "Ticket",
    "TicketStatusEnum",
    "TicketDaySequence",
]
