from .status import AdminStatsRead, CustomerStatusRead
from .ticket import TicketCreate, TicketRead, TicketStatusUpdate

__all__ = [
    "AdminStatsRead",
    "CustomerStatusRead",
    "TicketCreate",
    "TicketRead",
    "TicketStatusUpdate",
]
