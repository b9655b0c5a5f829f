from datetime import datetime

from pydantic import BaseModel, Field

from ..models import TicketStatusEnum


class TicketCreate(BaseModel):
    name: str


class TicketStatusUpdate(BaseModel):
    id: str
    # Checked by the service so bad values get the queue's own message.
    status: str


class TicketRead(BaseModel):
    id: str
    number: int
    date: datetime = Field(validation_alias="created_at")
    name: str
    status: TicketStatusEnum

    model_config = {"from_attributes": True}
