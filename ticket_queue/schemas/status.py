from pydantic import BaseModel, Field


class CustomerStatusRead(BaseModel):
    current_number: int = Field(serialization_alias="currentNumber")
    queue_count: int = Field(serialization_alias="queueCount")

    model_config = {"from_attributes": True}


class AdminStatsRead(BaseModel):
    total: int
    queuing: int
    processed: int
    finished: int

    model_config = {"from_attributes": True}
