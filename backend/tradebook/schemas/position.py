"""Position response schema."""

from pydantic import BaseModel, Field


class PositionResponse(BaseModel):
    book_id: int = Field(alias="bookId")
    instrument_id: int = Field(alias="instrumentId")
    quantity: int

    class Config:
        from_attributes = True
        populate_by_name = True
