"""Response schema for GET /orders."""

from datetime import date

from pydantic import BaseModel, Field


class OrderResponse(BaseModel):
    id: int = Field(examples=[1])
    order_date: date = Field(examples=["2023-10-01"])
    amount: float = Field(examples=[100.50])

    model_config = {"from_attributes": True}
