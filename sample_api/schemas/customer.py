"""Response schema for GET /customers."""

from typing import Optional

from pydantic import BaseModel, Field


class CustomerResponse(BaseModel):
    id: int = Field(examples=[1])
    name: str = Field(examples=["Jane Doe"])
    city: Optional[str] = Field(default=None, examples=["Los Angeles"])

    model_config = {"from_attributes": True}
