"""
Sample API: Agent Request/Response Schemas
============================================

What:  Pydantic models for the /agents endpoints.
How:   FastAPI validates request bodies against these and builds the
       OpenAPI document served at /docs from them.

Request bodies are deliberately loose: every field is optional and
`commission` accepts either a JSON number or a numeric string. The
required-field (truthy) rules live in AgentService, so that a missing field
produces the service's own 400 message rather than FastAPI's 422.
"""

from typing import Optional, Union

from pydantic import BaseModel, Field, StrictBool, StrictFloat, StrictInt


class AgentPayload(BaseModel):
    """
    Body of POST /agents, PUT /agents/{id} and PATCH /agents/{id}.

    POST and PUT require all three fields to be truthy; PATCH requires at
    least one.
    """
    name: Optional[str] = Field(default=None, examples=["John Doe"])
    working_area: Optional[str] = Field(default=None, examples=["New York"])
    # Strict members keep a JSON boolean as bool so the service can reject it
    commission: Optional[Union[StrictInt, StrictFloat, StrictBool, str]] = Field(
        default=None,
        description="Commission rate; numeric strings are accepted and rounded to 2 places",
        examples=[0.15],
    )


class AgentResponse(BaseModel):
    """One row of the `agents` table as returned by GET /agents."""
    id: int = Field(examples=[1])
    name: str = Field(examples=["John Doe"])
    working_area: str = Field(examples=["New York"])
    commission: float = Field(examples=[0.15])

    model_config = {"from_attributes": True}


class AgentCreatedResponse(BaseModel):
    """Returned by POST /agents with HTTP 201."""
    id: int = Field(description="Server-generated id of the new agent", examples=[1])
