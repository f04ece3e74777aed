"""
Sample API: Agent Route Handlers
==================================

What:  The five /agents endpoints.
How:   Each handler receives one pooled session via Depends(get_db_session)
       and delegates to AgentService.

A missing request body is treated as an empty object, so POST or PUT
without a body answers 400 "Missing required fields" and PATCH answers
400 "No fields to update".
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Body, Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from sample_api.database import get_db_session
from sample_api.schemas.agent import AgentCreatedResponse, AgentPayload, AgentResponse
from sample_api.schemas.common import ErrorResponse, MessageResponse
from sample_api.services.agent_service import agent_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/agents", tags=["Agents"])

# Largest id a signed 64-bit key column can hold
MAX_AGENT_ID = 2**63 - 1

_bad_request = {400: {"description": "Invalid input", "model": ErrorResponse}}
_not_found = {404: {"description": "Agent not found", "model": ErrorResponse}}
_server_error = {500: {"description": "Database error", "model": ErrorResponse}}


@router.get(
    "",
    response_model=List[AgentResponse],
    responses={**_server_error},
    summary="Fetch all agents",
)
async def list_agents(db: AsyncSession = Depends(get_db_session)) -> List[AgentResponse]:
    return await agent_service.list_agents(db)


@router.post(
    "",
    status_code=201,
    response_model=AgentCreatedResponse,
    responses={
        201: {"description": "Agent created successfully", "model": AgentCreatedResponse},
        **_bad_request,
        **_server_error,
    },
    summary="Add a new agent",
)
async def create_agent(
    payload: Optional[AgentPayload] = Body(default=None),
    db: AsyncSession = Depends(get_db_session),
) -> AgentCreatedResponse:
    """
    Insert an agent. name, working_area and commission are all required;
    commission is rounded to two decimal places before storage.
    """
    agent_id = await agent_service.create_agent(db, payload or AgentPayload())
    return AgentCreatedResponse(id=agent_id)


@router.patch(
    "/{agent_id}",
    response_model=MessageResponse,
    responses={**_bad_request, **_not_found, **_server_error},
    summary="Update an agent partially",
)
async def update_agent(
    agent_id: int = Path(..., ge=1, le=MAX_AGENT_ID, description="Agent id"),
    payload: Optional[AgentPayload] = Body(default=None),
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    """Only the fields present in the body are written; the rest are left as they are."""
    await agent_service.update_agent(db, agent_id, payload or AgentPayload())
    return MessageResponse(message="Agent updated successfully")


@router.put(
    "/{agent_id}",
    response_model=MessageResponse,
    responses={**_bad_request, **_not_found, **_server_error},
    summary="Replace an agent entirely",
)
async def replace_agent(
    agent_id: int = Path(..., ge=1, le=MAX_AGENT_ID, description="Agent id"),
    payload: Optional[AgentPayload] = Body(default=None),
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    await agent_service.replace_agent(db, agent_id, payload or AgentPayload())
    return MessageResponse(message="Agent replaced successfully")


@router.delete(
    "/{agent_id}",
    response_model=MessageResponse,
    responses={**_bad_request, **_not_found, **_server_error},
    summary="Delete an agent",
)
async def delete_agent(
    agent_id: int = Path(..., ge=1, le=MAX_AGENT_ID, description="Agent id"),
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    await agent_service.delete_agent(db, agent_id)
    return MessageResponse(message="Agent deleted successfully")
