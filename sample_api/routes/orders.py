"""Order route handler: GET /orders."""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from sample_api.database import get_db_session
from sample_api.schemas.common import ErrorResponse
from sample_api.schemas.order import OrderResponse
from sample_api.services.order_service import order_service

router = APIRouter(prefix="/orders", tags=["Orders"])


@router.get(
    "",
    response_model=List[OrderResponse],
    responses={500: {"description": "Database error", "model": ErrorResponse}},
    summary="Fetch all orders",
)
async def list_orders(db: AsyncSession = Depends(get_db_session)) -> List[OrderResponse]:
    return await order_service.list_orders(db)
