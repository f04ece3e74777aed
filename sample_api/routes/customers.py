"""Customer route handler: GET /customers."""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from sample_api.database import get_db_session
from sample_api.schemas.common import ErrorResponse
from sample_api.schemas.customer import CustomerResponse
from sample_api.services.customer_service import customer_service

router = APIRouter(prefix="/customers", tags=["Customers"])


@router.get(
    "",
    response_model=List[CustomerResponse],
    responses={500: {"description": "Database error", "model": ErrorResponse}},
    summary="Fetch all customers",
)
async def list_customers(db: AsyncSession = Depends(get_db_session)) -> List[CustomerResponse]:
    return await customer_service.list_customers(db)
