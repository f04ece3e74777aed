"""
Order Service: read-only listing of the `orders` table.
"""

import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from sample_api.exceptions import StorageError
from sample_api.models.order import Order
from sample_api.schemas.order import OrderResponse

logger = logging.getLogger(__name__)


class OrderService:

    async def list_orders(self, db: AsyncSession) -> List[OrderResponse]:
        """SELECT every order in database-defined order."""
        try:
            result = await db.execute(select(Order))
            orders = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error("Database error listing orders: %s", str(e))
            raise StorageError.from_exception(e, operation="list_orders") from e

        return [OrderResponse.model_validate(order) for order in orders]


order_service = OrderService()
