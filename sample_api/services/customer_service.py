"""
Customer Service: read-only listing of the `customer` table.
"""

import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from sample_api.exceptions import StorageError
from sample_api.models.customer import Customer
from sample_api.schemas.customer import CustomerResponse

logger = logging.getLogger(__name__)


class CustomerService:

    async def list_customers(self, db: AsyncSession) -> List[CustomerResponse]:
        """SELECT every customer in database-defined order."""
        try:
            result = await db.execute(select(Customer))
            customers = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error("Database error listing customers: %s", str(e))
            raise StorageError.from_exception(e, operation="list_customers") from e

        return [CustomerResponse.model_validate(customer) for customer in customers]


customer_service = CustomerService()
