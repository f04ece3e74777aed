from sample_api.models.agent import Agent
from sample_api.models.customer import Customer
from sample_api.models.order import Order

__all__ = [
    "Agent",
    "Customer",
    "Order",
]
