"""
Customer ORM model for the `customer` table.

Read-only from this service: only listed, never written.
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from sample_api.database import Base


class Customer(Base):
    __tablename__ = "customer"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    city: Mapped[str | None] = mapped_column(String(100), nullable=True)

    def __repr__(self) -> str:
        return f"<Customer(id={self.id}, name='{self.name}', city='{self.city}')>"
