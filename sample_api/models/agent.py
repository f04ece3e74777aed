"""
Sample API: Agent SQLAlchemy Model
====================================

What:  ORM model for the `agents` table, the only table this service writes.
Who:   Used by AgentService to build SELECT / INSERT / UPDATE / DELETE
       statements, and by the test suite to create the schema.

Column notes:
    - id: auto-increment integer assigned by the database on INSERT
    - commission: DECIMAL(10, 2); the service rounds to two places before
      writing, so the stored value always matches what was accepted
    - name / working_area / commission are NOT NULL at the model level, which
      matches the required-field validation applied on create and replace
"""

from decimal import Decimal

from sqlalchemy import Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from sample_api.database import Base


class Agent(Base):
    """A sales agent with a working area and a commission rate."""

    __tablename__ = "agents"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(String(100), nullable=False)

    working_area: Mapped[str] = mapped_column(String(100), nullable=False)

    commission: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)

    def __repr__(self) -> str:
        return f"<Agent(id={self.id}, name='{self.name}', working_area='{self.working_area}')>"
