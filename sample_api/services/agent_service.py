"""
Sample API: Agent Service
===========================

What:  Validation and persistence for the /agents endpoints.
How:   Each method checks the request, builds exactly one SQL statement over
       the `agents` table, runs it on the session it was handed, and either
       returns a result or raises a typed application error.
Who:   Called by the route handlers in routes/agents.py.

Required-field rules:
    A field counts as supplied when it is truthy: present, not null, not an
    empty string, not numeric zero. Create and replace need all three
    fields; a partial update needs at least one and writes only those.

Commission coercion:
    The value is converted with float() and rounded with round(x, 2), so
    "0.155" is stored as 0.15. Values that are not finite numbers are
    rejected with a ValidationError before any statement runs.

Error mapping:
    ValidationError  → 400 (nothing executed)
    NotFoundError    → 404 (statement matched zero rows, nothing committed)
    StorageError     → 500 (any SQLAlchemyError, driver message preserved)
"""

import logging
import math
from typing import Any, Dict, List

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from sample_api.exceptions import NotFoundError, StorageError, ValidationError
from sample_api.models.agent import Agent
from sample_api.schemas.agent import AgentPayload, AgentResponse

logger = logging.getLogger(__name__)

AGENT_FIELDS = ("name", "working_area", "commission")

MISSING_FIELDS_MESSAGE = "Missing required fields"
NO_FIELDS_MESSAGE = "No fields to update"
INVALID_COMMISSION_MESSAGE = "Invalid commission value"


def coerce_commission(value: Any) -> float:
    """
    Convert a commission value to a float rounded to two decimal places.

    Raises:
        ValidationError: value is a boolean, not numeric, NaN or infinite
    """
    if isinstance(value, bool):
        raise ValidationError(INVALID_COMMISSION_MESSAGE, field="commission")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(
            INVALID_COMMISSION_MESSAGE,
            field="commission",
            context={"value": repr(value)},
        ) from None
    if not math.isfinite(number):
        raise ValidationError(
            INVALID_COMMISSION_MESSAGE,
            field="commission",
            context={"value": repr(value)},
        )
    return round(number, 2)


def supplied_fields(payload: AgentPayload) -> Dict[str, Any]:
    """Return the truthy agent fields of a request body."""
    fields: Dict[str, Any] = {}
    for name in AGENT_FIELDS:
        value = getattr(payload, name)
        if value:
            fields[name] = value
    return fields


class AgentService:
    """
    Stateless CRUD operations over the `agents` table.

    Every method receives its session from the route, so the service holds no
    connection of its own and can be tested against a mock session.
    """

    async def list_agents(self, db: AsyncSession) -> List[AgentResponse]:
        """SELECT every agent in database-defined order."""
        try:
            result = await db.execute(select(Agent))
            agents = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error("Database error listing agents: %s", str(e))
            raise StorageError.from_exception(e, operation="list_agents") from e

        return [AgentResponse.model_validate(agent) for agent in agents]

    async def create_agent(self, db: AsyncSession, payload: AgentPayload) -> int:
        """
        INSERT one agent and return its server-generated id.

        Raises:
            ValidationError: any of name, working_area, commission missing,
                             or commission not numeric
            StorageError:    the INSERT or COMMIT failed
        """
        fields = self._require_all(payload)

        agent = Agent(**fields)
        try:
            db.add(agent)
            await db.flush()  # assigns agent.id
            await db.commit()
        except SQLAlchemyError as e:
            logger.error("Database error creating agent: %s", str(e))
            raise StorageError.from_exception(e, operation="create_agent") from e

        logger.info("Agent %s created", agent.id)
        return agent.id

    async def update_agent(
        self, db: AsyncSession, agent_id: int, payload: AgentPayload
    ) -> None:
        """
        UPDATE only the supplied columns of one agent.

        Raises:
            ValidationError: no truthy field supplied, or commission not numeric
            NotFoundError:   no agent with this id
            StorageError:    the UPDATE or COMMIT failed
        """
        fields = supplied_fields(payload)
        if not fields:
            raise ValidationError(NO_FIELDS_MESSAGE)
        if "commission" in fields:
            fields["commission"] = coerce_commission(fields["commission"])

        await self._update(db, agent_id, fields, operation="update_agent")
        logger.info("Agent %s updated: %s", agent_id, ", ".join(sorted(fields)))

    async def replace_agent(
        self, db: AsyncSession, agent_id: int, payload: AgentPayload
    ) -> None:
        """
        UPDATE all three columns of one agent unconditionally.

        Raises:
            ValidationError: any field missing, or commission not numeric
            NotFoundError:   no agent with this id
            StorageError:    the UPDATE or COMMIT failed
        """
        fields = self._require_all(payload)

        await self._update(db, agent_id, fields, operation="replace_agent")
        logger.info("Agent %s replaced", agent_id)

    async def delete_agent(self, db: AsyncSession, agent_id: int) -> None:
        """
        DELETE one agent.

        Raises:
            NotFoundError: no agent with this id
            StorageError:  the DELETE or COMMIT failed
        """
        try:
            result = await db.execute(
                delete(Agent)
                .where(Agent.id == agent_id)
                .execution_options(synchronize_session=False)
            )
            if result.rowcount == 0:
                raise NotFoundError(resource="Agent", resource_id=agent_id)
            await db.commit()
        except SQLAlchemyError as e:
            logger.error("Database error deleting agent %s: %s", agent_id, str(e))
            raise StorageError.from_exception(
                e, operation="delete_agent", agent_id=agent_id
            ) from e

        logger.info("Agent %s deleted", agent_id)

    # ── Helpers ───────────────────────────────────────────────────────────

    def _require_all(self, payload: AgentPayload) -> Dict[str, Any]:
        """Check that every agent field is supplied and coerce commission."""
        fields = supplied_fields(payload)
        if len(fields) != len(AGENT_FIELDS):
            missing = [name for name in AGENT_FIELDS if name not in fields]
            raise ValidationError(MISSING_FIELDS_MESSAGE, context={"missing": missing})
        fields["commission"] = coerce_commission(fields["commission"])
        return fields

    async def _update(
        self,
        db: AsyncSession,
        agent_id: int,
        fields: Dict[str, Any],
        operation: str,
    ) -> None:
        """Run one UPDATE over `fields` and require a matched row."""
        try:
            result = await db.execute(
                update(Agent)
                .where(Agent.id == agent_id)
                .values(**fields)
                .execution_options(synchronize_session=False)
            )
            # rowcount is matched rows: SQLite reports them, and SQLAlchemy's
            # MySQL dialects connect with CLIENT_FOUND_ROWS
            if result.rowcount == 0:
                raise NotFoundError(resource="Agent", resource_id=agent_id)
            await db.commit()
        except SQLAlchemyError as e:
            logger.error("Database error in %s for agent %s: %s", operation, agent_id, str(e))
            raise StorageError.from_exception(
                e, operation=operation, agent_id=agent_id
            ) from e


agent_service = AgentService()
