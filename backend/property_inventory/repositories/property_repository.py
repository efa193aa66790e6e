"""Property Repository

Maps the five property operations onto single SQL statements and reports
every result, miss or storage failure as an Outcome instead of raising.
"""

import asyncio
import logging
from typing import Any, Awaitable, Callable, Dict

from sqlalchemy import select, update, delete
from sqlalchemy.exc import SQLAlchemyError, IntegrityError, OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from property_inventory.models.property import Property
from property_inventory.repositories.outcome import Outcome

logger = logging.getLogger(__name__)


class PropertyRepository:
    """Storage access for Property rows through one async session"""

    def __init__(self, session: AsyncSession, timeout: float = 10.0):
        self.session = session
        self.timeout = timeout

    async def list_all(self) -> Outcome:
        async def op():
            result = await self.session.execute(select(Property).order_by(Property.id))
            return Outcome.ok(list(result.scalars().all()))

        return await self._run("list", op)

    async def create(self, values: Dict[str, Any]) -> Outcome:
        """Insert a row and return its storage-assigned id"""
        async def op():
            item = Property(**values)
            self.session.add(item)
            await self.session.commit()
            logger.info(f"Created property {item.id}")
            return Outcome.ok(item.id)

        return await self._run("create", op)

    async def get(self, property_id: int) -> Outcome:
        async def op():
            result = await self.session.execute(
                select(Property).where(Property.id == property_id)
            )
            item = result.scalar_one_or_none()
            if item is None:
                return Outcome.not_found()
            return Outcome.ok(item)

        return await self._run("get", op)

    async def update(self, property_id: int, values: Dict[str, Any]) -> Outcome:
        """Overwrite every writable column of the row with the given id"""
        async def op():
            result = await self.session.execute(
                update(Property)
                .where(Property.id == property_id)
                .values(**values)
                .execution_options(synchronize_session=False)
            )
            await self.session.commit()
            if result.rowcount == 0:
                return Outcome.not_found()
            logger.info(f"Updated property {property_id}")
            return Outcome.ok(result.rowcount)

        return await self._run("update", op)

    async def delete(self, property_id: int) -> Outcome:
        async def op():
            result = await self.session.execute(
                delete(Property)
                .where(Property.id == property_id)
                .execution_options(synchronize_session=False)
            )
            await self.session.commit()
            if result.rowcount == 0:
                return Outcome.not_found()
            logger.info(f"Deleted property {property_id}")
            return Outcome.ok(result.rowcount)

        return await self._run("delete", op)

    async def _run(self, name: str, op: Callable[[], Awaitable[Outcome]]) -> Outcome:
        try:
            return await asyncio.wait_for(op(), timeout=self.timeout)
        except asyncio.TimeoutError as e:
            logger.error(f"Property {name} timed out after {self.timeout}s")
            await self._rollback()
            return Outcome.failure(e, timed_out=True)
        except IntegrityError as e:
            logger.warning(f"Database integrity error during property {name}: {e}")
            await self._rollback()
            return Outcome.failure(e)
        except OperationalError as e:
            logger.error(f"Database operational error during property {name}: {e}")
            await self._rollback()
            return Outcome.failure(e)
        except SQLAlchemyError as e:
            logger.error(f"Database error during property {name}: {e}")
            await self._rollback()
            return Outcome.failure(e)

    async def _rollback(self) -> None:
        try:
            await self.session.rollback()
        except SQLAlchemyError as e:
            logger.error(f"Rollback failed: {e}")
