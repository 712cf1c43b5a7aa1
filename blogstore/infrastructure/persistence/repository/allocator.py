import logging

from sqlalchemy.ext.asyncio import AsyncSession

from blogstore.domain.post.error import CapacityExhaustedError
from blogstore.domain.post.model.value import MAX_POST_ID
from blogstore.domain.post.port.allocator import IdAllocator
from blogstore.infrastructure.persistence.durable import DurableCell
from blogstore.infrastructure.persistence.tables import POST_ID_COUNTER_SLOT, cells_table

logger = logging.getLogger(__name__)


class SQLAlchemyIdAllocator(IdAllocator):
    """Post id counter kept in a durable cell, starting at 0."""

    def __init__(self, session: AsyncSession, slot: str = POST_ID_COUNTER_SLOT) -> None:
        self._cell = DurableCell(session, cells_table, slot)

    async def next(self) -> int:
        current = await self._cell.get()
        if current >= MAX_POST_ID:
            logger.error("Post id space exhausted at %s", current)
            raise CapacityExhaustedError("Post id space exhausted")
        await self._cell.set(current + 1)
        return current

    async def peek(self) -> int:
        return await self._cell.get()
