"""Durable containers over SQLAlchemy tables.

``DurableMap`` is an ordered u64 -> value map whose values are stored as
their ``Storable`` encoding. ``DurableCell`` holds a single fixed-width u64.
Both operate on the session they are given and never commit; the caller's
transaction decides what becomes durable.
"""

from typing import Generic, TypeVar

from sqlalchemy import Table, delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from blogstore.domain.shared.model.storable import Storable
from blogstore.infrastructure.persistence.tables import CELL_WIDTH, KEY_WIDTH

V = TypeVar("V", bound=Storable)

_U64_MAX = 2**64 - 1


def encode_u64(value: int, width: int = KEY_WIDTH) -> bytes:
    """Encode an unsigned integer as fixed-width big-endian bytes."""
    if not 0 <= value <= _U64_MAX:
        raise ValueError(f"{value} is outside the u64 range")
    return value.to_bytes(width, "big")


def decode_u64(data: bytes) -> int:
    return int.from_bytes(data, "big")


class DurableMap(Generic[V]):
    """Ordered map from u64 keys to ``Storable`` values.

    The table must have a ``key`` blob primary key and a ``value`` blob column.
    """

    def __init__(self, session: AsyncSession, table: Table, value_type: type[V]) -> None:
        self._session = session
        self._table = table
        self._value_type = value_type

    async def get(self, key: int) -> V | None:
        stmt = select(self._table.c.value).where(self._table.c.key == encode_u64(key))
        result = await self._session.execute(stmt)
        data = result.scalar_one_or_none()
        return self._value_type.decode(data) if data is not None else None

    async def insert(self, key: int, value: V) -> V | None:
        # Encode first: an oversize value must fail before anything is written.
        data = value.encode()
        previous = await self.get(key)

        if previous is not None:
            stmt = (
                update(self._table)
                .where(self._table.c.key == encode_u64(key))
                .values(value=data)
            )
        else:
            stmt = insert(self._table).values(key=encode_u64(key), value=data)

        await self._session.execute(stmt)
        await self._session.flush()
        return previous

    async def remove(self, key: int) -> V | None:
        previous = await self.get(key)
        if previous is None:
            return None
        await self._session.execute(
            delete(self._table).where(self._table.c.key == encode_u64(key))
        )
        await self._session.flush()
        return previous

    async def count(self) -> int:
        stmt = select(func.count()).select_from(self._table)
        result = await self._session.execute(stmt)
        return result.scalar_one()

    async def keys(self) -> list[int]:
        stmt = select(self._table.c.key).order_by(self._table.c.key)
        result = await self._session.execute(stmt)
        return [decode_u64(k) for k in result.scalars().all()]


class DurableCell:
    """A single named u64 stored at fixed width. Missing slots read as ``initial``."""

    def __init__(self, session: AsyncSession, table: Table, slot: str, initial: int = 0) -> None:
        self._session = session
        self._table = table
        self._slot = slot
        self._initial = initial

    async def get(self) -> int:
        stmt = select(self._table.c.value).where(self._table.c.slot == self._slot)
        result = await self._session.execute(stmt)
        data = result.scalar_one_or_none()
        return decode_u64(data) if data is not None else self._initial

    async def set(self, value: int) -> None:
        data = encode_u64(value, CELL_WIDTH)
        stmt = select(self._table.c.slot).where(self._table.c.slot == self._slot)
        exists = (await self._session.execute(stmt)).first() is not None

        if exists:
            await self._session.execute(
                update(self._table).where(self._table.c.slot == self._slot).values(value=data)
            )
        else:
            await self._session.execute(insert(self._table).values(slot=self._slot, value=data))
        await self._session.flush()
