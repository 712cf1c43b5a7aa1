from abc import abstractmethod
from typing import Protocol

from blogstore.domain.shared.port import Port


class IdAllocator(Port, Protocol):
    """Durable monotonic id source. Never wraps, never reissues."""

    @abstractmethod
    async def next(self) -> int:
        """Return the current value and advance the counter by one.

        Raises:
            CapacityExhaustedError: If the counter is already at its ceiling.
        """
        ...

    @abstractmethod
    async def peek(self) -> int: ...
