"""Storable - the byte-codec capability required of durable values.

Anything kept in a durable map implements this protocol: a fixed upper bound
on its encoded size plus an ``encode``/``decode`` pair where ``decode`` is the
exact inverse of ``encode``. Containers depend on the protocol only, never on
a concrete base class.
"""

from typing import ClassVar, Protocol, Self, runtime_checkable


@runtime_checkable
class Storable(Protocol):
    MAX_SIZE: ClassVar[int]

    def encode(self) -> bytes:
        """Serialize to at most ``MAX_SIZE`` bytes.

        Raises:
            RecordEncodingError: If the encoded form exceeds ``MAX_SIZE``.
        """
        ...

    @classmethod
    def decode(cls, data: bytes) -> Self:
        """Rebuild a value from bytes produced by ``encode``.

        Raises:
            CorruptRecordError: If ``data`` is not a valid encoding.
        """
        ...
