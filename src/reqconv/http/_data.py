"""HttpData: immutable binary payload of an aggregated HTTP message."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class HttpData:
    """Read-only wrapper around a fully buffered payload.

    The payload is held as ``bytes``. Mutable inputs (``bytearray``,
    ``memoryview``) are snapshotted at construction so the wrapper never
    observes later writes to the source buffer.

    array() hands out a fresh mutable copy on every call. to_bytes() shares
    the immutable payload.
    """

    payload: bytes = b""

    def __post_init__(self) -> None:
        if not isinstance(self.payload, bytes):
            object.__setattr__(self, "payload", bytes(self.payload))

    @classmethod
    def empty(cls) -> HttpData:
        return _EMPTY

    def array(self) -> bytearray:
        """Return a new mutable copy of the payload."""
        return bytearray(self.payload)

    def to_bytes(self) -> bytes:
        return self.payload

    def to_str(self, encoding: str = "utf-8") -> str:
        return self.payload.decode(encoding)

    @property
    def is_empty(self) -> bool:
        return not self.payload

    def __len__(self) -> int:
        return len(self.payload)

    def __bytes__(self) -> bytes:
        return self.payload


_EMPTY = HttpData()
