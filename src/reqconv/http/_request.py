"""AggregatedHttpRequest: fully buffered request handed to converters."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from reqconv.http._data import HttpData
from reqconv.http._headers import HttpHeaders


@dataclass(frozen=True, slots=True)
class AggregatedHttpRequest:
    """A request whose headers and body are completely in memory.

    Produced by the transport layer. Converters only read from it; the
    content may be consumed any number of times.
    """

    method: str = "POST"
    path: str = "/"
    headers: HttpHeaders = field(default_factory=HttpHeaders)
    content: HttpData = field(default_factory=HttpData.empty)

    @classmethod
    def of(
        cls,
        method: str = "POST",
        path: str = "/",
        headers: Mapping[str, str] | None = None,
        body: bytes | bytearray | memoryview = b"",
    ) -> AggregatedHttpRequest:
        """Build a request from plain header and body values."""
        return cls(
            method=method,
            path=path,
            headers=HttpHeaders(headers or {}),
            content=HttpData(body),
        )
