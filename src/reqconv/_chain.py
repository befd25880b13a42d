"""ConverterChain: ordered converters with first-match-wins selection.

Same evaluation shape as a first-match-wins matcher list:
- Converters are consulted in order
- The first converter whose can_handle() returns True performs the conversion
- Later converters are never consulted once one accepts
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from reqconv._types import ExpectedType, RequestConverter

logger = logging.getLogger(__name__)

MAX_CONVERTERS = 64


class ConverterError(Exception):
    """Errors from request conversion and chain construction."""


class UnsupportedResultTypeError(ConverterError):
    """convert() was asked for a type its can_handle() would have rejected.

    This is a caller defect, not a data problem: the chain (or whoever
    called convert directly) skipped the can_handle() check.
    """

    def __init__(self, expected_type: ExpectedType, converter: str) -> None:
        self.expected_type = expected_type
        self.converter = converter
        super().__init__(
            f"{converter} cannot produce {_type_name(expected_type)}"
        )


class NoConverterFoundError(ConverterError):
    """No converter in the chain accepted the request."""

    def __init__(self, expected_type: ExpectedType, content_type: str | None) -> None:
        self.expected_type = expected_type
        self.content_type = content_type
        shown = content_type if content_type is not None else "<none>"
        super().__init__(
            f"no converter for {_type_name(expected_type)} "
            f"(content-type: {shown})"
        )


@dataclass(frozen=True, slots=True)
class ConverterChain:
    """Immutable, ordered sequence of RequestConverters.

    Validation runs at construction time: every member must satisfy the
    RequestConverter protocol and the chain may hold at most MAX_CONVERTERS.

    INV: First-accept-wins. Ordering is the only tie-break.
    """

    converters: tuple[RequestConverter, ...]

    def __post_init__(self) -> None:
        if len(self.converters) > MAX_CONVERTERS:
            msg = (
                f"too many converters: {len(self.converters)} "
                f"exceeds maximum {MAX_CONVERTERS}"
            )
            raise ConverterError(msg)
        for converter in self.converters:
            if not isinstance(converter, RequestConverter):
                msg = f"{type(converter).__name__} does not implement RequestConverter"
                raise ConverterError(msg)

    @classmethod
    def of(cls, *converters: RequestConverter) -> ConverterChain:
        return cls(converters=converters)

    def find(self, request: Any, expected_type: ExpectedType) -> RequestConverter | None:
        """Return the first converter that accepts, or None."""
        for converter in self.converters:
            if converter.can_handle(request, expected_type):
                return converter
        return None

    def convert(self, request: Any, expected_type: ExpectedType) -> Any:
        """Convert the request body with the first accepting converter.

        Raises:
            NoConverterFoundError: No converter accepted the request.
        """
        converter = self.find(request, expected_type)
        if converter is None:
            content_type = _content_type_of(request)
            logger.debug(
                "no converter for %s (content-type: %s)",
                _type_name(expected_type),
                content_type,
            )
            raise NoConverterFoundError(expected_type, content_type)

        logger.debug(
            "converting to %s with %s",
            _type_name(expected_type),
            type(converter).__name__,
        )
        return converter.convert(request, expected_type)

    def __len__(self) -> int:
        return len(self.converters)


def _type_name(expected_type: ExpectedType) -> str:
    if isinstance(expected_type, type):
        return expected_type.__qualname__
    return repr(expected_type)


def _content_type_of(request: Any) -> str | None:
    headers = getattr(request, "headers", None)
    content_type = getattr(headers, "content_type", None)
    return str(content_type) if content_type is not None else None
