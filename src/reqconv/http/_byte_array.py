"""Raw-binary request converter.

Accepts bodies with no Content-Type, ``application/octet-stream`` or
``application/binary`` and hands them to handlers declaring one of the
binary result shapes. Media type parameters (charset and friends) are
ignored when matching; only the type/subtype pair counts.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

from reqconv._chain import UnsupportedResultTypeError
from reqconv._types import accepts
from reqconv.http._data import HttpData
from reqconv.http._media_type import APPLICATION_BINARY, OCTET_STREAM

if TYPE_CHECKING:
    from reqconv._types import ExpectedType
    from reqconv.http._request import AggregatedHttpRequest

_BINARY_MEDIA_TYPES = (OCTET_STREAM, APPLICATION_BINARY)


class BinaryShape(Enum):
    """Closed set of result shapes a binary body can be bound to.

    Declaration order is preference order: raw byte sequences win over the
    HttpData wrapper, so ``object`` or ``Any`` yields a bytearray.
    """

    BYTE_ARRAY = "bytearray"
    BYTES = "bytes"
    HTTP_DATA = "http_data"

    @property
    def python_type(self) -> type:
        return _SHAPE_TYPES[self]

    @classmethod
    def resolve(cls, expected_type: ExpectedType) -> BinaryShape | None:
        """Return the first shape assignable to ``expected_type``, if any."""
        for shape in cls:
            if accepts(expected_type, shape.python_type):
                return shape
        return None


_SHAPE_TYPES: dict[BinaryShape, type] = {
    BinaryShape.BYTE_ARRAY: bytearray,
    BinaryShape.BYTES: bytes,
    BinaryShape.HTTP_DATA: HttpData,
}


@dataclass(frozen=True, slots=True)
class ByteArrayRequestConverter:
    """Converts binary request bodies to bytearray, bytes or HttpData.

    Stateless; one instance can serve every request on every thread.
    """

    def can_handle(self, request: AggregatedHttpRequest, expected_type: ExpectedType, /) -> bool:
        if BinaryShape.resolve(expected_type) is None:
            return False

        content_type = request.headers.content_type
        if content_type is None:
            return True
        return any(content_type.belongs_to(mt) for mt in _BINARY_MEDIA_TYPES)

    def convert(self, request: AggregatedHttpRequest, expected_type: ExpectedType, /) -> Any:
        """Materialize the body as the requested shape.

        bytearray results are fresh copies; HttpData results share the
        request's immutable payload.

        Raises:
            UnsupportedResultTypeError: ``expected_type`` is not a binary shape.
        """
        match BinaryShape.resolve(expected_type):
            case BinaryShape.BYTE_ARRAY:
                return request.content.array()
            case BinaryShape.BYTES:
                return request.content.to_bytes()
            case BinaryShape.HTTP_DATA:
                return request.content
        raise UnsupportedResultTypeError(expected_type, type(self).__name__)
