"""reqconv.http: HTTP request body conversion domain.

Provides the aggregated request view (AggregatedHttpRequest, HttpHeaders,
HttpData, MediaType), the raw-binary converter, and registry registration
for config-driven construction.
"""

from reqconv.http._byte_array import BinaryShape, ByteArrayRequestConverter
from reqconv.http._data import HttpData
from reqconv.http._headers import HttpHeaders
from reqconv.http._media_type import (
    APPLICATION_BINARY,
    OCTET_STREAM,
    MediaType,
    MediaTypeParseError,
)
from reqconv.http._registry import register
from reqconv.http._request import AggregatedHttpRequest

__all__ = [
    # Request view
    "AggregatedHttpRequest",
    "HttpHeaders",
    "HttpData",
    # Media types
    "MediaType",
    "MediaTypeParseError",
    "OCTET_STREAM",
    "APPLICATION_BINARY",
    # Converters
    "BinaryShape",
    "ByteArrayRequestConverter",
    # Registry
    "register",
]
