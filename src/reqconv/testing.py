"""Test utilities for reqconv.

Provides a request builder and a configurable stub converter for use in
tests and examples. These are NOT real decoders; they exist to exercise
chains and registries without writing a converter per test.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from reqconv._types import accepts
from reqconv.http._request import AggregatedHttpRequest

if TYPE_CHECKING:
    from reqconv._registry import RegistryBuilder
    from reqconv._types import ExpectedType


def aggregated_request(
    body: bytes | bytearray = b"",
    content_type: str | None = None,
    **headers: str,
) -> AggregatedHttpRequest:
    """Build a POST request with an optional Content-Type.

    Extra keyword headers use underscores for dashes:

    >>> req = aggregated_request(b"\\x01", "application/octet-stream", x_trace_id="t1")
    >>> req.headers["X-Trace-Id"]
    't1'
    """
    all_headers = {k.replace("_", "-"): v for k, v in headers.items()}
    if content_type is not None:
        all_headers["content-type"] = content_type
    return AggregatedHttpRequest.of(headers=all_headers, body=body)


@dataclass(frozen=True, slots=True)
class StubConverter:
    """Accepts one result type and returns a fixed value.

    When ``media_type`` is set, the request's Content-Type base pair must
    equal it (case-insensitive); otherwise any request is accepted.

    >>> from reqconv import ConverterChain
    >>> chain = ConverterChain.of(StubConverter(result_type=str, value="hi"))
    >>> chain.convert(aggregated_request(), str)
    'hi'
    """

    result_type: type
    value: Any = None
    media_type: str | None = None

    def can_handle(self, request: AggregatedHttpRequest, expected_type: ExpectedType, /) -> bool:
        if not accepts(expected_type, self.result_type):
            return False
        if self.media_type is None:
            return True
        content_type = request.headers.content_type
        return content_type is not None and content_type.base == self.media_type.lower()

    def convert(self, request: AggregatedHttpRequest, expected_type: ExpectedType, /) -> Any:
        return self.value


def register(builder: RegistryBuilder) -> RegistryBuilder:
    """Register the test-domain StubConverter type.

    Type URL: reqconv.test.v1.StubConverter
    Config fields: { "value": "...", "media_type": "text/plain" }
    The stub always produces ``str`` results.
    """
    return builder.converter("reqconv.test.v1.StubConverter", _stub_factory)


def _stub_factory(config: dict[str, Any]) -> StubConverter:
    value = config.get("value")
    if not isinstance(value, str):
        msg = "StubConverter requires a 'value' field (string)"
        raise ValueError(msg)
    media_type = config.get("media_type")
    if media_type is not None and not isinstance(media_type, str):
        msg = "StubConverter 'media_type' must be a string"
        raise ValueError(msg)
    return StubConverter(result_type=str, value=value, media_type=media_type)
