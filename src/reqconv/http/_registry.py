"""HTTP domain registration for the reqconv registry.

Registers the HTTP-domain converters so they can be constructed from
config via type_url lookup.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from reqconv.http._byte_array import ByteArrayRequestConverter

if TYPE_CHECKING:
    from reqconv._registry import RegistryBuilder


def register(builder: RegistryBuilder) -> RegistryBuilder:
    """Register all HTTP-domain converter types.

    Type URLs follow the reqconv namespace convention:
    - reqconv.http.v1.ByteArrayRequestConverter
    """
    return builder.converter(
        "reqconv.http.v1.ByteArrayRequestConverter", _byte_array_factory
    )


def _byte_array_factory(config: dict[str, Any]) -> ByteArrayRequestConverter:
    if config:
        msg = (
            "ByteArrayRequestConverter takes no config, "
            f"got keys: {sorted(config.keys())}"
        )
        raise ValueError(msg)
    return ByteArrayRequestConverter()
