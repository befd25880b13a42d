"""Type registry for config-driven converter chains.

- RegistryBuilder → .build() → Registry (immutable)
- Factories are plain callables: (config: dict) → RequestConverter
- load_chain() resolves each configured type_url, in order

Example::

    builder = RegistryBuilder()
    builder = reqconv.http.register(builder)
    registry = builder.build()

    chain = registry.load_chain(load_chain_config("converters.yaml"))
    body = chain.convert(request, bytes)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, TypeAlias

from reqconv._chain import MAX_CONVERTERS, ConverterChain, ConverterError

if TYPE_CHECKING:
    from collections.abc import Callable

    from reqconv._config import ChainConfig, TypedConfig
    from reqconv._types import RequestConverter

logger = logging.getLogger(__name__)

# ═══════════════════════════════════════════════════════════════════════════════
# Error types
# ═══════════════════════════════════════════════════════════════════════════════


class UnknownTypeUrlError(ConverterError):
    """A type_url was not found in the registry."""

    def __init__(self, type_url: str, available: list[str]) -> None:
        self.type_url = type_url
        self.available = sorted(available)
        if self.available:
            registered = ", ".join(self.available)
            msg = (
                f"unknown converter type_url: {type_url!r} "
                f"(registered: {registered})"
            )
        else:
            msg = (
                f"unknown converter type_url: {type_url!r} "
                "(no converter types are registered)"
            )
        super().__init__(msg)


class InvalidConfigError(ConverterError):
    """A converter factory rejected its config payload."""

    def __init__(self, type_url: str, source: str) -> None:
        self.type_url = type_url
        self.source = source
        super().__init__(f"invalid config for {type_url}: {source}")


class TooManyConvertersError(ConverterError):
    """Config lists more converters than a chain may hold."""

    def __init__(self, count: int, max_: int) -> None:
        self.count = count
        self.max = max_
        super().__init__(f"too many converters: {count} exceeds maximum {max_}")


# ═══════════════════════════════════════════════════════════════════════════════
# Builder
# ═══════════════════════════════════════════════════════════════════════════════

ConverterFactory: TypeAlias = "Callable[[dict[str, Any]], RequestConverter]"


class RegistryBuilder:
    """Builder for constructing a Registry.

    Register converter factories with type URLs, then call build() to
    produce an immutable Registry. No registration after build.
    """

    def __init__(self) -> None:
        self._factories: dict[str, ConverterFactory] = {}

    def converter(self, type_url: str, factory: ConverterFactory) -> RegistryBuilder:
        """Register a converter factory with a type URL."""
        self._factories[type_url] = factory
        return self

    def build(self) -> Registry:
        """Freeze the registry."""
        return Registry(_factories=MappingProxyType(dict(self._factories)))


# ═══════════════════════════════════════════════════════════════════════════════
# Registry
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Registry:
    """Immutable registry of converter factories.

    Constructed via RegistryBuilder. Use load_chain() to turn config into
    a runtime ConverterChain.
    """

    _factories: MappingProxyType[str, ConverterFactory] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def load_chain(self, config: ChainConfig) -> ConverterChain:
        """Load a ConverterChain from configuration.

        Raises:
            TooManyConvertersError: more entries than MAX_CONVERTERS
            UnknownTypeUrlError: type_url not registered
            InvalidConfigError: factory rejected the payload
        """
        if len(config.converters) > MAX_CONVERTERS:
            raise TooManyConvertersError(len(config.converters), MAX_CONVERTERS)

        chain = ConverterChain(
            converters=tuple(self._load_converter(c) for c in config.converters)
        )
        logger.debug(
            "loaded converter chain: %s",
            [c.type_url for c in config.converters],
        )
        return chain

    @property
    def converter_count(self) -> int:
        """Number of registered converter types."""
        return len(self._factories)

    def contains(self, type_url: str) -> bool:
        """Check if a converter type URL is registered."""
        return type_url in self._factories

    def type_urls(self) -> list[str]:
        """Return all registered type URLs (sorted)."""
        return sorted(self._factories.keys())

    def _load_converter(self, config: TypedConfig) -> RequestConverter:
        factory = self._factories.get(config.type_url)
        if factory is None:
            raise UnknownTypeUrlError(config.type_url, list(self._factories.keys()))

        try:
            return factory(dict(config.config))
        except Exception as e:
            raise InvalidConfigError(config.type_url, str(e)) from e
