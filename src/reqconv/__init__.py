"""reqconv: Request body converters for aggregated HTTP requests.

All core types are exported from this module for flat imports:

    from reqconv import ConverterChain, RegistryBuilder, parse_chain_config

HTTP-specific types live in reqconv.http.
"""

__version__ = "0.1.0"

# Chain
from reqconv._chain import (
    MAX_CONVERTERS,
    ConverterChain,
    ConverterError,
    NoConverterFoundError,
    UnsupportedResultTypeError,
)

# Config types (see reqconv._config for details)
from reqconv._config import (
    ChainConfig,
    ConfigParseError,
    TypedConfig,
    load_chain_config,
    parse_chain_config,
)

# Registry (see reqconv._registry for details)
from reqconv._registry import (
    InvalidConfigError,
    Registry,
    RegistryBuilder,
    TooManyConvertersError,
    UnknownTypeUrlError,
)

# Protocols
from reqconv._types import ExpectedType, RequestConverter, accepts

__all__ = [
    # Protocols
    "RequestConverter",
    "ExpectedType",
    "accepts",
    # Chain
    "ConverterChain",
    "ConverterError",
    "UnsupportedResultTypeError",
    "NoConverterFoundError",
    "MAX_CONVERTERS",
    # Config types
    "TypedConfig",
    "ChainConfig",
    "ConfigParseError",
    "parse_chain_config",
    "load_chain_config",
    # Registry
    "RegistryBuilder",
    "Registry",
    "UnknownTypeUrlError",
    "InvalidConfigError",
    "TooManyConvertersError",
]
