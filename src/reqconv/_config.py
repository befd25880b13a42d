"""Config types for config-driven converter chains.

Config-driven construction path:
  dict / YAML file → parse_chain_config() → ChainConfig → Registry.load_chain() → ConverterChain

Shape::

    converters:
      - type_url: reqconv.http.v1.ByteArrayRequestConverter
        config: {}
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml


@dataclass(frozen=True, slots=True)
class TypedConfig:
    """Reference to a registered converter type with its configuration.

    - type_url identifies the registered factory
    - config carries the type-specific payload
    """

    type_url: str
    config: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class ChainConfig:
    """Ordered converter references. Order is chain order."""

    converters: tuple[TypedConfig, ...]


class ConfigParseError(Exception):
    """Error parsing a config dict into config types."""


def parse_chain_config(data: dict[str, Any]) -> ChainConfig:
    """Parse a dict into a ChainConfig.

    Raises:
        ConfigParseError: If the dict is malformed.
    """
    if not isinstance(data, dict):
        msg = f"expected dict, got {type(data).__name__}"
        raise ConfigParseError(msg)

    raw_converters = data.get("converters")
    if raw_converters is None:
        msg = "missing required field 'converters'"
        raise ConfigParseError(msg)
    if not isinstance(raw_converters, list):
        msg = f"'converters' must be a list, got {type(raw_converters).__name__}"
        raise ConfigParseError(msg)

    return ChainConfig(converters=tuple(_parse_typed_config(c) for c in raw_converters))


def load_chain_config(path: str | Path) -> ChainConfig:
    """Read a YAML (or JSON) file and parse it into a ChainConfig.

    Raises:
        ConfigParseError: If the file is not valid YAML or is malformed.
    """
    with Path(path).open(encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            msg = f"invalid YAML in {path}: {e}"
            raise ConfigParseError(msg) from e
    return parse_chain_config(data)


def _parse_typed_config(data: dict[str, Any]) -> TypedConfig:
    """Parse a typed config dict."""
    if not isinstance(data, dict):
        msg = f"converter entry must be a dict, got {type(data).__name__}"
        raise ConfigParseError(msg)

    if "type_url" not in data:
        msg = "converter entry missing required field 'type_url'"
        raise ConfigParseError(msg)

    type_url = data["type_url"]
    if not isinstance(type_url, str):
        msg = f"type_url must be a string, got {type(type_url).__name__}"
        raise ConfigParseError(msg)

    config = data.get("config")
    if config is None:
        config = {}
    if not isinstance(config, dict):
        msg = f"config must be a dict, got {type(config).__name__}"
        raise ConfigParseError(msg)

    return TypedConfig(type_url=type_url, config=config)
