"""HttpHeaders: read-only, case-insensitive header set."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from reqconv.http._media_type import MediaType

CONTENT_TYPE = "content-type"


@dataclass(frozen=True, slots=True)
class HttpHeaders(Mapping[str, str]):
    """Immutable header set with case-insensitive lookup.

    Keys are lowercased at construction. The Content-Type value is parsed
    eagerly, so a malformed header fails here with MediaTypeParseError
    rather than later during conversion.
    """

    raw: Mapping[str, str] = field(default_factory=dict)

    _lower: MappingProxyType[str, str] = field(init=False, repr=False, compare=False)
    _content_type: MediaType | None = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        lower = {k.lower(): v for k, v in self.raw.items()}
        object.__setattr__(self, "raw", MappingProxyType(dict(self.raw)))
        object.__setattr__(self, "_lower", MappingProxyType(lower))

        value = lower.get(CONTENT_TYPE)
        content_type = MediaType.parse(value) if value is not None else None
        object.__setattr__(self, "_content_type", content_type)

    @property
    def content_type(self) -> MediaType | None:
        """The parsed Content-Type, or None when the header is absent."""
        return self._content_type

    def __getitem__(self, name: str) -> str:
        return self._lower[name.lower()]

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._lower

    def __iter__(self) -> Iterator[str]:
        return iter(self._lower)

    def __len__(self) -> int:
        return len(self._lower)

    def __hash__(self) -> int:
        return hash(frozenset(self._lower.items()))
