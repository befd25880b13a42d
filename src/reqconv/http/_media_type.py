"""MediaType: parsed Content-Type descriptor.

Holds the base type/subtype pair plus parameters. Comparison via
belongs_to() looks at the base pair only; parameters such as charset
never influence the result.

Tokens are validated with ``google-re2`` against the RFC 7230 token grammar.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType

import re2

# RFC 7230 §3.2.6 tchar, quoted-string and quoted-pair
_TCHAR = r"[!#$%&'*+.^_`|~0-9A-Za-z-]+"
_QUOTED = r'"(?:[^"\\]|\\.)*"'
_TOKEN = re2.compile(_TCHAR)

# One ";"-led parameter. The name=value part is optional so empty
# segments ("a/b;;" or a trailing ";") are tolerated.
_PARAM = rf"[ \t]*;[ \t]*(?:({_TCHAR})[ \t]*=[ \t]*({_TCHAR}|{_QUOTED})[ \t]*)?"
_PARAM_RE = re2.compile(_PARAM)
_PARAMS_RE = re2.compile(rf"(?:{_PARAM})*")
_QUOTED_PAIR = re2.compile(r"\\(.)")

_WILDCARD = "*"


class MediaTypeParseError(ValueError):
    """A media type string could not be parsed."""

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"invalid media type {text!r}: {reason}")


@dataclass(frozen=True, slots=True)
class MediaType:
    """An immutable type/subtype pair with optional parameters.

    Type, subtype and parameter names are lowercased at construction.
    Parameter values keep their case.
    """

    type: str
    subtype: str
    parameters: MappingProxyType[str, str] = field(
        default_factory=lambda: MappingProxyType({}), hash=False
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "type", self.type.lower())
        object.__setattr__(self, "subtype", self.subtype.lower())
        object.__setattr__(
            self,
            "parameters",
            MappingProxyType({k.lower(): v for k, v in self.parameters.items()}),
        )

    @classmethod
    def parse(cls, text: str) -> MediaType:
        """Parse a Content-Type header value.

        Raises:
            MediaTypeParseError: If the value is not ``type/subtype[; k=v]*``.
        """
        base, sep, rest = text.partition(";")
        base = base.strip()
        if "/" not in base:
            raise MediaTypeParseError(text, "missing '/' between type and subtype")

        type_, subtype = (part.strip() for part in base.split("/", 1))
        for token in (type_, subtype):
            if not _TOKEN.fullmatch(token):
                raise MediaTypeParseError(text, f"invalid token {token!r}")

        rest = (sep + rest).rstrip(" \t")
        if not _PARAMS_RE.fullmatch(rest):
            raise MediaTypeParseError(text, f"malformed parameters {rest!r}")

        params: dict[str, str] = {}
        for m in _PARAM_RE.finditer(rest):
            name, value = m.group(1), m.group(2)
            if name is None:
                continue
            params[name] = _unquote(value)

        return cls(type_, subtype, MappingProxyType(params))

    @property
    def base(self) -> str:
        """The ``type/subtype`` pair without parameters."""
        return f"{self.type}/{self.subtype}"

    def belongs_to(self, media_range: MediaType) -> bool:
        """Check whether this type falls within ``media_range``.

        Only the type/subtype pair is compared. A ``*`` in the range matches
        any type or subtype.
        """
        if media_range.type != _WILDCARD and media_range.type != self.type:
            return False
        return media_range.subtype in (_WILDCARD, self.subtype)

    def parameter(self, name: str) -> str | None:
        """Get a parameter value by name (case-insensitive)."""
        return self.parameters.get(name.lower())

    def __str__(self) -> str:
        params = "".join(f"; {k}={_quote(v)}" for k, v in self.parameters.items())
        return self.base + params


def _unquote(value: str) -> str:
    if not value.startswith('"'):
        return value
    return _QUOTED_PAIR.sub(lambda m: m.group(1), value[1:-1])


def _quote(value: str) -> str:
    if _TOKEN.fullmatch(value):
        return value
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


OCTET_STREAM = MediaType("application", "octet-stream")
APPLICATION_BINARY = MediaType("application", "binary")
