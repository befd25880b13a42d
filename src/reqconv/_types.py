"""Core protocols and type compatibility for reqconv.

- RequestConverter is the two-operation port every strategy in a chain
  implements: decide applicability, then convert.
- ExpectedType is whatever a handler parameter declares: a class or a
  typing form such as ``bytes | None`` or ``Annotated[bytes, ...]``.
- accepts() answers "can a value of this class be bound to that
  declaration?" without ever raising.
"""

from __future__ import annotations

import types
from typing import Annotated, Any, Protocol, TypeAlias, Union, get_args, get_origin, runtime_checkable

# Handler-declared result type. Kept as Any because typing forms
# (unions, Annotated, generic aliases) are not ``type`` instances.
ExpectedType: TypeAlias = Any


@runtime_checkable
class RequestConverter(Protocol):
    """A decoding strategy for aggregated request bodies.

    can_handle() must be side-effect free and must not raise. convert() is
    only called after can_handle() returned True for the same arguments.
    """

    def can_handle(self, request: Any, expected_type: ExpectedType, /) -> bool: ...

    def convert(self, request: Any, expected_type: ExpectedType, /) -> Any: ...


def accepts(expected_type: ExpectedType, candidate: type) -> bool:
    """Check whether ``candidate`` instances satisfy ``expected_type``.

    - ``Any`` and ``object`` accept everything
    - unions accept if any member accepts
    - ``Annotated[T, ...]`` is checked as ``T``
    - parametrized generics are checked by their origin class
    - plain classes use issubclass()

    Anything else (strings, None, TypeVars, protocols that reject
    issubclass) is not assignable.
    """
    if expected_type is Any or expected_type is object:
        return True

    origin = get_origin(expected_type)
    if origin is Annotated:
        return accepts(get_args(expected_type)[0], candidate)
    if origin is Union or origin is types.UnionType:
        return any(accepts(arg, candidate) for arg in get_args(expected_type))
    if isinstance(origin, type):
        expected_type = origin

    if not isinstance(expected_type, type):
        return False
    try:
        return issubclass(candidate, expected_type)
    except TypeError:
        # Protocols with non-method members refuse issubclass().
        return False
