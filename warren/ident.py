"""Build exchange names and routing keys from mixed-type fragments.

Fragments may be numbers, symbolic names (enum members and booleans) or
strings::

    >>> join_as_name(['orders', '.', 3])
    'orders.3'
    >>> to_binary_identifier(['my', '-', 2])
    b'my-2'

The binary form is meant for identifiers, not message payloads; use
:mod:`warren.payload` for those.
"""

from __future__ import annotations

import enum
import sys
from collections.abc import Iterable, Mapping
from typing import Any

from . import errors, utils


def to_text(value: Any) -> str:
    """Render a single scalar fragment as text."""
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, enum.Enum):
        return value.name
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return repr(value)
    raise errors.UnsupportedType(
        f'cannot convert {type(value).__name__} to text: {utils.format.elide(repr(value))}'
    )


def join_as_text(values: Iterable[Any], sep: str = ' ') -> str:
    """Join the text of each fragment with *sep*."""
    if isinstance(values, (str, bytes, bytearray, Mapping)) or not isinstance(values, Iterable):
        raise errors.UnsupportedType(
            f'expected a sequence of fragments, not {type(values).__name__}'
        )

    parts = [to_text(value) for value in values]
    if not parts:
        raise errors.EmptyInput('cannot join an empty sequence')
    return sep.join(parts)


def join_as_name(values: Iterable[Any], sep: str | None = None) -> str:
    """Join fragments into an interned symbolic name."""
    return sys.intern(join_as_text(values, sep or ''))


def to_binary_identifier(value: Any, encoding: str = 'utf8') -> bytes:
    """Convert a fragment, or a sequence of fragments, to an identifier."""
    if isinstance(value, bytes):
        return value
    if isinstance(value, (bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, (list, tuple)):
        return join_as_text(value, '').encode(encoding)
    return to_text(value).encode(encoding)
