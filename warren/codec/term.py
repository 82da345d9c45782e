"""Native term codec: Python's own object serialization.

Payloads from this codec can only be read by another Python process. The
unpickler resolves value types only, never arbitrary callables, so a
hostile payload cannot import or run code on the consumer.
"""

from __future__ import annotations

import io
import pickle
import pickletools
from typing import Any

from .. import errors
from . import Codec

MIN_PROTOCOL = 3

GLOBAL_OPCODES = frozenset(['GLOBAL', 'STACK_GLOBAL', 'INST'])

SAFE_GLOBALS = frozenset(
    [
        ('builtins', 'bytearray'),
        ('builtins', 'complex'),
        ('builtins', 'frozenset'),
        ('builtins', 'range'),
        ('builtins', 'set'),
        ('builtins', 'slice'),
        ('collections', 'OrderedDict'),
        ('datetime', 'date'),
        ('datetime', 'datetime'),
        ('datetime', 'time'),
        ('datetime', 'timedelta'),
        ('datetime', 'timezone'),
        ('decimal', 'Decimal'),
        ('uuid', 'UUID'),
    ]
)


class TermUnpickler(pickle.Unpickler):
    """Unpickler restricted to plain value types."""

    def find_class(self, module: str, name: str) -> Any:
        if (module, name) not in SAFE_GLOBALS:
            raise pickle.UnpicklingError(f'global not allowed: {module}.{name}')
        return super().find_class(module, name)


class TermCodec(Codec):
    """Codec for Python's native binary term representation."""

    NAME = 'term'
    DECODE_ERROR = errors.MalformedPayload

    def __init__(self, protocol: int = pickle.DEFAULT_PROTOCOL) -> None:
        # older protocols route bytes and sets through globals the unpickler refuses
        if not MIN_PROTOCOL <= protocol <= pickle.HIGHEST_PROTOCOL:
            raise ValueError(
                f'unsupported pickle protocol: {protocol}'
                f' (expected {MIN_PROTOCOL}-{pickle.HIGHEST_PROTOCOL})'
            )
        self.protocol = protocol

    def encode(self, msg: Any) -> bytes:
        """Serialize a value to bytes, refusing what decode() would reject."""
        data = pickle.dumps(msg, protocol=self.protocol)
        if any(op.name in GLOBAL_OPCODES for op, _, _ in pickletools.genops(data)):
            # resolve the globals the same way the consumer will
            try:
                TermUnpickler(io.BytesIO(data)).load()
            except pickle.UnpicklingError as exc:
                raise pickle.PicklingError(str(exc)) from exc
        return data

    def decode(self, data: bytes) -> Any:
        """Deserialize term bytes, rejecting trailing garbage."""
        fp = io.BytesIO(data)
        value = TermUnpickler(fp).load()
        if fp.tell() != len(data):
            raise pickle.UnpicklingError(f'{len(data) - fp.tell()} trailing bytes')
        return value
