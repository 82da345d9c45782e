"""Msgpack document codec, the default structured-document format."""

from __future__ import annotations

from typing import Any

import msgpack

from . import DocumentCodec


class MsgpackCodec(DocumentCodec):
    """Codec backed by msgpack for compact binary documents."""

    NAME = 'msgpack'
    # TypeError: unhashable map key with strict_map_key=False
    PARSE_ERRORS = (msgpack.UnpackException, ValueError, TypeError)
    BUILTIN_TYPES = (bytes, bytearray, memoryview)

    def __init__(self, strict_map_key: bool = True) -> None:
        self.strict_map_key = strict_map_key

    def dumps(self, doc: dict[str, Any]) -> bytes:
        """Serialize a document to msgpack bytes."""
        data = msgpack.packb(doc, use_bin_type=True)
        if isinstance(data, bytes):
            return data
        if isinstance(data, bytearray):
            return bytes(data)
        raise TypeError(f'unsupported msgpack result: {type(data).__name__}')

    def loads(self, data: bytes) -> Any:
        """Parse msgpack bytes into a document."""
        return msgpack.unpackb(
            data, use_list=True, raw=False, strict_map_key=self.strict_map_key
        )
