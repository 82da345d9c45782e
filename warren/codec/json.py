"""JSON document codec."""

from __future__ import annotations

from typing import Any

from msgspec import DecodeError, json

from . import DocumentCodec


class JsonCodec(DocumentCodec):
    """Codec that serializes documents as JSON text."""

    NAME = 'json'
    PARSE_ERRORS = (DecodeError,)

    def dumps(self, doc: dict[str, Any]) -> bytes:
        """Encode a document to JSON bytes."""
        return json.encode(doc)

    def loads(self, data: bytes) -> Any:
        """Decode JSON bytes into a document."""
        return json.decode(data)
