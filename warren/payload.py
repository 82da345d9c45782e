"""Encode and decode message payloads.

Payloads are structured documents by default. Decoding a document that turns
out not to be one retries the same bytes as a native term, so a consumer can
read queues fed by both kinds of producer without knowing which sent what.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from . import codec, errors, logs, utils
from .codec import Codec, DocumentCodec

if TYPE_CHECKING:
    from .records import Message

log = logs.get(__name__)

DOCUMENT = 'msgpack'
TERM = 'term'
DEFAULT_FORMAT = DOCUMENT


def encode(payload: Any, format: str | Codec = DEFAULT_FORMAT) -> bytes:
    """Serialize an application value to payload bytes."""
    return codec.create(format)._encode(payload)


def decode(
    data: bytes | bytearray | memoryview | Message,
    format: str | Codec = DEFAULT_FORMAT,
) -> Any:
    """Deserialize payload bytes, or the payload of a message envelope.

    A structural failure decoding a document falls back to the native term
    format. If that fails too, :class:`~warren.errors.MalformedPayload` is
    raised.
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        data = data.payload

    fmt = codec.create(format)
    if not isinstance(fmt, DocumentCodec):
        return fmt._decode(data)

    try:
        return fmt._decode(data)
    except errors.DocumentError as exc:
        if log.isEnabledFor(logs.DEBUG):
            log.debug('decode: %s, retrying as %s', utils.format.format_exc(exc), TERM)
        doc_exc = exc

    try:
        return codec.create(TERM)._decode(data)
    except errors.MalformedPayload as exc:
        raise errors.MalformedPayload(
            f'not a {fmt.NAME} document ({doc_exc}) or a {TERM} payload ({exc})'
        ) from exc
