"""Inspect message properties and resolve reply addresses."""

from __future__ import annotations

from typing import Any, AnyStr

from . import errors
from .marshaller import record_items
from .records import UNSET, BasicProperties, Message


def decode_properties(message: Message | BasicProperties) -> list[tuple[str, Any]]:
    """Return the properties of *message* as a key/value list in schema order."""
    props = message.props if isinstance(message, Message) else message
    return record_items(props)


def is_reply_expected(message: Message | BasicProperties) -> bool:
    """Return True if the sender of *message* asked for a reply."""
    props = message.props if isinstance(message, Message) else message
    return props.reply_to is not UNSET and props.reply_to is not None


def resolve_reply_address(
    message: Message | BasicProperties, source_exchange: AnyStr
) -> tuple[AnyStr, AnyStr]:
    """Return the ``(exchange, routing_key)`` to send a reply to.

    A reply_to of the form ``exchange:routing_key`` names both parts. Only
    the first colon separates them, so a routing key may contain colons. A
    reply_to without a colon is a routing key on *source_exchange*.
    """
    if not is_reply_expected(message):
        raise errors.MissingReplyTo('message has no reply_to property')

    reply_to = dict(decode_properties(message))['reply_to']
    sep = b':' if isinstance(reply_to, (bytes, bytearray)) else ':'
    parts = reply_to.split(sep, 1)

    if len(parts) == 2:
        exchange, routing_key = parts
        return exchange, routing_key
    return source_exchange, parts[0]


is_rpc = is_reply_expected
reply_to = resolve_reply_address
