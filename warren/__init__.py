"""Payload codec and protocol record marshalling for AMQP clients."""

from __future__ import annotations

from . import codec, errors, ident, logs, marshaller, payload, properties, records
from .codec import Codec, DocumentCodec
from .ident import join_as_name, join_as_text, to_binary_identifier, to_text
from .marshaller import (
    build_properties,
    build_record,
    record_items,
    to_amqp_props,
    to_basic_consume,
    to_basic_publish,
    to_exchange_declare,
    to_queue_bind,
    to_queue_declare,
)
from .payload import decode, encode
from .properties import (
    decode_properties,
    is_reply_expected,
    is_rpc,
    reply_to,
    resolve_reply_address,
)
from .records import UNSET, BasicProperties, Message, Record

__all__ = [
    'UNSET',
    'BasicProperties',
    'Codec',
    'DocumentCodec',
    'Message',
    'Record',
    'build_properties',
    'build_record',
    'codec',
    'decode',
    'decode_properties',
    'encode',
    'errors',
    'ident',
    'is_reply_expected',
    'is_rpc',
    'join_as_name',
    'join_as_text',
    'logs',
    'marshaller',
    'payload',
    'properties',
    'record_items',
    'records',
    'reply_to',
    'resolve_reply_address',
    'to_amqp_props',
    'to_basic_consume',
    'to_basic_publish',
    'to_binary_identifier',
    'to_exchange_declare',
    'to_queue_bind',
    'to_queue_declare',
    'to_text',
]
