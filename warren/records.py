"""Fixed-schema protocol records.

Each record is a frozen, array-like struct: its fields are declared in wire
order and encode positionally. A field that was never given a value holds
:data:`msgspec.UNSET`.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, ClassVar

import msgspec
from msgspec import UNSET, UnsetType

from . import errors
from .registry import Registry

__all__ = [
    'UNSET',
    'BasicConsume',
    'BasicProperties',
    'BasicPublish',
    'ExchangeDeclare',
    'Message',
    'QueueBind',
    'QueueDeclare',
    'Record',
    'UnsetType',
    'fields',
    'get_class',
]

NO_DEFAULTS: Mapping[str, Any] = MappingProxyType({})


class Record(msgspec.Struct, frozen=True, array_like=True):
    NAME: ClassVar[str]
    DEFAULTS: ClassVar[Mapping[str, Any]] = NO_DEFAULTS

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if 'NAME' in vars(cls):
            REGISTRY[cls.NAME] = cls

    def __repr__(self) -> str:
        # only show fields that were set
        items = ', '.join(
            f'{name}={value!r}'
            for name, value in zip(self.__struct_fields__, msgspec.structs.astuple(self))
            if value is not UNSET
        )
        return f'{self.__class__.__name__}({items})'


REGISTRY: Registry[Record] = Registry(Record, error=errors.UnknownSchema)


def get_class(name: str | type[Record]) -> type[Record]:
    """Return the record class registered as *name*."""
    if isinstance(name, type) and issubclass(name, Record):
        return name
    return REGISTRY[name]


def fields(record: Record | type[Record]) -> tuple[str, ...]:
    """Return the field names of *record* in schema order."""
    return record.__struct_fields__


class BasicProperties(Record):
    """Content header properties of a basic-class message (``P_basic``)."""

    NAME = 'P_basic'

    content_type: Any = UNSET
    content_encoding: Any = UNSET
    headers: Any = UNSET
    delivery_mode: Any = UNSET
    priority: Any = UNSET
    correlation_id: Any = UNSET
    reply_to: Any = UNSET
    expiration: Any = UNSET
    message_id: Any = UNSET
    timestamp: Any = UNSET
    type: Any = UNSET
    user_id: Any = UNSET
    app_id: Any = UNSET
    cluster_id: Any = UNSET


class ExchangeDeclare(Record):
    NAME = 'exchange.declare'
    DEFAULTS = MappingProxyType({'ticket': 0, 'type': b'direct', 'arguments': {}})

    ticket: Any = UNSET
    exchange: Any = UNSET
    type: Any = UNSET
    passive: Any = UNSET
    durable: Any = UNSET
    auto_delete: Any = UNSET
    internal: Any = UNSET
    nowait: Any = UNSET
    arguments: Any = UNSET


class QueueDeclare(Record):
    NAME = 'queue.declare'
    DEFAULTS = MappingProxyType({'ticket': 0, 'arguments': {}})

    ticket: Any = UNSET
    queue: Any = UNSET
    passive: Any = UNSET
    durable: Any = UNSET
    exclusive: Any = UNSET
    auto_delete: Any = UNSET
    nowait: Any = UNSET
    arguments: Any = UNSET


class QueueBind(Record):
    NAME = 'queue.bind'
    DEFAULTS = MappingProxyType({'ticket': 0, 'arguments': {}})

    ticket: Any = UNSET
    queue: Any = UNSET
    exchange: Any = UNSET
    routing_key: Any = UNSET
    nowait: Any = UNSET
    arguments: Any = UNSET


class BasicConsume(Record):
    NAME = 'basic.consume'
    DEFAULTS = MappingProxyType({'ticket': 0, 'arguments': {}, 'consumer_tag': b''})

    ticket: Any = UNSET
    queue: Any = UNSET
    consumer_tag: Any = UNSET
    no_local: Any = UNSET
    no_ack: Any = UNSET
    exclusive: Any = UNSET
    nowait: Any = UNSET
    arguments: Any = UNSET


class BasicPublish(Record):
    NAME = 'basic.publish'
    DEFAULTS = MappingProxyType({'ticket': 0})

    ticket: Any = UNSET
    exchange: Any = UNSET
    routing_key: Any = UNSET
    mandatory: Any = UNSET
    immediate: Any = UNSET


class Message(msgspec.Struct, frozen=True):
    """A message envelope as handed over by the transport."""

    props: BasicProperties = msgspec.field(default_factory=BasicProperties)
    payload: bytes = b''
