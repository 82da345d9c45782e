"""Convert key/value lists into fixed-schema protocol records."""

from __future__ import annotations

import copy
from collections.abc import Iterable, Mapping
from typing import Any, cast

import msgspec

from . import errors, logs, records, utils
from .records import UNSET, BasicProperties, Record

log = logs.get(__name__)

Items = Mapping[str, Any] | Iterable[tuple[str, Any]]


def build_record(
    schema: str | type[Record],
    items: Items = (),
    defaults: Mapping[str, Any] | None = None,
) -> Record:
    """Build the record named *schema* from a key/value list.

    Fields of the schema's default table that *items* leaves out are filled
    in with their defaults. Explicit values always win over defaults. Any
    other missing field is :data:`~msgspec.UNSET`. Keys that the schema does
    not declare are ignored.
    """
    cls = records.get_class(schema)
    values = _to_dict(items)

    if defaults is None:
        defaults = cls.DEFAULTS
    for name, default in defaults.items():
        if name not in values:
            values[name] = copy.deepcopy(default)

    return _build(cls, values)


def build_properties(items: Items = ()) -> BasicProperties:
    """Build message properties from a key/value list, without defaults."""
    return cast(BasicProperties, _build(BasicProperties, _to_dict(items)))


def record_items(record: Record) -> list[tuple[str, Any]]:
    """Return the key/value view of *record* in schema order."""
    return list(zip(records.fields(record), msgspec.structs.astuple(record)))


def to_queue_declare(items: Items = ()) -> records.QueueDeclare:
    return cast(records.QueueDeclare, build_record(records.QueueDeclare, items))


def to_basic_consume(items: Items = ()) -> records.BasicConsume:
    return cast(records.BasicConsume, build_record(records.BasicConsume, items))


def to_exchange_declare(items: Items = ()) -> records.ExchangeDeclare:
    return cast(records.ExchangeDeclare, build_record(records.ExchangeDeclare, items))


def to_queue_bind(items: Items = ()) -> records.QueueBind:
    return cast(records.QueueBind, build_record(records.QueueBind, items))


def to_basic_publish(items: Items = ()) -> records.BasicPublish:
    return cast(records.BasicPublish, build_record(records.BasicPublish, items))


to_amqp_props = build_properties


def _to_dict(items: Items) -> dict[str, Any]:
    if isinstance(items, Mapping):
        return dict(items)

    values: dict[str, Any] = {}
    for name, value in items:
        if name in values:
            raise errors.DuplicateField(name)
        values[name] = value
    return values


def _build(cls: type[Record], values: dict[str, Any]) -> Record:
    names = records.fields(cls)

    if log.isEnabledFor(logs.DEBUG):
        extra = sorted(set(values) - set(names), key=str)
        if extra:
            log.debug('%s: ignoring keys: %s', cls.NAME, ', '.join(map(str, extra)))

    record = cls(*(values.get(name, UNSET) for name in names))

    if log.isEnabledFor(logs.DEBUG):
        log.debug('record: %s', utils.format.format_items(cls.NAME, record_items(record)))

    return record
