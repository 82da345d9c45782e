import dataclasses
import datetime
import decimal
import enum
import pickle
import uuid

import msgpack
import msgspec
import pytest

from warren import codec, errors
from warren.codec.json import JsonCodec
from warren.codec.msgpack import MsgpackCodec
from warren.codec.term import TermCodec


class Point(msgspec.Struct):
    x: int
    y: int


class Kind(enum.Enum):
    direct = 1


@dataclasses.dataclass
class Size:
    width: int
    height: int


def test_create_by_name():
    assert isinstance(codec.create('msgpack'), MsgpackCodec)
    assert isinstance(codec.create('json'), JsonCodec)
    assert isinstance(codec.create('term'), TermCodec)


def test_create_passthrough():
    c = TermCodec(protocol=3)
    assert codec.create(c) is c


def test_create_kwargs():
    assert codec.create('term', protocol=3).protocol == 3


def test_create_unknown():
    with pytest.raises(errors.RegistryError):
        codec.create('nope')


def test_registry_names():
    codec.create('json')
    assert {'msgpack', 'json', 'term'} <= set(codec.REGISTRY.names())


##
## documents
##


@pytest.mark.parametrize(
    'value, expected',
    [
        ({'a': 1}, {'a': 1}),
        ([('a', 1), ('b', [1, 2])], {'a': 1, 'b': [1, 2]}),
        ([], {}),
        (Point(1, 2), {'x': 1, 'y': 2}),
        (Size(3, 4), {'width': 3, 'height': 4}),
        ({'t': (1, 2)}, {'t': [1, 2]}),
        ({'s': {3}}, {'s': [3]}),
        ({'deep': [(1, (2,))]}, {'deep': [[1, [2]]]}),
        ({1: 'one'}, {'1': 'one'}),
        ({'n': {2: 'two'}}, {'n': {'2': 'two'}}),
    ],
)
def test_document(value, expected):
    assert MsgpackCodec().document(value) == expected


@pytest.mark.parametrize('value', [42, 'text', b'bytes', [1, 2], None, 1.5])
def test_document_not_a_document(value):
    with pytest.raises(errors.EncodeError):
        MsgpackCodec().document(value)


def test_document_keeps_bytes_for_msgpack():
    assert MsgpackCodec().document({'b': b'\x00'}) == {'b': b'\x00'}


def test_msgpack_roundtrip():
    c = MsgpackCodec()
    value = {'a': [1, 2, {'b': b'\x00\xff'}], 'c': None, 'd': 1.5, 'e': 'text', 'f': True}
    assert c._decode(c._encode(value)) == value


def test_json_roundtrip():
    c = JsonCodec()
    value = {'a': [1, 'x'], 'b': {'c': None}}
    assert c._decode(c._encode(value)) == value


def test_json_is_text():
    assert JsonCodec()._encode({'a': 1}) == b'{"a":1}'


@pytest.mark.parametrize(
    'c, data',
    [
        (MsgpackCodec(), b'\xc1'),
        (MsgpackCodec(), b'\x81\xa1a'),
        (MsgpackCodec(), b''),
        (MsgpackCodec(), msgpack.packb({'a': 1}) + b'\x00'),
        (JsonCodec(), b'{"a": '),
        (JsonCodec(), b'not json'),
    ],
)
def test_document_parse_error(c, data):
    with pytest.raises(errors.DocumentError):
        c._decode(data)


@pytest.mark.parametrize(
    'c, data',
    [
        (MsgpackCodec(), msgpack.packb([1, 2])),
        (MsgpackCodec(), msgpack.packb(42)),
        (JsonCodec(), b'[1, 2]'),
        (JsonCodec(), b'"text"'),
    ],
)
def test_document_root_not_mapping(c, data):
    with pytest.raises(errors.DocumentError, match='must be a mapping'):
        c._decode(data)


def test_document_strict_keys():
    data = msgpack.packb({1: 'one'})
    with pytest.raises(errors.DocumentError):
        MsgpackCodec()._decode(data)
    assert MsgpackCodec(strict_map_key=False)._decode(data) == {1: 'one'}


def test_document_unhashable_key():
    data = msgpack.packb({(1, 2): 'x'})
    with pytest.raises(errors.DocumentError):
        MsgpackCodec(strict_map_key=False)._decode(data)


def test_document_model_matches_reflate():
    c = MsgpackCodec()
    value = {'t': (1, 2), 'n': {'s': frozenset(['a'])}}
    assert c.document(value) == c._decode(c._encode(value))


def test_reflate_errors_propagate():
    class Broken(MsgpackCodec):
        def reflate(self, doc):
            raise RuntimeError('bug')

    c = Broken()
    with pytest.raises(RuntimeError):
        c._decode(c._encode({'a': 1}))


def test_encode_error_context():
    with pytest.raises(errors.EncodeError, match='msgpack'):
        MsgpackCodec()._encode(object())


##
## native terms
##


@pytest.mark.parametrize(
    'value',
    [
        42,
        -1.25,
        'text',
        b'bytes',
        None,
        (1, 'two', 3.0),
        [1, [2, [3]]],
        {'a': {1: (2,)}},
        {1, 2, 3},
        frozenset(['a']),
        bytearray(b'buf'),
        complex(1, 2),
        decimal.Decimal('1.10'),
        datetime.datetime(2024, 1, 2, 3, 4, 5, tzinfo=datetime.timezone.utc),
        datetime.date(2024, 1, 2),
        datetime.timedelta(seconds=5),
        uuid.UUID('12345678-1234-5678-1234-567812345678'),
    ],
)
def test_term_roundtrip(value):
    c = TermCodec()
    assert c._decode(c._encode(value)) == value


@pytest.mark.parametrize('protocol', range(3, pickle.HIGHEST_PROTOCOL + 1))
def test_term_protocols(protocol):
    c = TermCodec(protocol=protocol)
    value = {'a': [1, 2], 'b': {3}, 'c': bytearray(b'x'), 'd': b'raw', 'e': frozenset([4])}
    assert c._decode(c._encode(value)) == value


@pytest.mark.parametrize('protocol', [-1, 0, 1, 2, pickle.HIGHEST_PROTOCOL + 1])
def test_term_unsupported_protocols(protocol):
    with pytest.raises(ValueError, match='unsupported pickle protocol'):
        TermCodec(protocol=protocol)


@pytest.mark.parametrize(
    'value', [Size(1, 2), Point(1, 2), Kind.direct, {'nested': [Size(3, 4)]}]
)
def test_term_encode_rejects_globals(value):
    with pytest.raises(errors.EncodeError, match='global not allowed'):
        TermCodec()._encode(value)


def test_term_rejects_globals():
    data = pickle.dumps(Size(1, 2))
    with pytest.raises(errors.MalformedPayload, match='global not allowed'):
        TermCodec()._decode(data)


def test_term_rejects_trailing_bytes():
    with pytest.raises(errors.MalformedPayload, match='trailing'):
        TermCodec()._decode(pickle.dumps(1) + b'x')


@pytest.mark.parametrize('data', [b'', b'\xc1', b'\x80\x04'])
def test_term_malformed(data):
    with pytest.raises(errors.MalformedPayload):
        TermCodec()._decode(data)
