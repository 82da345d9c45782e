"""Codec base classes and helpers."""

from __future__ import annotations

import abc
import dataclasses
from collections.abc import Mapping
from typing import Any, ClassVar

import msgspec

from .. import errors, logs, utils
from ..registry import Registry

log = logs.get(__name__)


def create(name: str | Codec, **kwargs: Any) -> Codec:
    """Return a codec by name or pass through existing instances."""
    if isinstance(name, Codec):
        return name
    codec = REGISTRY[name](**kwargs)
    log.debug('codec: %s', codec.NAME)
    return codec


class Codec(abc.ABC):
    """Base class for codecs that know how to encode/decode message payloads."""

    NAME: ClassVar[str]
    DECODE_ERROR: ClassVar[type[errors.DecodeError]] = errors.MalformedPayload

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if 'NAME' in vars(cls):
            REGISTRY[cls.NAME] = cls

    @abc.abstractmethod
    def encode(self, msg: Any) -> bytes:
        """Serialize `msg` into bytes."""
        raise NotImplementedError('abstract')

    @abc.abstractmethod
    def decode(self, data: bytes) -> Any:
        """Deserialize bytes into Python objects."""
        raise NotImplementedError('abstract')

    def _encode(self, msg: Any) -> bytes:
        """Wrapper that provides encoding error context. Used internally."""
        try:
            return self.encode(msg)
        except errors.EncodeError:
            raise
        except Exception as exc:
            raise errors.EncodeError(
                f'{self.NAME}: {exc}: msg={utils.format.elide(repr(msg))}'
            ) from exc

    def _decode(self, data: bytes) -> Any:
        """Wrapper that provides decoding error context. Used internally."""
        try:
            return self.decode(data)
        except errors.DecodeError:
            raise
        except Exception as exc:
            raise self.DECODE_ERROR(
                f'{self.NAME}: {exc}: data={utils.format.elide(repr(data))}'
            ) from exc

    def __repr__(self) -> str:
        return f'<{self.__class__.__name__} {self.NAME!r}>'


REGISTRY: Registry[Codec] = Registry(
    Codec,
    package=__name__,
    error=lambda name: errors.RegistryError(f'unknown codec: {name}'),
)


class DocumentCodec(Codec):
    """Base class for structured-document codecs.

    A document is a mapping with string keys at its root. Application values
    are lowered into that model by :meth:`document` before serializing and
    lifted back by :meth:`reflate` after parsing.

    Only the exceptions listed in `PARSE_ERRORS`, and a root that is not a
    mapping, are reported as :class:`~warren.errors.DocumentError`. Anything
    else raised while decoding propagates unchanged.
    """

    DECODE_ERROR = errors.DocumentError
    PARSE_ERRORS: ClassVar[tuple[type[Exception], ...]] = ()
    BUILTIN_TYPES: ClassVar[tuple[type, ...]] = ()

    @abc.abstractmethod
    def dumps(self, doc: dict[str, Any]) -> bytes:
        """Serialize a document model into bytes."""
        raise NotImplementedError('abstract')

    @abc.abstractmethod
    def loads(self, data: bytes) -> Any:
        """Parse bytes into a document model."""
        raise NotImplementedError('abstract')

    def encode(self, msg: Any) -> bytes:
        return self.dumps(self.document(msg))

    def decode(self, data: bytes) -> Any:
        try:
            doc = self.loads(data)
        except self.PARSE_ERRORS as exc:
            raise errors.DocumentError(
                f'{self.NAME}: {exc}: data={utils.format.elide(repr(data))}'
            ) from exc

        if not isinstance(doc, dict):
            raise errors.DocumentError(
                f'{self.NAME}: document root must be a mapping, not {type(doc).__name__}'
            )
        return self.reflate(doc)

    def _decode(self, data: bytes) -> Any:
        # decode() already reports parse failures; a catch-all here would hide bugs
        return self.decode(data)

    def document(self, value: Any) -> dict[str, Any]:
        """Convert an application value to the document model.

        Accepts mappings, key/value lists of ``(key, value)`` pairs, msgspec
        structs and dataclass instances. Nested values are lowered with
        :func:`msgspec.to_builtins` and mapping keys become strings.
        """
        if isinstance(value, Mapping):
            value = dict(value)
        elif is_proplist(value):
            value = dict(value)
        elif not (isinstance(value, msgspec.Struct) or _is_dataclass_instance(value)):
            raise errors.EncodeError(
                f'{self.NAME}: not a document: {utils.format.elide(repr(value))}'
            )

        doc = msgspec.to_builtins(value, builtin_types=self.BUILTIN_TYPES, str_keys=True)
        doc = _lower(doc)
        if not isinstance(doc, dict):
            # array_like structs lower to lists
            raise errors.EncodeError(
                f'{self.NAME}: not a document: {utils.format.elide(repr(value))}'
            )
        return doc

    def reflate(self, doc: dict[str, Any]) -> Any:
        """Convert a parsed document model back to an application value."""
        return doc


def is_proplist(value: Any) -> bool:
    """Return True if *value* is a list of ``(key, value)`` pairs."""
    if not isinstance(value, (list, tuple)):
        return False
    return all(isinstance(item, tuple) and len(item) == 2 for item in value)


def _lower(value: Any) -> Any:
    """Replace tuples and sets with lists, as they come back from parsing."""
    if isinstance(value, dict):
        return {key: _lower(item) for key, item in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [_lower(item) for item in value]
    return value


def _is_dataclass_instance(value: Any) -> bool:
    return dataclasses.is_dataclass(value) and not isinstance(value, type)
