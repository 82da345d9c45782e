from __future__ import annotations


class WarrenError(Exception):
    """Base class for all warren exceptions."""


class UnsupportedType(WarrenError, TypeError):
    """Raised when a value cannot be rendered as an identifier fragment."""


class EmptyInput(WarrenError, ValueError):
    """Raised when joining an empty sequence of identifier fragments."""


class EncodeError(WarrenError):
    """Adds context for errors raised when encoding a payload."""


class DecodeError(WarrenError):
    """Adds context for errors raised when decoding a payload."""


class DocumentError(DecodeError):
    """Raised when bytes are not a well-formed structured document."""


class MalformedPayload(DecodeError):
    """Raised when a payload cannot be decoded in any accepted format."""


class MarshalError(WarrenError):
    """Base class for record marshalling exceptions."""


class UnknownSchema(MarshalError, LookupError):
    """Raised for any attempt to build a record that does not exist."""

    def __init__(self, name: str) -> None:
        super().__init__(f'unknown record schema: {name}')
        self.name = name


class DuplicateField(MarshalError, ValueError):
    """Raised when a key/value list names the same field twice."""

    def __init__(self, field: str) -> None:
        super().__init__(f'duplicate field: {field}')
        self.field = field


class MissingReplyTo(WarrenError, LookupError):
    """Raised when resolving a reply address for a message without reply_to."""


class RegistryError(WarrenError):
    """Raised when a name is not registered."""
