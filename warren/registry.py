"""Registry of named classes with lazy import of their defining modules."""

from __future__ import annotations

import importlib
from collections.abc import Callable
from typing import Generic, TypeVar

from . import errors, logs

log = logs.get(__name__)

T = TypeVar('T')


class Registry(Generic[T]):
    """Keeps a registry of subclasses by name.

    When *package* is given, a missing name is looked up once more after
    importing ``<package>.<name>``, so plug-in modules only need to be
    importable to be found.
    """

    def __init__(
        self,
        base_type: type[T],
        package: str | None = None,
        error: Callable[[str], Exception] | None = None,
    ) -> None:
        self._base_type = base_type
        self._package = package
        self._error = error or (lambda name: errors.RegistryError(f'not registered: {name}'))
        self._registry: dict[str, type[T]] = {}

    def __getitem__(self, name: str) -> type[T]:
        try:
            return self._registry[name]
        except KeyError:
            pass

        if self._package and name.isidentifier():
            modname = f'{self._package}.{name}'
            log.debug('loading: %s', modname)
            try:
                importlib.import_module(modname)
            except ModuleNotFoundError as exc:
                if exc.name != modname:
                    raise
            else:
                if name in self._registry:
                    return self._registry[name]

        raise self._error(name)

    def __setitem__(self, name: str, cls: type[T]) -> None:
        if not issubclass(cls, self._base_type):
            raise errors.RegistryError(f'not a {self._base_type.__name__}: {cls!r}')
        self._registry[name] = cls

    def names(self) -> tuple[str, ...]:
        """Return all registered names in insertion order."""
        return tuple(self._registry.keys())
