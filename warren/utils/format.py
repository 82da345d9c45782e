from __future__ import annotations

import traceback
from collections.abc import Iterable
from typing import Any


def format_items(name: str, items: Iterable[tuple[str, Any]]) -> str:
    parts = ', '.join(f'{key}={value!r}' for key, value in items)
    return f'{name}({elide(parts)})'


def elide(value: str, width: int = 100) -> str:
    return value if len(value) <= width else f'{value[: width - 3]}...'


def format_exc(exc: BaseException) -> str:
    return traceback.format_exception_only(exc.__class__, exc)[0].strip()
