"""Getter resolution for Session Core value trees."""

from __future__ import annotations

from .errors import PathNotFoundError
from .model import Null, Value, VArray, VObject


def apply_getter(value: Value, accessor: str) -> Value:
    """Resolve a single getter accessor on a value.

    - VObject: key lookup
    - VArray: 0-based integer index
    - scalars / Null / misses: returns Null
    """
    if isinstance(value, VObject):
        return value.entries.get(accessor, Null)

    if isinstance(value, VArray):
        idx = _index(accessor)
        if idx is not None and idx < len(value.items):
            return value.items[idx]
        return Null

    return Null


def split_path(path: str) -> list[str]:
    """``"DriverInfo.Drivers.0"`` → ``["DriverInfo", "Drivers", "0"]``."""
    path = path.strip()
    if not path:
        return []
    return path.split(".")


def resolve(value: Value, path: str) -> Value:
    """Apply every accessor of the dotted *path*; Null on the first miss."""
    for accessor in split_path(path):
        value = apply_getter(value, accessor)
        if value is Null:
            return Null
    return value


def require(value: Value, path: str) -> Value:
    """Like :func:`resolve` but raise :class:`PathNotFoundError` on a miss.

    A key that is present with a null value is not a miss.
    """
    for accessor in split_path(path):
        if not _has(value, accessor):
            raise PathNotFoundError(path, accessor)
        value = apply_getter(value, accessor)
    return value


def _has(value: Value, accessor: str) -> bool:
    if isinstance(value, VObject):
        return accessor in value.entries
    if isinstance(value, VArray):
        idx = _index(accessor)
        return idx is not None and idx < len(value.items)
    return False


def _index(accessor: str) -> int | None:
    if accessor.isascii() and accessor.isdigit():
        return int(accessor)
    return None
