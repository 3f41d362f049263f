"""Value sinks: the constructors the parser builds its output with.

The parser never creates values directly.  It asks a sink for scalars and
empty containers, then fills the containers through :meth:`set_item` and
:meth:`append`.  :class:`TreeSink` produces :mod:`session_core.model`
values; :class:`PythonSink` produces plain ``dict``/``list`` objects.
"""

from __future__ import annotations

from typing import Any, Protocol, TypeVar

from .model import Null, Value, VArray, VBool, VDouble, VInt, VObject, VText

T = TypeVar("T")


class ValueSink(Protocol[T]):
    def null(self) -> T: ...

    def boolean(self, value: bool) -> T: ...

    def integer(self, value: int) -> T: ...

    def double(self, value: float) -> T: ...

    def string(self, value: str) -> T: ...

    def new_object(self) -> T: ...

    def new_array(self) -> T: ...

    def set_item(self, obj: T, key: str, value: T) -> None: ...

    def append(self, array: T, value: T) -> None: ...


class TreeSink:
    """Builds the :data:`~session_core.model.Value` union."""

    def null(self) -> Value:
        return Null

    def boolean(self, value: bool) -> Value:
        return VBool(value)

    def integer(self, value: int) -> Value:
        return VInt(value)

    def double(self, value: float) -> Value:
        return VDouble(value)

    def string(self, value: str) -> Value:
        return VText(value)

    def new_object(self) -> Value:
        return VObject()

    def new_array(self) -> Value:
        return VArray()

    def set_item(self, obj: VObject, key: str, value: Value) -> None:
        obj.entries[key] = value

    def append(self, array: VArray, value: Value) -> None:
        array.items.append(value)


class PythonSink:
    """Builds ``None``/``bool``/``int``/``float``/``str``/``dict``/``list``."""

    def null(self) -> None:
        return None

    def boolean(self, value: bool) -> bool:
        return value

    def integer(self, value: int) -> int:
        return value

    def double(self, value: float) -> float:
        return value

    def string(self, value: str) -> str:
        return value

    def new_object(self) -> dict[str, Any]:
        return {}

    def new_array(self) -> list[Any]:
        return []

    def set_item(self, obj: dict[str, Any], key: str, value: Any) -> None:
        obj[key] = value

    def append(self, array: list[Any], value: Any) -> None:
        array.append(value)
