"""Data model for Session Core values."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Union


# ---------------------------------------------------------------------------
# Null: singleton for absent scalars
# ---------------------------------------------------------------------------

class _NullType:
    """Sentinel for a null scalar (an empty ``key:`` value or a miss)."""

    _instance: _NullType | None = None

    def __new__(cls) -> _NullType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Null"

    def __str__(self) -> str:
        return "null"

    def __bool__(self) -> bool:
        return False


Null = _NullType()


# ---------------------------------------------------------------------------
# ContainerKind
# ---------------------------------------------------------------------------

class ContainerKind(Enum):
    Object = auto()
    Array = auto()


# ---------------------------------------------------------------------------
# Value types
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class VBool:
    value: bool

    def __str__(self) -> str:
        return str(self.value).lower()


@dataclass(slots=True)
class VInt:
    value: int  # signed 64-bit range

    def __str__(self) -> str:
        return str(self.value)


@dataclass(slots=True)
class VDouble:
    value: float

    def __str__(self) -> str:
        return repr(self.value)


@dataclass(slots=True)
class VText:
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(slots=True)
class VObject:
    entries: dict[str, Value] = field(default_factory=dict)

    def __str__(self) -> str:
        return "{" + ", ".join(f"{k}: {v}" for k, v in self.entries.items()) + "}"


@dataclass(slots=True)
class VArray:
    items: list[Value] = field(default_factory=list)

    def __str__(self) -> str:
        return "[" + ", ".join(str(v) for v in self.items) + "]"


Value = Union[VBool, VInt, VDouble, VText, VObject, VArray, _NullType]


# ---------------------------------------------------------------------------
# Conversion
# ---------------------------------------------------------------------------

def to_python(value: Value) -> Any:
    """Convert a value tree into plain ``dict``/``list``/scalar objects."""
    if isinstance(value, _NullType):
        return None
    if isinstance(value, (VBool, VInt, VDouble, VText)):
        return value.value
    if isinstance(value, VObject):
        return {k: to_python(v) for k, v in value.entries.items()}
    if isinstance(value, VArray):
        return [to_python(v) for v in value.items]
    raise TypeError(f"not a session value: {value!r}")

