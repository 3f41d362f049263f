"""Session Core: parser and value tree for telemetry session info text."""

from .parser import parse_session_info
from .model import (
    ContainerKind,
    Null,
    Value,
    VArray,
    VBool,
    VDouble,
    VInt,
    VObject,
    VText,
    _NullType,
    to_python,
)
from .sink import ValueSink, TreeSink, PythonSink
from .getter import apply_getter, resolve, require
from .session import (
    SessionSource,
    SessionTracker,
    SessionUpdate,
    TextSessionSource,
    read_session_info,
)
from .errors import PathNotFoundError, SessionCoreError, SessionUnavailableError
from .repl import SessionRepl

__all__ = [
    "parse_session_info",
    "ContainerKind",
    "Null",
    "Value",
    "VArray",
    "VBool",
    "VDouble",
    "VInt",
    "VObject",
    "VText",
    "to_python",
    "ValueSink",
    "TreeSink",
    "PythonSink",
    "apply_getter",
    "resolve",
    "require",
    "SessionSource",
    "SessionTracker",
    "SessionUpdate",
    "TextSessionSource",
    "read_session_info",
    "SessionCoreError",
    "PathNotFoundError",
    "SessionUnavailableError",
    "SessionRepl",
]
