"""Scalar inference: trimmed text → null/bool/int64/double/string."""

from __future__ import annotations

import math
import re
import sys
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from .sink import ValueSink

T = TypeVar("T")

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

_INT_RE = re.compile(r"[+-]?[0-9]+")
_DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_SPECIAL_RE = re.compile(r"[+-]?(?:inf|infinity|nan(?:\([0-9A-Za-z_]*\))?)", re.IGNORECASE)
_HEX_FLOAT_RE = re.compile(
    r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?[0-9]+)?"
)
_NONZERO_DIGIT_RE = re.compile(r"[1-9a-fA-F]")


def _looks_hex(text: str) -> bool:
    return len(text) > 2 and text[0] == "0" and text[1] in "xX"


# ---------------------------------------------------------------------------
# Numeric parsing
# ---------------------------------------------------------------------------

def parse_int64(text: str) -> int | None:
    """Parse a whole base-10 signed 64-bit integer, else ``None``.

    ``0x``-prefixed text is rejected outright; overflow is a failure.
    """
    if not text or _looks_hex(text):
        return None
    if not _INT_RE.fullmatch(text):
        return None
    value = int(text)
    if value < INT64_MIN or value > INT64_MAX:
        return None
    return value


def parse_double(text: str) -> float | None:
    """Parse a whole double the way C ``strtod`` would, else ``None``.

    Overflow to infinity and underflow to zero or a subnormal count as
    range errors and fail.
    """
    if not text or _looks_hex(text):
        return None
    if _SPECIAL_RE.fullmatch(text):
        # float() takes no n-char-sequence; the payload is dropped.
        return float(text.partition("(")[0])
    if _DECIMAL_RE.fullmatch(text):
        mantissa = text.split("e")[0].split("E")[0]
        value = float(text)
    elif _HEX_FLOAT_RE.fullmatch(text):
        # Only reachable with a sign, e.g. "-0x1A".
        mantissa = text.split("p")[0].split("P")[0][3:]
        try:
            value = float.fromhex(text)
        except OverflowError:
            return None
    else:
        return None
    if math.isinf(value):
        return None
    if value == 0.0:
        if _NONZERO_DIGIT_RE.search(mantissa):
            return None
    elif abs(value) < sys.float_info.min:
        return None
    return value


# ---------------------------------------------------------------------------
# Inference
# ---------------------------------------------------------------------------

def infer_scalar(text: str, sink: ValueSink[T]) -> T:
    """Convert trimmed *text* into a scalar built by *sink*.

    Order: empty → null, ``"quoted"`` → inner text as-is, ``true``/``false``,
    int64, double, then the text verbatim.
    """
    if not text:
        return sink.null()
    if len(text) >= 2 and text[0] == '"' and text[-1] == '"':
        return sink.string(text[1:-1])
    if text == "true":
        return sink.boolean(True)
    if text == "false":
        return sink.boolean(False)
    int_value = parse_int64(text)
    if int_value is not None:
        return sink.integer(int_value)
    double_value = parse_double(text)
    if double_value is not None:
        return sink.double(double_value)
    return sink.string(text)
