"""Tests for session_core.scalars."""

import math

from session_core.model import Null, VBool, VDouble, VInt, VText
from session_core.scalars import infer_scalar, parse_double, parse_int64
from session_core.sink import TreeSink


def _infer(text):
    return infer_scalar(text, TreeSink())


class TestParseInt64:
    def test_plain(self):
        assert parse_int64("42") == 42

    def test_signs(self):
        assert parse_int64("-7") == -7
        assert parse_int64("+7") == 7

    def test_leading_zeros(self):
        assert parse_int64("007") == 7

    def test_bounds(self):
        assert parse_int64("9223372036854775807") == 2 ** 63 - 1
        assert parse_int64("-9223372036854775808") == -(2 ** 63)

    def test_overflow(self):
        assert parse_int64("9223372036854775808") is None

    def test_partial(self):
        assert parse_int64("12abc") is None
        assert parse_int64("1.5") is None

    def test_rejects_underscores_and_unicode_digits(self):
        assert parse_int64("1_000") is None
        assert parse_int64("١٢") is None

    def test_hex_prefix(self):
        assert parse_int64("0x1A") is None


class TestParseDouble:
    def test_decimal(self):
        assert parse_double("1.5") == 1.5

    def test_exponent(self):
        assert parse_double("-2.5e3") == -2500.0

    def test_trailing_dot(self):
        assert parse_double("3.") == 3.0

    def test_leading_dot(self):
        assert parse_double(".25") == 0.25

    def test_lone_dot(self):
        assert parse_double(".") is None

    def test_units_suffix(self):
        assert parse_double("3.14 km") is None

    def test_infinity_and_nan(self):
        assert parse_double("inf") == math.inf
        assert parse_double("-Infinity") == -math.inf
        assert math.isnan(parse_double("NaN"))

    def test_nan_with_payload(self):
        assert math.isnan(parse_double("nan(123)"))
        assert math.isnan(parse_double("-NAN(abc_1)"))
        assert parse_double("nan(1 2)") is None

    def test_overflow(self):
        assert parse_double("1e999") is None

    def test_underflow(self):
        assert parse_double("1e-400") is None

    def test_zero(self):
        assert parse_double("0.0e10") == 0.0

    def test_unsigned_hex_rejected(self):
        assert parse_double("0x1A") is None

    def test_signed_hex_float(self):
        assert parse_double("-0x1A") == -26.0


class TestInferScalar:
    def test_empty_is_null(self):
        assert _infer("") is Null

    def test_quoted(self):
        assert _infer('"Bob"') == VText("Bob")

    def test_quoted_no_escape_processing(self):
        assert _infer(r'"a\"b"') == VText(r'a\"b')

    def test_quoted_number_stays_text(self):
        assert _infer('"24"') == VText("24")

    def test_empty_quotes(self):
        assert _infer('""') == VText("")

    def test_single_quote_char(self):
        assert _infer('"') == VText('"')

    def test_booleans(self):
        assert _infer("true") == VBool(True)
        assert _infer("false") == VBool(False)

    def test_booleans_case_sensitive(self):
        assert _infer("True") == VText("True")

    def test_integer(self):
        assert _infer("3") == VInt(3)

    def test_double(self):
        assert _infer("1.5") == VDouble(1.5)

    def test_int_overflow_becomes_double(self):
        assert _infer("99999999999999999999") == VDouble(1e20)

    def test_hex_is_text(self):
        assert _infer("0x1A") == VText("0x1A")

    def test_text_verbatim(self):
        assert _infer("3.14 km") == VText("3.14 km")

    def test_whole_number_double_distinct_from_int(self):
        assert _infer("1.0") == VDouble(1.0)
        assert _infer("1.0") != VInt(1)
