"""Reader layer: splits session text into lines and classifies them."""

from __future__ import annotations

from dataclasses import dataclass


# Matches C ``isspace`` in the "C" locale; no Unicode whitespace.
_ASCII_WHITESPACE = " \t\n\v\f\r"
_INDENT_CHARS = (" ", "\t")


# ---------------------------------------------------------------------------
# Line splitting
# ---------------------------------------------------------------------------

def split_lines(text: str) -> list[str]:
    """Split *text* on ``\\n``, dropping every ``\\r``.

    The fragment after the last newline is always emitted, so
    ``"a\\n"`` gives ``["a", ""]`` and ``""`` gives ``[""]``.
    """
    return text.replace("\r", "").split("\n")


def trim(text: str) -> str:
    return text.strip(_ASCII_WHITESPACE)


def leading_indent(line: str) -> int:
    """Count leading spaces and tabs; a tab is width 1."""
    indent = 0
    for ch in line:
        if ch not in _INDENT_CHARS:
            break
        indent += 1
    return indent


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class Line:
    indent: int
    content: str  # trimmed, never empty
    is_sequence_item: bool


@dataclass(slots=True)
class NextLine:
    found: bool
    indent: int = 0
    is_sequence_item: bool = False


NOT_FOUND = NextLine(found=False)


def classify_line(raw: str) -> Line | None:
    """Return the classified line, or ``None`` for a blank line."""
    content = trim(raw)
    if not content:
        return None
    return Line(
        indent=leading_indent(raw),
        content=content,
        is_sequence_item=content[0] == "-",
    )


def peek_next_line(lines: list[str], start: int) -> NextLine:
    """Describe the first non-blank line at or after *start*."""
    for i in range(start, len(lines)):
        line = classify_line(lines[i])
        if line is not None:
            return NextLine(True, line.indent, line.is_sequence_item)
    return NOT_FOUND


def split_key_value(text: str) -> tuple[str, str] | None:
    """Split ``key: value`` at the first colon; ``None`` when there is none."""
    key, sep, raw_value = text.partition(":")
    if not sep:
        return None
    return trim(key), trim(raw_value)
