"""Tree builder: indentation-stack parse of session text → value tree."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from .model import ContainerKind
from .reader import Line, NextLine, classify_line, peek_next_line, split_key_value, split_lines, trim
from .scalars import infer_scalar
from .sink import TreeSink, ValueSink

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Parse context
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class _Context:
    """One open container and the indentation that owns it."""

    indent: int
    kind: ContainerKind
    container: Any
    # Pinned at a sequence item's own indent; only deeper lines belong to it.
    inline: bool = False

    def closed_by(self, line: Line) -> bool:
        if line.indent != self.indent:
            return line.indent < self.indent
        if self.inline:
            return True
        return line.is_sequence_item != (self.kind is ContainerKind.Array)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def parse_session_info(text: str, sink: ValueSink | None = None) -> Any:
    """Parse session text into a tree built by *sink* (a :class:`TreeSink`
    by default).

    Never raises for malformed input: lines that do not fit their container
    are skipped.  The root is always an object.
    """
    if sink is None:
        sink = TreeSink()
    return _Builder(split_lines(text or ""), sink).build()


# ---------------------------------------------------------------------------
# Builder
# ---------------------------------------------------------------------------

class _Builder:
    def __init__(self, lines: list[str], sink: ValueSink) -> None:
        self.lines = lines
        self.sink = sink
        self.root = sink.new_object()
        self.stack: list[_Context] = [_Context(-1, ContainerKind.Object, self.root)]

    def build(self):
        for index, raw in enumerate(self.lines):
            line = classify_line(raw)
            if line is None:
                continue

            while len(self.stack) > 1 and self.stack[-1].closed_by(line):
                self.stack.pop()

            current = self.stack[-1]
            if line.is_sequence_item:
                self._sequence_item(line, index, current)
            else:
                self._mapping_entry(line, index, current)
        return self.root

    # -- Line handlers --------------------------------------------------

    def _sequence_item(self, line: Line, index: int, current: _Context) -> None:
        if current.kind is not ContainerKind.Array:
            logger.debug("line %d: sequence item outside a sequence, skipped", index + 1)
            return

        item_text = trim(line.content[1:])
        next_info = peek_next_line(self.lines, index + 1)

        if not item_text:
            child, kind = self._new_container(next_info)
            self.sink.append(current.container, child)
            self._push(child, kind, self._child_indent(line.indent, next_info))
            return

        pair = split_key_value(item_text)
        if pair is None:
            self.sink.append(current.container, infer_scalar(item_text, self.sink))
            return

        key, raw_value = pair
        item = self.sink.new_object()
        if not raw_value:
            child, kind = self._new_container(next_info)
            self.sink.set_item(item, key, child)
            self.sink.append(current.container, item)
            # Members of the nested container sit deeper than the key itself;
            # a line at the key's column is a sibling in the item object.
            key_column = line.indent + len(line.content) - len(item_text)
            self._push(item, ContainerKind.Object, line.indent, inline=True)
            self._push(child, kind, self._child_indent(key_column, next_info, compact=True))
            return

        self.sink.set_item(item, key, infer_scalar(raw_value, self.sink))
        self.sink.append(current.container, item)
        if next_info.found and next_info.indent > line.indent:
            self._push(item, ContainerKind.Object, line.indent, inline=True)

    def _mapping_entry(self, line: Line, index: int, current: _Context) -> None:
        if current.kind is ContainerKind.Array:
            logger.debug("line %d: mapping entry inside a sequence, skipped", index + 1)
            return

        pair = split_key_value(line.content)
        if pair is None:
            logger.debug("line %d: no key separator, skipped", index + 1)
            return

        key, raw_value = pair
        if raw_value:
            self.sink.set_item(current.container, key, infer_scalar(raw_value, self.sink))
            return

        next_info = peek_next_line(self.lines, index + 1)
        child, kind = self._new_container(next_info)
        self.sink.set_item(current.container, key, child)
        self._push(child, kind, self._child_indent(line.indent, next_info, compact=True))

    # -- Helpers --------------------------------------------------------

    def _new_container(self, next_info: NextLine) -> tuple[Any, ContainerKind]:
        if next_info.found and next_info.is_sequence_item:
            return self.sink.new_array(), ContainerKind.Array
        return self.sink.new_object(), ContainerKind.Object

    @staticmethod
    def _child_indent(column: int, next_info: NextLine, compact: bool = False) -> int:
        """Indent of the members of a container owned by a key or dash at
        *column*.

        A key may own a sequence whose dashes sit at the key's own column
        (``compact``).  Otherwise the next line is a member only when it is
        deeper; if it is not, the container stays empty and is pinned one
        column in so the next line closes it.
        """
        if next_info.found:
            if next_info.indent > column:
                return next_info.indent
            if compact and next_info.indent == column and next_info.is_sequence_item:
                return next_info.indent
        return column + 1

    def _push(self, container: Any, kind: ContainerKind, indent: int, inline: bool = False) -> None:
        self.stack.append(_Context(indent, kind, container, inline))
