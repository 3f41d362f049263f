"""SessionRepl: interactive explorer for session info documents.

Also provides the ``session-repl`` CLI entry point via ``main()``.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import IO, Sequence

from .getter import require, resolve
from .model import Value, VArray, VBool, VDouble, VInt, VObject, VText, _NullType, to_python
from .errors import PathNotFoundError
from .parser import parse_session_info
from .reader import split_lines


# ---------------------------------------------------------------------------
# SessionRepl class (notebook / programmatic use)
# ---------------------------------------------------------------------------

class SessionRepl:
    """Stateful explorer that accumulates session text across calls.

    Usage::

        repl = SessionRepl()
        repl.load("session.yaml")
        repl.eval("WeekendInfo:\\n TrackName: spa")
        repl.query("WeekendInfo.TrackName")   # → VText("spa")

        repl.doc      # the parsed document
        repl.reset()  # clear state
    """

    def __init__(self) -> None:
        self.lines: list[str] = []
        self.doc: Value = parse_session_info("")

    def eval(self, text: str) -> Value:
        """Append *text* to the working document and re-parse it."""
        self.lines.extend(split_lines(text))
        self.doc = parse_session_info("\n".join(self.lines))
        return self.doc

    def load(self, path: str | Path) -> Value:
        """Replace the working document with the contents of *path*."""
        text = Path(path).read_text(encoding="utf-8", errors="replace")
        self.reset()
        return self.eval(text)

    def query(self, path: str) -> Value:
        return resolve(self.doc, path)

    def reset(self) -> None:
        """Clear all accumulated state."""
        self.lines = []
        self.doc = parse_session_info("")


# ---------------------------------------------------------------------------
# CLI helpers
# ---------------------------------------------------------------------------

def _fmt_inline(value: Value) -> str:
    """Format a single value for compact one-line display."""
    if isinstance(value, VText):
        return f'"{value.value}"'
    if isinstance(value, (VBool, VInt, VDouble, _NullType)):
        return str(value)
    if isinstance(value, VArray):
        return "[" + ", ".join(_fmt_inline(v) for v in value.items) + "]"
    if isinstance(value, VObject):
        return "{" + ", ".join(f"{k}: {_fmt_inline(v)}" for k, v in value.entries.items()) + "}"
    raise TypeError(f"not a session value: {value!r}")


def _fmt_inspect(value: Value) -> str:
    """Pretty-print one level of a value for inspect() / i()."""
    if isinstance(value, VObject):
        if not value.entries:
            return "VObject {}"
        width = max(len(k) for k in value.entries)
        lines = ["VObject {"]
        for k, v in value.entries.items():
            lines.append(f"  {k:<{width}}: {_fmt_summary(v)}")
        lines.append("}")
        return "\n".join(lines)

    if isinstance(value, VArray):
        lines = ["VArray ["]
        for i, v in enumerate(value.items):
            lines.append(f"  {i}: {_fmt_summary(v)}")
        lines.append("]")
        return "\n".join(lines)

    return _fmt_inline(value)


def _fmt_summary(value: Value) -> str:
    if isinstance(value, VObject):
        return f"{{...}} ({len(value.entries)} keys)"
    if isinstance(value, VArray):
        return f"[...] ({len(value.items)} items)"
    return _fmt_inline(value)


def _show_keys(repl: SessionRepl, path: str, dest: IO[str]) -> None:
    """Print the keys (or indices) directly under *path*."""
    value = repl.query(path)
    if isinstance(value, VObject) and value.entries:
        for key in value.entries:
            print(f"  {key}", file=dest)
    elif isinstance(value, VArray) and value.items:
        print(f"  0..{len(value.items) - 1}", file=dest)
    else:
        print("  (no keys)", file=dest)


def _process_line(repl: SessionRepl, line: str, dest: IO[str]) -> bool:
    """Process one input line.  Returns False when the session should end."""
    stripped = line.strip()
    if not stripped:
        return True

    # ── Exit ──────────────────────────────────────────────────────────────
    if stripped in (":q", ":quit"):
        return False

    # ── Control commands ──────────────────────────────────────────────────
    if stripped == ":reset":
        repl.reset()
        return True

    if stripped == ":keys" or stripped.startswith(":keys "):
        _show_keys(repl, stripped[len(":keys"):].strip(), dest)
        return True

    if stripped.startswith(":load "):
        filepath = stripped[len(":load "):].strip()
        try:
            repl.load(filepath)
        except OSError as exc:
            print(f"Error reading '{filepath}': {exc}", file=sys.stderr)
        return True

    # ── inspect() / i() ───────────────────────────────────────────────────
    for prefix in ("inspect(", "i("):
        if stripped.startswith(prefix) and stripped.endswith(")"):
            path = stripped[len(prefix):-1].strip()
            print(_fmt_inspect(repl.query(path)), file=dest)
            return True

    # ── ? path ────────────────────────────────────────────────────────────
    if stripped == "?" or stripped.startswith("? "):
        print(_fmt_inline(repl.query(stripped[1:].strip())), file=dest)
        return True

    # ── Raw session text (indentation is significant) ─────────────────────
    repl.eval(line.rstrip("\n"))
    return True


def _print_path(doc: Value, path: str, as_json: bool, dest: IO[str]) -> int:
    try:
        value = require(doc, path)
    except PathNotFoundError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    if as_json:
        print(json.dumps(to_python(value), indent=2, ensure_ascii=False), file=dest)
    else:
        print(_fmt_inspect(value), file=dest)
    return 0


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------

def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Explore a session info document")
    parser.add_argument("file", metavar="FILE", nargs="?", help="Session info text to load")
    parser.add_argument("--json", action="store_true", help="Print the document (or --path) as JSON and exit")
    parser.add_argument("--path", help="Print the value at a dotted path and exit, e.g. DriverInfo.Drivers.0")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Session shell (``session-repl`` / ``python -m session_core.repl``)."""
    args = _build_arg_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    repl = SessionRepl()
    if args.file:
        try:
            repl.load(args.file)
        except OSError as exc:
            print(f"Error reading '{args.file}': {exc}", file=sys.stderr)
            return 1

    if args.json or args.path is not None:
        return _print_path(repl.doc, args.path or "", args.json, sys.stdout)

    print("Session REPL  (:q to quit  |  :load FILE  :keys [PATH]  :reset  |  ? PATH  inspect(PATH))")

    while True:
        try:
            line = input("SES> ")
        except EOFError:
            print()
            break
        except KeyboardInterrupt:
            print()
            continue

        if not _process_line(repl, line, sys.stdout):
            break

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
