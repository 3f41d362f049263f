"""Exceptions raised by Session Core.

The parser itself never raises for malformed text; these cover the
navigation and session layers.
"""

from __future__ import annotations


class SessionCoreError(Exception):
    """Base class for all Session Core errors."""


class PathNotFoundError(SessionCoreError, KeyError):
    """A getter path has a segment that does not resolve."""

    def __init__(self, path: str, segment: str) -> None:
        super().__init__(f"{segment!r} not found while resolving {path!r}")
        self.path = path
        self.segment = segment

    def __str__(self) -> str:
        return self.args[0]


class SessionUnavailableError(SessionCoreError):
    """No session document has been read from the source yet."""
