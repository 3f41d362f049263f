"""Session boundary: where session text comes from and when to re-read it."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Protocol

from .errors import SessionUnavailableError
from .parser import parse_session_info
from .sink import ValueSink

logger = logging.getLogger(__name__)


class SessionSource(Protocol):
    """The telemetry side of the boundary.

    ``get_session_str`` returns the latest session text, or ``None`` while
    no session is available.  ``get_session_update_count`` increments every
    time a new text is published.
    """

    def get_session_str(self) -> str | None: ...

    def get_session_update_count(self) -> int: ...


def read_session_info(source: SessionSource, sink: ValueSink | None = None) -> Any:
    """Parse the source's current session text, or return ``None``."""
    text = source.get_session_str()
    if text is None:
        return None
    # str is immutable, so this is already a stable snapshot.
    return parse_session_info(text, sink)


# ---------------------------------------------------------------------------
# In-memory source
# ---------------------------------------------------------------------------

class TextSessionSource:
    """A :class:`SessionSource` fed by hand, from a file or a recorder."""

    def __init__(self, text: str | None = None) -> None:
        self._text: str | None = None
        self._update_count = 0
        if text is not None:
            self.publish(text)

    @classmethod
    def from_file(cls, path: str | Path) -> TextSessionSource:
        return cls(Path(path).read_text(encoding="utf-8", errors="replace"))

    def publish(self, text: str) -> None:
        """Store a new session text and bump the update counter."""
        self._text = text
        self._update_count += 1

    def clear(self) -> None:
        """Make the session unavailable (e.g. the sim disconnected)."""
        self._text = None

    def get_session_str(self) -> str | None:
        return self._text

    def get_session_update_count(self) -> int:
        return self._update_count


# ---------------------------------------------------------------------------
# Update tracking
# ---------------------------------------------------------------------------

@dataclass
class SessionUpdate:
    """A parsed session document and the update counter it was read at."""

    update_count: int
    session_info: Any


class SessionTracker:
    """Re-parses a source's session text only when it changes.

    Usage::

        tracker = SessionTracker(source)
        update = tracker.poll()       # SessionUpdate, or None if unchanged
        tracker.latest                # last SessionUpdate read
    """

    def __init__(self, source: SessionSource, sink: ValueSink | None = None) -> None:
        self.source = source
        self.sink = sink
        self._last_update_count = -1
        self.latest: SessionUpdate | None = None

    def was_updated(self) -> bool:
        """True if the source published text that has not been polled yet."""
        return self.source.get_session_update_count() != self._last_update_count

    def poll(self) -> SessionUpdate | None:
        """Return a new :class:`SessionUpdate`, or ``None`` when there is
        nothing new or the session is unavailable."""
        update_count = self.source.get_session_update_count()
        if update_count == self._last_update_count:
            return None
        session_info = read_session_info(self.source, self.sink)
        if session_info is None:
            logger.debug("session text unavailable")
            return None
        self._last_update_count = update_count
        self.latest = SessionUpdate(self._last_update_count, session_info)
        logger.debug("session info updated (count=%d)", self._last_update_count)
        return self.latest

    def require_latest(self) -> SessionUpdate:
        if self.latest is None:
            raise SessionUnavailableError("no session info has been read yet")
        return self.latest

    def reset(self) -> None:
        """Forget what was read so the next poll re-parses."""
        self._last_update_count = -1
        self.latest = None
