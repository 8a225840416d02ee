"""
Run-wide table of text deltas that have already been rendered.

When one upstream defect changes the same fragment on thousands of pages,
only the first occurrence gets a full diff; later ones point back to it.
"""

from __future__ import annotations

import base64
import hashlib
import threading
from enum import Enum


class Seen(Enum):
    FIRST_SEEN = "first"
    ALREADY_SEEN = "already"


def digest_pair(lhs: str, rhs: str) -> str:
    """Content hash of an (old, new) pair."""
    h = hashlib.sha256()
    h.update(lhs.encode("utf-8"))
    # separator keeps ("ab", "c") and ("a", "bc") apart
    h.update(b"\0")
    h.update(rhs.encode("utf-8"))
    return base64.b64encode(h.digest()).decode("ascii").rstrip("=")


class DedupCache:
    """Thread-safe digest -> marker table. The first writer wins."""

    def __init__(self) -> None:
        self._markers: dict[str, str] = {}
        self._lock = threading.Lock()

    def record(self, digest: str, marker: str) -> Seen:
        """Register digest with marker unless it is already known."""
        with self._lock:
            if digest in self._markers:
                return Seen.ALREADY_SEEN
            self._markers[digest] = marker
            return Seen.FIRST_SEEN

    def lookup(self, digest: str) -> str | None:
        with self._lock:
            return self._markers.get(digest)

    def __len__(self) -> int:
        with self._lock:
            return len(self._markers)
