"""Content hashing used as graph identity."""
from __future__ import annotations

import hashlib
from collections.abc import Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .edge import Edge

__all__ = ["content_hash", "edge_set_hash"]

# ASCII unit separator
_SEPARATOR = "\x1f"
_DIGEST_SIZE = 16


def content_hash(parts: Iterable[str]) -> str:
    """Return a stable hex fingerprint of a collection of strings.

    The parts are deduplicated and sorted before hashing, so the result does
    not depend on iteration order and repeated parts collapse the same way a
    set would.
    """
    source = _SEPARATOR.join(sorted(set(parts)))
    return hashlib.blake2b(source.encode(), digest_size=_DIGEST_SIZE).hexdigest()


def edge_set_hash(edges: Iterable["Edge"]) -> str:
    """Fingerprint a collection of edges by their type-aware identity forms."""
    return content_hash(e.identity for e in edges)
