"""Lossy path normalization for fuzzy cross-platform comparison."""

from __future__ import annotations

import re

_REPEATED_SLASHES = re.compile(r"/{2,}")


def normalize(path: str) -> str:
    """Normalize a path string into its comparable form.

    Rules, applied in order:
    - lowercase every character
    - convert backslashes to "/"
    - collapse runs of "/" into a single "/"
    - drop a trailing "/" unless the whole path is the root "/"

    Drive letters and UNC prefixes are plain text here, so an absolute
    Windows path never matches an absolute POSIX one.
    """
    normalized = path.lower().replace("\\", "/")
    normalized = _REPEATED_SLASHES.sub("/", normalized)
    if len(normalized) > 1 and normalized.endswith("/"):
        normalized = normalized[:-1]
    return normalized


def equals(a: str, b: str) -> bool:
    """Return True if both paths normalize to the same string."""
    return normalize(a) == normalize(b)
