"""Fuzzy path exceptions.

The normalization core is total and never raises. These errors only come
from the typed entry points around it.
"""


class FuzzyPathError(Exception):
    """Base class for fuzzy path errors."""

    pass


class UnsupportedPathTypeError(FuzzyPathError, TypeError):
    """Raised when a FuzzyPath is built from something that is not a path.

    Accepted inputs are str, bytes and os.PathLike objects.
    """

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(
            f"expected str, bytes or os.PathLike, got {type(value).__name__}"
        )


class NotNormalizedError(FuzzyPathError, ValueError):
    """Raised when an unchecked FuzzyPath is given a non-normalized string."""

    def __init__(self, value: str, expected: str) -> None:
        self.value = value
        self.expected = expected
        super().__init__(f"path {value!r} is not normalized (expected {expected!r})")
