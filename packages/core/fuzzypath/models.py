"""FuzzyPath: a lossy, normalized path value for quick fuzzy comparison.

A FuzzyPath only compares equal to another FuzzyPath. Comparing against a
plain string is never equal, since both sides must go through normalization.

Comparison rules:
- case insensitive
- backslashes are treated as forward slashes
- repeated slashes count as one
- trailing slashes are ignored, except for the POSIX root "/"

Known limitations:
- an absolute Windows path (drive letter) never matches an absolute POSIX path
- a Windows UNC path is not reliably comparable with any POSIX path
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import PurePosixPath
from typing import TYPE_CHECKING, Any

from fuzzypath.exceptions import NotNormalizedError, UnsupportedPathTypeError
from fuzzypath.pathing import normalize
from fuzzypath.settings import get_settings

if TYPE_CHECKING:
    from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
    from pydantic.json_schema import JsonSchemaValue
    from pydantic_core import CoreSchema

logger = logging.getLogger(__name__)


def _coerce(raw: object) -> str:
    """Turn a str, bytes or os.PathLike into text, decoding bytes lossily."""
    if isinstance(raw, str):
        return raw
    if isinstance(raw, os.PathLike):
        raw = os.fspath(raw)
        if isinstance(raw, str):
            return raw
    if isinstance(raw, bytes | bytearray):
        return bytes(raw).decode("utf-8", errors="replace")
    raise UnsupportedPathTypeError(raw)


@dataclass(frozen=True, order=True)
class FuzzyPath:
    """A path string normalized for fuzzy equality."""

    value: str = ""
    """The normalized path text."""

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", normalize(_coerce(self.value)))

    @classmethod
    def parse(cls, path: str) -> FuzzyPath:
        """Parse a path string. Never fails for str input."""
        return cls(path)

    @classmethod
    def from_normalized_unchecked(cls, value: str) -> FuzzyPath:
        """Wrap an already normalized string without normalizing it again.

        Passing a string that is not normalized is a caller error. It is only
        detected when the check_unchecked setting is enabled.
        """
        if not isinstance(value, str):
            raise UnsupportedPathTypeError(value)
        if get_settings().check_unchecked:
            expected = normalize(value)
            if expected != value:
                logger.warning("Rejected non-normalized path %r (expected %r)", value, expected)
                raise NotNormalizedError(value, expected)
            logger.debug("Verified normalized path %r", value)
        instance = cls.__new__(cls)
        object.__setattr__(instance, "value", value)
        return instance

    def to_path(self) -> PurePosixPath:
        """Return the normalized text as a PurePosixPath."""
        return PurePosixPath(self.value)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"FuzzyPath({self.value!r})"

    def __fspath__(self) -> str:
        return self.value

    def __len__(self) -> int:
        return len(self.value)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        from fuzzypath.serialization import fuzzy_path_core_schema

        return fuzzy_path_core_schema()

    @classmethod
    def __get_pydantic_json_schema__(
        cls, core_schema: CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        from fuzzypath.serialization import FUZZY_PATH_JSON_SCHEMA

        return dict(FUZZY_PATH_JSON_SCHEMA)
