"""Pydantic integration for FuzzyPath.

Validation accepts a string (normalized on the way in) or an existing
FuzzyPath. Serialization emits the normalized string in both python and
JSON modes.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic_core import PydanticCustomError, core_schema

from fuzzypath.models import FuzzyPath

logger = logging.getLogger(__name__)

FUZZY_PATH_JSON_SCHEMA: dict[str, str] = {"type": "string", "format": "fuzzy-path"}


def validate_fuzzy_path(value: Any) -> FuzzyPath:
    """Validate raw input into a FuzzyPath."""
    if isinstance(value, FuzzyPath):
        return value
    if isinstance(value, str):
        return FuzzyPath(value)
    logger.debug("Rejected %s input for FuzzyPath", type(value).__name__)
    raise PydanticCustomError(
        "fuzzy_path_type",
        "Input should be a string, got {input_type}",
        {"input_type": type(value).__name__},
    )


def serialize_fuzzy_path(path: FuzzyPath) -> str:
    return path.value


def fuzzy_path_core_schema() -> core_schema.CoreSchema:
    """Build the pydantic-core schema used for FuzzyPath fields."""
    return core_schema.no_info_plain_validator_function(
        validate_fuzzy_path,
        serialization=core_schema.plain_serializer_function_ser_schema(
            serialize_fuzzy_path,
            return_schema=core_schema.str_schema(),
        ),
    )
