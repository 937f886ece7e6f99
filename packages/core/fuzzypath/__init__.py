"""Fuzzy, filesystem-free comparison of POSIX and Windows path strings."""

from fuzzypath.exceptions import (
    FuzzyPathError,
    NotNormalizedError,
    UnsupportedPathTypeError,
)
from fuzzypath.models import FuzzyPath
from fuzzypath.pathing import equals, normalize
from fuzzypath.settings import Settings, get_settings

__all__ = [
    # Core
    "normalize",
    "equals",
    # Models
    "FuzzyPath",
    # Errors
    "FuzzyPathError",
    "NotNormalizedError",
    "UnsupportedPathTypeError",
    # Settings
    "Settings",
    "get_settings",
]
