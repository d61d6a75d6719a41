"""Data layer utilities for loading JSON definitions and persisted progress."""

from .errors import DataError, DataLoadError, DataValidationError
from .paths import get_bundled_definitions_path, get_definitions_path

__all__ = [
    "DataError",
    "DataLoadError",
    "DataValidationError",
    "get_bundled_definitions_path",
    "get_definitions_path",
]
