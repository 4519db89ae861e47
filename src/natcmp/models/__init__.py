"""Data models for natcmp."""

from natcmp.models.config import (
    DEFAULT,
    FOLD_CASE,
    FOLD_CASE_SKIP_WHITESPACE,
    SKIP_WHITESPACE,
    CompareOptions,
)

__all__ = [
    "CompareOptions",
    "DEFAULT",
    "FOLD_CASE",
    "SKIP_WHITESPACE",
    "FOLD_CASE_SKIP_WHITESPACE",
]
