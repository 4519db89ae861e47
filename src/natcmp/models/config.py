"""Configuration models for natcmp.

CompareOptions holds the two behavioral flags consumed by the comparator.
The module-level presets cover the four flag combinations.
"""

from __future__ import annotations

from pydantic import BaseModel


class CompareOptions(BaseModel):
    """Behavioral flags for natural-order comparison.

    Frozen, so a single instance can be shared between threads and used as
    a module-level preset.
    """

    model_config = {"frozen": True}

    fold_case: bool = False  # ASCII letters only
    skip_whitespace: bool = False


DEFAULT = CompareOptions()
FOLD_CASE = CompareOptions(fold_case=True)
SKIP_WHITESPACE = CompareOptions(skip_whitespace=True)
FOLD_CASE_SKIP_WHITESPACE = CompareOptions(fold_case=True, skip_whitespace=True)
