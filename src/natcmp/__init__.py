"""natcmp: natural-order string comparison.

Embedded digit runs compare by numeric magnitude, so ``img2`` sorts before
``img10``. The comparator is pure; call counting is an explicit, optional
wrapper around it.
"""

from natcmp._version import __version__

# Comparator
from natcmp.engine.compare import compare, compare_fold, natural_compare

# Instrumentation
from natcmp.engine.counter import (
    CallCounter,
    CountingComparator,
    default_counter,
    report_call_count,
)

# Configuration
from natcmp.models.config import (
    DEFAULT,
    FOLD_CASE,
    FOLD_CASE_SKIP_WHITESPACE,
    SKIP_WHITESPACE,
    CompareOptions,
)

# Protocols
from natcmp.protocols import Comparator

# Sorting helpers
from natcmp.sorting import natsort, natsorted, natural_key

# Exceptions
from natcmp.exceptions import DiagnosticSinkError, NatcmpError

__all__ = [
    "__version__",
    "compare",
    "compare_fold",
    "natural_compare",
    "CallCounter",
    "CountingComparator",
    "default_counter",
    "report_call_count",
    "CompareOptions",
    "DEFAULT",
    "FOLD_CASE",
    "SKIP_WHITESPACE",
    "FOLD_CASE_SKIP_WHITESPACE",
    "Comparator",
    "natural_key",
    "natsorted",
    "natsort",
    "NatcmpError",
    "DiagnosticSinkError",
]
