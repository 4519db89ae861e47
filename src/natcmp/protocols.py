"""Protocol definitions for natcmp.

No pydantic imports allowed in this module -- pure typing protocols.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from natcmp.engine.compare import Text


@runtime_checkable
class Comparator(Protocol):
    """Three-way comparison callable.

    Returns a negative int, zero, or a positive int. Implemented by
    natcmp.compare, natcmp.compare_fold and CountingComparator.
    """

    def __call__(self, a: Text, b: Text) -> int: ...
