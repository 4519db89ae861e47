"""Sorting helpers built on the natural comparator.

    >>> natsorted(["img10", "img2", "img1"])
    ['img1', 'img2', 'img10']
    >>> from natcmp import FOLD_CASE
    >>> natsorted(["B2", "a10", "a2"], options=FOLD_CASE)
    ['a2', 'a10', 'B2']
"""

from __future__ import annotations

from functools import cmp_to_key, partial
from typing import TYPE_CHECKING, Any, Callable, Iterable, Optional

from natcmp.engine.compare import natural_compare
from natcmp.models.config import CompareOptions

if TYPE_CHECKING:
    from natcmp.engine.compare import Text
    from natcmp.protocols import Comparator

__all__ = ["natural_key", "natsorted", "natsort"]


def _resolve(options: Optional[CompareOptions], cmp: Optional[Comparator]) -> Comparator:
    if cmp is not None and options is not None:
        raise TypeError("pass either options or cmp, not both")
    if cmp is not None:
        return cmp
    return partial(natural_compare, options=options)


def natural_key(
    options: Optional[CompareOptions] = None,
    *,
    key: Optional[Callable[[Any], Text]] = None,
    cmp: Optional[Comparator] = None,
) -> Callable[[Any], Any]:
    """Build a sort key for sorted(), list.sort(), min() and max().

    Args:
        options: Comparator flags. None means the case-sensitive default.
        key: Extracts the string to compare from each item.
        cmp: A comparator to use instead of natural_compare, e.g. a
            CountingComparator. Mutually exclusive with *options*.
    """
    compare_fn = _resolve(options, cmp)
    if key is None:
        return cmp_to_key(compare_fn)

    return cmp_to_key(lambda x, y: compare_fn(key(x), key(y)))


def natsorted(
    items: Iterable[Any],
    *,
    options: Optional[CompareOptions] = None,
    key: Optional[Callable[[Any], Text]] = None,
    cmp: Optional[Comparator] = None,
    reverse: bool = False,
) -> list:
    """Return a new list sorted in natural order."""
    return sorted(items, key=natural_key(options, key=key, cmp=cmp), reverse=reverse)


def natsort(
    items: list,
    *,
    options: Optional[CompareOptions] = None,
    key: Optional[Callable[[Any], Text]] = None,
    cmp: Optional[Comparator] = None,
    reverse: bool = False,
) -> None:
    """Sort *items* in place in natural order."""
    items.sort(key=natural_key(options, key=key, cmp=cmp), reverse=reverse)
