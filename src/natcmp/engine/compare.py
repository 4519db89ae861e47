"""Natural-order comparison engine.

Compares two byte strings so that embedded runs of ASCII digits order by
numeric magnitude: ``img2 < img10``. All four flag combinations of
CompareOptions go through the single scan in natural_compare().

The functions here are pure. They hold no state, perform no I/O and never
touch a call counter; instrumentation lives in natcmp.engine.counter.

Digit runs of equal magnitude are ordered by their leading-zero count, the
run with fewer zeros first::

    img12 < img012 < img0012
    0 < 00 < 000
"""

from __future__ import annotations

from typing import Union

from natcmp.models.config import DEFAULT, FOLD_CASE, CompareOptions

Text = Union[bytes, bytearray, memoryview, str]

# Latin subset of str.isspace(), as raw bytes.
WHITESPACE = frozenset(b"\t\n\v\f\r \x85\xa0")

_ZERO = ord("0")
_NINE = ord("9")
_UPPER_A = ord("A")
_UPPER_Z = ord("Z")


def as_bytes(value: Text) -> bytes:
    """Coerce a comparator input to bytes.

    ``str`` is encoded as UTF-8 with ``surrogateescape`` so that strings
    decoded from the OS (argv, file names) map back to their original bytes.

    Whitespace skipping works on raw bytes, so UTF-8 continuation bytes 0x85
    and 0xA0 are skipped too: with SKIP_WHITESPACE, U+00E0 (C3 A0) and
    U+00C5 (C3 85) both reduce to the lone lead byte C3 and compare equal.
    """
    if isinstance(value, str):
        return value.encode("utf-8", "surrogateescape")
    return bytes(value)


def _is_digit(c: int) -> bool:
    return _ZERO <= c <= _NINE


def _fold(c: int) -> int:
    if _UPPER_A <= c <= _UPPER_Z:
        return c + 32
    return c


def _skip_whitespace(s: bytes, i: int) -> int:
    n = len(s)
    while i < n and s[i] in WHITESPACE:
        i += 1
    return i


def _digit_run_end(s: bytes, i: int) -> int:
    n = len(s)
    while i < n and _is_digit(s[i]):
        i += 1
    return i


def _leading_zeros(s: bytes, start: int, end: int) -> int:
    i = start
    while i < end and s[i] == _ZERO:
        i += 1
    return i - start


def compare_digit_runs(a: bytes, ai: int, b: bytes, bi: int) -> tuple[int, int, int]:
    """Compare the digit runs starting at ``a[ai]`` and ``b[bi]``.

    Both positions must hold an ASCII digit.

    Returns:
        ``(result, a_end, b_end)`` where result is -1, 0 or 1 and the ends
        are the positions just past each run. A result of 0 means the runs
        have the same magnitude and the same number of leading zeros.
    """
    a_end = _digit_run_end(a, ai)
    b_end = _digit_run_end(b, bi)
    a_zeros = _leading_zeros(a, ai, a_end)
    b_zeros = _leading_zeros(b, bi, b_end)

    # A run of only zeros has no significant digits at all.
    a_len = a_end - ai - a_zeros
    b_len = b_end - bi - b_zeros
    if a_len != b_len:
        return (-1 if a_len < b_len else 1), a_end, b_end

    # Same number of significant digits: byte order is numeric order.
    a_sig = a[ai + a_zeros:a_end]
    b_sig = b[bi + b_zeros:b_end]
    if a_sig != b_sig:
        return (-1 if a_sig < b_sig else 1), a_end, b_end

    if a_zeros != b_zeros:
        return (-1 if a_zeros < b_zeros else 1), a_end, b_end
    return 0, a_end, b_end


def natural_compare(a: Text, b: Text, options: CompareOptions | None = None) -> int:
    """Compare two strings in natural order.

    Args:
        a: First string. ``str`` is encoded as UTF-8 first.
        b: Second string.
        options: Behavioral flags. None means DEFAULT (case-sensitive,
            whitespace compared literally).

    Returns:
        -1 if ``a`` sorts before ``b``, 0 if they are equal, 1 otherwise.
    """
    if options is None:
        options = DEFAULT
    fold_case = options.fold_case
    skip_whitespace = options.skip_whitespace

    a = as_bytes(a)
    b = as_bytes(b)
    a_len = len(a)
    b_len = len(b)
    ai = 0
    bi = 0

    while True:
        if skip_whitespace:
            ai = _skip_whitespace(a, ai)
            bi = _skip_whitespace(b, bi)

        if ai >= a_len or bi >= b_len:
            break

        ca = a[ai]
        cb = b[bi]

        if _is_digit(ca) and _is_digit(cb):
            result, ai, bi = compare_digit_runs(a, ai, b, bi)
            if result:
                return result
            continue

        if fold_case:
            ca = _fold(ca)
            cb = _fold(cb)
        if ca != cb:
            return -1 if ca < cb else 1
        ai += 1
        bi += 1

    a_done = ai >= a_len
    b_done = bi >= b_len
    if a_done and b_done:
        return 0
    return -1 if a_done else 1


def compare(a: Text, b: Text) -> int:
    """Case-sensitive natural comparison; whitespace compared literally."""
    return natural_compare(a, b, DEFAULT)


def compare_fold(a: Text, b: Text) -> int:
    """Case-insensitive (ASCII) natural comparison."""
    return natural_compare(a, b, FOLD_CASE)
