"""Shared test fixtures for natcmp.

Provides a fresh call counter per test and resets the process-wide one.
"""

import pytest

from natcmp.engine.counter import CallCounter, default_counter


@pytest.fixture
def counter() -> CallCounter:
    """Independent counter, starting at 0."""
    return CallCounter()


@pytest.fixture
def clean_default_counter():
    """Process-wide counter reset before and after the test."""
    c = default_counter()
    c.reset()
    yield c
    c.reset()


# ------------------------------------------------------------------
# Shared test helpers
# ------------------------------------------------------------------

def sign(n: int) -> int:
    return (n > 0) - (n < 0)


# Expected ascending order for the default comparator (whitespace literal,
# case-sensitive). Names adapted from
# sourcefrog.net/projects/natsort/example-out.txt.
CORPUS = [
    "1-2",
    "1-02",
    "1-20",
    "10-20",
    "fred",
    "jane",
    "pic   7",
    "pic 4 else",
    "pic 5",
    "pic 5 something",
    "pic 6",
    "pic01",
    "pic2",
    "pic02",
    "pic02a",
    "pic3",
    "pic4",
    "pic05",
    "pic100",
    "pic100a",
    "pic120",
    "pic121",
    "pic02000",
    "tom",
    "x2-g8",
    "x2-y7",
    "x2-y08",
    "x8-y8",
]
