"""Call counting for the natural comparator.

CallCounter is an explicit counter object. CountingComparator wraps the
pure comparator and increments a counter once per call, so the comparison
engine itself never carries hidden state.

A process-wide counter is available through default_counter() for the CLI
and report_call_count(). Tests should build their own CallCounter.
"""

from __future__ import annotations

import logging
import sys
import threading
from typing import IO, TYPE_CHECKING

from natcmp.engine.compare import natural_compare
from natcmp.exceptions import DiagnosticSinkError
from natcmp.models.config import DEFAULT

if TYPE_CHECKING:
    from natcmp.engine.compare import Text
    from natcmp.models.config import CompareOptions

logger = logging.getLogger(__name__)


class CallCounter:
    """Thread-safe, monotonically increasing call counter.

    Starts at 0. Only reset() moves it backwards.
    """

    def __init__(self) -> None:
        self._value = 0
        self._lock = threading.Lock()

    def increment(self) -> int:
        """Add one and return the new value."""
        with self._lock:
            self._value += 1
            return self._value

    def read(self) -> int:
        """Current value. Does not mutate the counter."""
        with self._lock:
            return self._value

    def reset(self) -> None:
        """Set the counter back to 0."""
        with self._lock:
            previous = self._value
            self._value = 0
        logger.debug("Call counter reset (was %d)", previous)

    def report(self, stream: IO[str] | None = None) -> None:
        """Write ``Calls: <n>`` as one line to *stream* (default: stderr).

        Raises:
            DiagnosticSinkError: The stream rejected the write or flush.
        """
        if stream is None:
            stream = sys.stderr
        value = self.read()
        logger.debug("Reporting call count %d", value)
        try:
            stream.write(f"Calls: {value}\n")
            stream.flush()
        except (OSError, ValueError) as exc:
            name = getattr(stream, "name", repr(stream))
            raise DiagnosticSinkError(str(name)) from exc

    def __repr__(self) -> str:
        return f"CallCounter(value={self.read()})"


class CountingComparator:
    """Natural comparator that counts its own invocations.

    Example::

        counter = CallCounter()
        cmp = CountingComparator(counter)
        cmp(b"a1", b"a2")   # -1
        counter.read()      # 1
    """

    def __init__(
        self,
        counter: CallCounter,
        options: CompareOptions | None = None,
    ) -> None:
        self.counter = counter
        self.options = options if options is not None else DEFAULT

    def __call__(self, a: Text, b: Text) -> int:
        self.counter.increment()
        return natural_compare(a, b, self.options)


_default_counter = CallCounter()


def default_counter() -> CallCounter:
    """The process-wide counter used by the CLI and report_call_count()."""
    return _default_counter


def report_call_count(stream: IO[str] | None = None) -> None:
    """Report the process-wide call count. See CallCounter.report()."""
    _default_counter.report(stream)
