"""natcmp exception hierarchy.

All natcmp-specific exceptions inherit from NatcmpError.
"""


class NatcmpError(Exception):
    """Base exception for all natcmp errors."""


class DiagnosticSinkError(NatcmpError):
    """Raised when a call-count report cannot be written to its stream.

    The underlying OSError (or ValueError for a closed stream) is kept as
    ``__cause__``. The write is never retried.
    """

    def __init__(self, stream_name: str) -> None:
        self.stream_name = stream_name
        super().__init__(f"Cannot write call report to {stream_name}")
