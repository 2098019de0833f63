class SequenceMatchError(Exception):
    """Base class for failures raised by the matching and alignment code."""


class UndefinedDistanceError(SequenceMatchError, ZeroDivisionError):
    """Raised when the LCS distance is requested for an empty sequence."""

    def __init__(self, len_a: int, len_b: int):
        super().__init__(
            f"distance is undefined for sequences of length {len_a} and {len_b}: "
            "both sequences must be non-empty"
        )
        self.len_a = len_a
        self.len_b = len_b


class AlignmentTooLargeError(SequenceMatchError, MemoryError):
    """Raised when the LCS table cannot be allocated or exceeds the configured cap."""

    def __init__(self, len_a: int, len_b: int, reason: str = ""):
        message = f"cannot align sequences of length {len_a} and {len_b}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.len_a = len_a
        self.len_b = len_b
