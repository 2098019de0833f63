import logging
from typing import Optional

from algorithms.errors import AlignmentTooLargeError, UndefinedDistanceError

logger = logging.getLogger(__name__)


def _new_row(size: int):
    return [0] * size


def lcs_length(a: str, b: str, max_cells: Optional[int] = None) -> int:
    """Length of the longest common subsequence of a and b.

    Iterative DP over T[i][j] = T[i-1][j-1] + 1 on a match, else
    max(T[i-1][j], T[i][j-1]). Only the previous row is kept, sized by the
    shorter sequence, since the path itself is never needed.
    Raises AlignmentTooLargeError if len(a) * len(b) exceeds max_cells or the
    row buffer cannot be allocated.
    """
    n, m = len(a), len(b)
    if max_cells is not None and n * m > max_cells:
        raise AlignmentTooLargeError(n, m, f"{n * m} cells exceeds the limit of {max_cells}")
    if n < m:
        a, b, n, m = b, a, m, n
    if m == 0:
        return 0
    try:
        dp = _new_row(m + 1)
    except MemoryError as e:
        raise AlignmentTooLargeError(n, m, "out of memory") from e
    logger.debug("aligning %d x %d symbols", n, m)
    for i in range(1, n + 1):
        prev = 0
        ai = a[i - 1]
        for j in range(1, m + 1):
            cur = dp[j]
            if ai == b[j - 1]:
                dp[j] = prev + 1
            else:
                dp[j] = max(dp[j], dp[j - 1])
            prev = cur
    return dp[m]


def distance_from_length(length: int, len_a: int, len_b: int) -> float:
    shortest = min(len_a, len_b)
    if shortest == 0:
        raise UndefinedDistanceError(len_a, len_b)
    return 1 - length / shortest


def lcs_distance(a: str, b: str, max_cells: Optional[int] = None) -> float:
    if not a or not b:
        raise UndefinedDistanceError(len(a), len(b))
    return distance_from_length(lcs_length(a, b, max_cells), len(a), len(b))
