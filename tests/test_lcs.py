import random

import pytest

from algorithms.errors import AlignmentTooLargeError, UndefinedDistanceError
from algorithms.lcs import distance_from_length, lcs_distance, lcs_length

def test_lcs_length():
    assert lcs_length("acgt", "gtac") == 2
    assert lcs_length("acgt", "acgt") == 4
    assert lcs_length("aaaa", "cccc") == 0
    assert lcs_length("gattaca", "tacg") == 3
    assert lcs_length("", "acgt") == 0
    assert lcs_length("", "") == 0

def test_lcs_distance():
    assert abs(lcs_distance("acgt", "gtac") - 0.5) < 1e-9
    assert lcs_distance("acgt", "acgt") == 0
    assert lcs_distance("aaaa", "c") == 1
    assert lcs_distance("acgtacgt", "cgt") == 0

def test_lcs_distance_undefined_for_empty():
    with pytest.raises(UndefinedDistanceError):
        lcs_distance("", "acgt")
    with pytest.raises(ZeroDivisionError):
        lcs_distance("acgt", "")
    with pytest.raises(UndefinedDistanceError):
        distance_from_length(0, 0, 0)

def test_lcs_symmetry_and_bounds():
    rng = random.Random(7)
    for _ in range(200):
        a = "".join(rng.choice("acgt") for _ in range(rng.randint(0, 25)))
        b = "".join(rng.choice("acgt") for _ in range(rng.randint(0, 25)))
        n = lcs_length(a, b)
        assert n == lcs_length(b, a)
        assert 0 <= n <= min(len(a), len(b))
        if a and b:
            assert 0 <= lcs_distance(a, b) <= 1
        if a:
            assert lcs_distance(a, a) == 0

def test_lcs_cell_limit():
    with pytest.raises(AlignmentTooLargeError):
        lcs_length("acgt" * 10, "acgt" * 10, max_cells=100)
    assert lcs_length("acgt", "acgt", max_cells=16) == 4

def test_lcs_out_of_memory(monkeypatch):
    import algorithms.lcs as lcs

    def no_memory(size):
        raise MemoryError
    monkeypatch.setattr(lcs, "_new_row", no_memory)
    with pytest.raises(AlignmentTooLargeError, match="out of memory"):
        lcs_length("acgt", "gtac")
