from algorithms.brute_force import brute_force_count, brute_force_find_all

def test_bf_basic():
    assert brute_force_count("acgtacgt", "acgt") == 2
    assert brute_force_find_all("acgtacgt", "acgt") == [0, 4]
    assert brute_force_find_all("ggcatgg", "t") == [4]

def test_bf_overlapping():
    assert brute_force_count("aaaa", "aa") == 3
    assert brute_force_find_all("aaaa", "aa") == [0, 1, 2]

def test_bf_boundaries():
    assert brute_force_count("acg", "acgt") == 0
    assert brute_force_count("", "a") == 0
    assert brute_force_count("acgt", "") == 5
    assert brute_force_find_all("", "") == [0]
    assert brute_force_count("acgt", "acgt") == 1
    assert brute_force_count("acgt", "cgta") == 0

def test_bf_empty_pattern_matches_every_offset():
    assert brute_force_find_all("acg", "") == [0, 1, 2, 3]
