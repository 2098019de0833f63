"""
Karp-Rabin exact matching with a base-2 polynomial rolling hash.

The hash of a window w of length m is sum(ord(w[k]) * base**(m-1-k)) mod `mod`,
so the leftmost symbol carries the largest weight. Sliding the window drops the
leftmost term, shifts every weight up by one degree and adds the new symbol.
Equal hashes are always confirmed symbol by symbol before a match is counted.
"""
HASH_BASE = 2
HASH_MODULUS = 2**31 - 1  # INT_MAX of a 32-bit int


def polynomial_hash(window: str, base: int = HASH_BASE, mod: int = HASH_MODULUS) -> int:
    h = 0
    for ch in window:
        h = (h * base + ord(ch)) % mod
    return h


def rehash(before: str, h: int, after: str, power: int,
           base: int = HASH_BASE, mod: int = HASH_MODULUS) -> int:
    # power must be base**(m-1) % mod for a window of length m
    return ((h - ord(before) * power) * base + ord(after)) % mod


def _verify(t: str, p: str, i: int) -> bool:
    j = 0
    while j < len(p) and p[j] == t[i + j]:
        j += 1
    return j == len(p)


def rabin_karp_find_all(t: str, p: str, base: int = HASH_BASE, mod: int = HASH_MODULUS):
    n, m = len(t), len(p)
    if m > n:
        return []
    if m == 0:
        # every offset matches the empty window
        return list(range(n + 1))
    power = pow(base, m - 1, mod)
    hp = polynomial_hash(p, base, mod)
    h = polynomial_hash(t[:m], base, mod)
    res = []
    for i in range(n - m + 1):
        if h == hp and _verify(t, p, i):
            res.append(i)
        if i < n - m:
            h = rehash(t[i], h, t[i + m], power, base, mod)
    return res


def rabin_karp_count(t: str, p: str, base: int = HASH_BASE, mod: int = HASH_MODULUS) -> int:
    return len(rabin_karp_find_all(t, p, base, mod))
