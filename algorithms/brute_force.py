def brute_force_find_all(t: str, p: str):
    n, m = len(t), len(p)
    if m > n:
        return []
    if m == 0:
        return list(range(n + 1))
    res = []
    for i in range(n - m + 1):
        j = 0
        while j < m and p[j] == t[i + j]:
            j += 1
        if j == m:
            res.append(i)
    return res

def brute_force_count(t: str, p: str) -> int:
    return len(brute_force_find_all(t, p))
