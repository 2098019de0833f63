import html
from typing import Iterable


def coverage_runs(length: int, offsets: Iterable[int], width: int):
    """Split [0, length) into (start, end, covered) runs.

    Overlapping occurrences merge into a single covered run.
    """
    if length <= 0:
        return []
    depth = [0] * (length + 1)
    for s in offsets:
        if 0 <= s < length and width > 0:
            depth[s] += 1
            depth[min(length, s + width)] -= 1
    runs = []
    active = 0
    start = 0
    for i in range(length):
        was = active > 0
        active += depth[i]
        if i and (active > 0) != was:
            runs.append((start, i, was))
            start = i
    runs.append((start, length, active > 0))
    return runs


def highlight_occurrences_html(sequence: str, offsets: Iterable[int], width: int) -> str:
    if not sequence:
        return "<em>No sequence</em>"
    out = []
    for s, e, covered in coverage_runs(len(sequence), offsets, width):
        seg = html.escape(sequence[s:e])
        out.append(f"<mark>{seg}</mark>" if covered else seg)
    return ("<div style='white-space:pre-wrap;word-break:break-all;font-family:monospace'>"
            + "".join(out) + "</div>")
