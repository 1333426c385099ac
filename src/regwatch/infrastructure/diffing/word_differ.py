"""Word-level differ (Myers O(ND) with linear-space bisection)."""

import re
import time
from collections.abc import Iterable, Iterator, Sequence

from regwatch.domain.value_objects import Segment, SegmentTag

_TOKEN_RE = re.compile(r"\s+|\S+")

# (tag, a_lo, a_hi, b_lo, b_hi)
_Op = tuple[SegmentTag, int, int, int, int]


def tokenize(text: str) -> list[str]:
    """Split text into word tokens and the whitespace runs between them."""
    return _TOKEN_RE.findall(text)


def old_text(segments: Iterable[Segment]) -> str:
    """Reconstruct prior text from unchanged + removed segments."""
    return "".join(s.text for s in segments if s.in_old)


def new_text(segments: Iterable[Segment]) -> str:
    """Reconstruct current text from unchanged + added segments."""
    return "".join(s.text for s in segments if s.in_new)


class WordDiffer:
    """Differ over word tokens, whitespace runs preserved as tokens.

    With a timeout, subproblems still open at the deadline are emitted as one
    removed run plus one added run. Output still reconstructs both texts but
    is no longer minimal.
    """

    def __init__(self, timeout: float | None = None) -> None:
        self._timeout = timeout

    def diff(self, old_text: str, new_text: str) -> Iterator[Segment]:
        """Yield segments transforming old_text into new_text."""
        if old_text == new_text:
            yield Segment(SegmentTag.UNCHANGED, old_text)
            return

        old_tokens = tokenize(old_text)
        new_tokens = tokenize(new_text)
        ids: dict[str, int] = {}
        a = [ids.setdefault(t, len(ids)) for t in old_tokens]
        b = [ids.setdefault(t, len(ids)) for t in new_tokens]

        deadline = None if self._timeout is None else time.monotonic() + self._timeout
        yield from _to_segments(_edit_script(a, b, deadline), old_tokens, new_tokens)


def _edit_script(
    a: Sequence[int], b: Sequence[int], deadline: float | None = None
) -> list[_Op]:
    """Minimal edit script as ordered token-range operations.

    Divide and conquer on the middle snake with an explicit stack; each
    stack entry is either a pending subproblem or a finished operation.
    """
    ops: list[_Op] = []
    stack: list[tuple[bool, tuple]] = [(False, (0, len(a), 0, len(b)))]
    while stack:
        done, item = stack.pop()
        if done:
            ops.append(item)
            continue

        a_lo, a_hi, b_lo, b_hi = item
        prefix = 0
        while (
            a_lo + prefix < a_hi
            and b_lo + prefix < b_hi
            and a[a_lo + prefix] == b[b_lo + prefix]
        ):
            prefix += 1
        suffix = 0
        while (
            a_hi - suffix > a_lo + prefix
            and b_hi - suffix > b_lo + prefix
            and a[a_hi - suffix - 1] == b[b_hi - suffix - 1]
        ):
            suffix += 1

        # Pushed in reverse: suffix, middle, prefix.
        if suffix:
            stack.append(
                (True, (SegmentTag.UNCHANGED, a_hi - suffix, a_hi, b_hi - suffix, b_hi))
            )

        ma_lo, ma_hi = a_lo + prefix, a_hi - suffix
        mb_lo, mb_hi = b_lo + prefix, b_hi - suffix
        if ma_lo == ma_hi and mb_lo == mb_hi:
            pass
        elif ma_lo == ma_hi:
            stack.append((True, (SegmentTag.ADDED, ma_lo, ma_lo, mb_lo, mb_hi)))
        elif mb_lo == mb_hi:
            stack.append((True, (SegmentTag.REMOVED, ma_lo, ma_hi, mb_lo, mb_lo)))
        else:
            split = _bisect(a, b, ma_lo, ma_hi, mb_lo, mb_hi, deadline)
            if split is None:
                stack.append((True, (SegmentTag.ADDED, ma_hi, ma_hi, mb_lo, mb_hi)))
                stack.append((True, (SegmentTag.REMOVED, ma_lo, ma_hi, mb_lo, mb_lo)))
            else:
                x, y = split
                stack.append((False, (x, ma_hi, y, mb_hi)))
                stack.append((False, (ma_lo, x, mb_lo, y)))

        if prefix:
            stack.append(
                (True, (SegmentTag.UNCHANGED, a_lo, a_lo + prefix, b_lo, b_lo + prefix))
            )
    return ops


def _bisect(
    a: Sequence[int],
    b: Sequence[int],
    a_lo: int,
    a_hi: int,
    b_lo: int,
    b_hi: int,
    deadline: float | None = None,
) -> tuple[int, int] | None:
    """Find the middle snake of a[a_lo:a_hi] vs b[b_lo:b_hi].

    Returns the absolute split point, or None when the ranges share no token
    or the deadline passed.
    Forward and reverse searches advance together; V arrays hold the furthest
    x reached on each diagonal k.
    """
    n = a_hi - a_lo
    m = b_hi - b_lo
    max_d = (n + m + 1) // 2
    v_offset = max_d
    v_length = 2 * max_d + 2
    v1 = [-1] * v_length
    v2 = [-1] * v_length
    v1[v_offset + 1] = 0
    v2[v_offset + 1] = 0
    delta = n - m
    # Odd delta: overlap shows up on a forward pass, else on a reverse pass.
    front = delta % 2 != 0
    k1start = k1end = k2start = k2end = 0

    for d in range(max_d):
        if deadline is not None and time.monotonic() >= deadline:
            break
        for k1 in range(-d + k1start, d + 1 - k1end, 2):
            k1_offset = v_offset + k1
            if k1 == -d or (k1 != d and v1[k1_offset - 1] < v1[k1_offset + 1]):
                x1 = v1[k1_offset + 1]
            else:
                x1 = v1[k1_offset - 1] + 1
            y1 = x1 - k1
            while x1 < n and y1 < m and a[a_lo + x1] == b[b_lo + y1]:
                x1 += 1
                y1 += 1
            v1[k1_offset] = x1
            if x1 > n:
                k1end += 2
            elif y1 > m:
                k1start += 2
            elif front:
                k2_offset = v_offset + delta - k1
                if 0 <= k2_offset < v_length and v2[k2_offset] != -1:
                    if x1 >= n - v2[k2_offset]:
                        return a_lo + x1, b_lo + y1

        for k2 in range(-d + k2start, d + 1 - k2end, 2):
            k2_offset = v_offset + k2
            if k2 == -d or (k2 != d and v2[k2_offset - 1] < v2[k2_offset + 1]):
                x2 = v2[k2_offset + 1]
            else:
                x2 = v2[k2_offset - 1] + 1
            y2 = x2 - k2
            while x2 < n and y2 < m and a[a_hi - x2 - 1] == b[b_hi - y2 - 1]:
                x2 += 1
                y2 += 1
            v2[k2_offset] = x2
            if x2 > n:
                k2end += 2
            elif y2 > m:
                k2start += 2
            elif not front:
                k1_offset = v_offset + delta - k2
                if 0 <= k1_offset < v_length and v1[k1_offset] != -1:
                    x1 = v1[k1_offset]
                    y1 = v_offset + x1 - k1_offset
                    if x1 >= n - x2:
                        return a_lo + x1, b_lo + y1
    return None


def _to_segments(
    ops: list[_Op], old_tokens: list[str], new_tokens: list[str]
) -> Iterator[Segment]:
    """Merge operations into segments; removed precedes added in a change run."""
    unchanged: list[str] = []
    removed: list[str] = []
    added: list[str] = []

    def flush_changes() -> Iterator[Segment]:
        if removed:
            yield Segment(SegmentTag.REMOVED, "".join(removed))
            removed.clear()
        if added:
            yield Segment(SegmentTag.ADDED, "".join(added))
            added.clear()

    for tag, a_lo, a_hi, b_lo, b_hi in ops:
        if tag == SegmentTag.UNCHANGED:
            yield from flush_changes()
            unchanged.extend(old_tokens[a_lo:a_hi])
            continue
        if unchanged:
            yield Segment(SegmentTag.UNCHANGED, "".join(unchanged))
            unchanged.clear()
        if tag == SegmentTag.REMOVED:
            removed.extend(old_tokens[a_lo:a_hi])
        else:
            added.extend(new_tokens[b_lo:b_hi])

    if unchanged:
        yield Segment(SegmentTag.UNCHANGED, "".join(unchanged))
    yield from flush_changes()
