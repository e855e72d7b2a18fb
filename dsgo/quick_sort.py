"""Quick sorts and introspective sorts: binary, block and three-way partitioning."""

from __future__ import annotations

from typing import Any, Callable, MutableSequence

from dsgo.basic_sort import heap_sort, simple_sort

_LOWER_BOUND = 16
_LOWER_BOUND_Y = 20
_SORT3_ON_3_BOUND = 128
_BLOCK_SIZE = 64


def _sort_range(
    sorter: Callable[[list[Any]], None], values: MutableSequence[Any], lo: int, hi: int
) -> None:
    if hi - lo > 1:
        chunk = list(values[lo:hi])
        sorter(chunk)
        values[lo:hi] = chunk


def _sort3(v: MutableSequence[Any], a: int, b: int, c: int) -> tuple[int, int, int]:
    """Return the three indices ordered by the values they hold."""
    if v[a] < v[b]:
        if v[b] < v[c]:
            return a, b, c
        if v[a] < v[c]:
            return a, c, b
        return c, a, b
    if v[a] < v[c]:
        return b, a, c
    if v[b] < v[c]:
        return b, c, a
    return c, b, a


def _sort4(v: MutableSequence[Any], a: int, b: int, c: int, d: int) -> tuple[int, int, int, int]:
    if v[b] < v[a]:
        a, b = b, a
    if v[d] < v[c]:
        c, d = d, c
    if v[c] < v[a]:
        if v[a] < v[d]:
            if v[b] < v[d]:
                return c, a, b, d
            return c, a, d, b
        return c, d, a, b
    if v[c] < v[b]:
        if v[d] < v[b]:
            return a, c, d, b
        return a, c, b, d
    return a, b, c, d


def _sort5(
    v: MutableSequence[Any], a: int, b: int, c: int, d: int, e: int
) -> tuple[int, int, int, int, int]:
    if v[b] < v[a]:
        a, b = b, a
    if v[d] < v[c]:
        c, d = d, c
    if v[c] < v[a]:
        a, c = c, a
        b, d = d, b
    if v[c] < v[e]:
        if v[d] < v[e]:
            if v[b] < v[d]:
                if v[c] < v[b]:
                    return a, c, b, d, e
                return a, b, c, d, e
            if v[b] < v[e]:
                return a, c, d, b, e
            return a, c, d, e, b
        if v[b] < v[e]:
            if v[c] < v[b]:
                return a, c, b, e, d
            return a, b, c, e, d
        if v[b] < v[d]:
            return a, c, e, b, d
        return a, c, e, d, b
    if v[b] < v[c]:
        if v[e] < v[a]:
            return e, a, b, c, d
        if v[e] < v[b]:
            return a, e, b, c, d
        return a, b, e, c, d
    if v[a] < v[e]:
        a, e = e, a
    if v[d] < v[b]:
        b, d = d, b
    return e, a, c, b, d


def _choose_pivots(values: MutableSequence[Any], lo: int, hi: int) -> tuple[int, int, int]:
    """Pick low, median and high samples (ninther on large ranges)."""
    size = hi - lo
    m, s = size // 2, size // 4
    left, mid, right = _sort3(values, lo + m - s, lo + m, lo + m + s)
    if size > _SORT3_ON_3_BOUND:
        x, s8 = size // 2, size // 8
        _, left, _ = _sort3(values, lo + s8, lo + x - s8, lo + x - 1)
        _, right, _ = _sort3(values, lo + x + 1, lo + x + s8, lo + size - s8)
        left, mid, right = _sort3(values, left, mid, right)
    return left, mid, right


def _prepare(values: MutableSequence[Any], lo: int, hi: int) -> Any:
    """Place sentinels at both ends of the range and return the pivot."""
    left, mid, right = _choose_pivots(values, lo, hi)
    last = hi - 1
    pivot = values[mid]
    values[lo], values[left] = values[left], values[lo]
    values[last], values[right] = values[right], values[last]
    return pivot


def _hoare(values: MutableSequence[Any], l: int, r: int, pivot: Any) -> int:
    while True:
        while values[l] < pivot:
            l += 1
        while pivot < values[r]:
            r -= 1
        if l >= r:
            return l
        values[l], values[r] = values[r], values[l]
        l += 1
        r -= 1


def _partition(values: MutableSequence[Any], lo: int, hi: int) -> int:
    pivot = _prepare(values, lo, hi)
    return _hoare(values, lo + 1, hi - 2, pivot)


def _block_partition(values: MutableSequence[Any], lo: int, hi: int) -> int:
    pivot = _prepare(values, lo, hi)
    l, r = lo + 1, hi - 2

    if r - l >= _BLOCK_SIZE * 2:
        left_offsets = [0] * _BLOCK_SIZE
        right_offsets = [0] * _BLOCK_SIZE
        la = lb = 0
        ra = rb = 0
        while r - l >= _BLOCK_SIZE * 2:
            if la == lb:
                la = lb = 0
                for i in range(_BLOCK_SIZE):
                    left_offsets[lb] = i
                    if not values[l + i] < pivot:
                        lb += 1
            if ra == rb:
                ra = rb = 0
                for i in range(_BLOCK_SIZE):
                    right_offsets[rb] = i
                    if not pivot < values[r - i]:
                        rb += 1
            for _ in range(min(lb - la, rb - ra)):
                ll = l + left_offsets[la]
                la += 1
                rr = r - right_offsets[ra]
                ra += 1
                values[ll], values[rr] = values[rr], values[ll]
            if la == lb:
                l += _BLOCK_SIZE
            if ra == rb:
                r -= _BLOCK_SIZE

        if la != lb:
            while True:
                while pivot < values[r]:
                    r -= 1
                ll = l + left_offsets[la]
                if ll >= r:
                    return r + 1
                values[ll], values[r] = values[r], values[ll]
                r -= 1
                la += 1
                if la == lb:
                    l += _BLOCK_SIZE
                    if l > r:
                        return r + 1
                    break
        elif ra != rb:
            while True:
                while values[l] < pivot:
                    l += 1
                rr = r - right_offsets[ra]
                if l >= rr:
                    return l
                values[l], values[rr] = values[rr], values[l]
                l += 1
                ra += 1
                if ra == rb:
                    r -= _BLOCK_SIZE
                    if l > r:
                        return l
                    break

    return _hoare(values, l, r, pivot)


def _three_way_scan(
    values: MutableSequence[Any], l: int, r: int, pivot_l: Any, pivot_r: Any
) -> tuple[int, int]:
    """Split [l, r] into < pivot_l, between, > pivot_r; return the inner borders."""
    while True:
        while values[l] < pivot_l:
            l += 1
        while pivot_r < values[r]:
            r -= 1
        if pivot_r < values[l]:
            values[l], values[r] = values[r], values[l]
            r -= 1
            if values[l] < pivot_l:
                l += 1
                continue
        break

    k = l + 1
    while k <= r:
        if pivot_r < values[k]:
            while pivot_r < values[r]:
                r -= 1
            if k >= r:
                break
            if values[r] < pivot_l:
                values[l], values[k], values[r] = values[r], values[l], values[k]
                l += 1
            else:
                values[k], values[r] = values[r], values[k]
            r -= 1
        elif values[k] < pivot_l:
            values[k], values[l] = values[l], values[k]
            l += 1
        k += 1
    return l, r


def _tri_partition(values: MutableSequence[Any], lo: int, hi: int) -> tuple[int, int]:
    """Partition around two pivots; return their final positions."""
    size = hi - lo
    m, s = size // 2, size // 4
    x, left, _, right, y = _sort5(values, lo + m - s, lo + m - 1, lo + m, lo + m + 1, lo + m + s)

    last = hi - 1
    pivot_l, pivot_r = values[left], values[right]
    values[left], values[right] = values[lo], values[last]
    values[lo + 1], values[x] = values[x], values[lo + 1]
    values[last - 1], values[y] = values[y], values[last - 1]

    l, r = _three_way_scan(values, lo + 2, last - 2, pivot_l, pivot_r)

    l -= 1
    r += 1
    values[lo], values[l] = values[l], pivot_l
    values[last], values[r] = values[r], pivot_r
    return l, r


def _tri_partition_v2(values: MutableSequence[Any], lo: int, hi: int) -> tuple[int, int, bool]:
    size = hi - lo
    m, s = size // 2, size // 4
    x, left, right, y = _sort4(values, lo + m - s, lo + m - 1, lo + m + 1, lo + m + s)

    last = hi - 1
    values[lo], values[x] = values[x], values[lo]
    values[last], values[y] = values[y], values[last]
    pivot_l, pivot_r = values[left], values[right]

    l, r = _three_way_scan(values, lo + 1, last - 1, pivot_l, pivot_r)
    return l, r + 1, pivot_l == pivot_r


def _quick_sort(values: MutableSequence[Any], lo: int, hi: int) -> None:
    if hi - lo < _LOWER_BOUND:
        _sort_range(simple_sort, values, lo, hi)
        return
    mid = _partition(values, lo, hi)
    _quick_sort(values, lo, mid)
    _quick_sort(values, mid, hi)


def quick_sort(values: MutableSequence[Any]) -> None:
    """Unstable recursive quick sort with median-of-three pivots."""
    _quick_sort(values, 0, len(values))


def quick_sort_v2(values: MutableSequence[Any]) -> None:
    """Quick sort driven by an explicit stack of pending ranges."""
    tasks = [(0, len(values))]
    while tasks:
        lo, hi = tasks.pop()
        if hi - lo < _LOWER_BOUND:
            _sort_range(simple_sort, values, lo, hi)
        else:
            mid = _partition(values, lo, hi)
            tasks.append((mid, hi))
            tasks.append((lo, mid))


def _block_quick_sort(values: MutableSequence[Any], lo: int, hi: int) -> None:
    while hi - lo >= _LOWER_BOUND:
        mid = _block_partition(values, lo, hi)
        _block_quick_sort(values, mid, hi)
        hi = mid
    _sort_range(simple_sort, values, lo, hi)


def block_quick_sort(values: MutableSequence[Any]) -> None:
    """Quick sort whose partition classifies items in blocks before swapping."""
    _block_quick_sort(values, 0, len(values))


def _quick_sort_y(values: MutableSequence[Any], lo: int, hi: int) -> None:
    while hi - lo > _LOWER_BOUND_Y:
        fst, snd = _tri_partition(values, lo, hi)
        _quick_sort_y(values, lo, fst)
        _quick_sort_y(values, snd + 1, hi)
        if values[fst] == values[snd]:
            return
        lo, hi = fst + 1, snd
    _sort_range(simple_sort, values, lo, hi)


def quick_sort_y(values: MutableSequence[Any]) -> None:
    """Dual-pivot (three-way) quick sort."""
    _quick_sort_y(values, 0, len(values))


def _quick_sort_y_v2(values: MutableSequence[Any], lo: int, hi: int) -> None:
    while hi - lo > _LOWER_BOUND_Y:
        left, right, skip = _tri_partition_v2(values, lo, hi)
        _quick_sort_y_v2(values, lo, left)
        _quick_sort_y_v2(values, right, hi)
        if skip:
            return
        lo, hi = left, right
    _sort_range(simple_sort, values, lo, hi)


def quick_sort_y_v2(values: MutableSequence[Any]) -> None:
    """Dual-pivot quick sort that keeps the pivots inside the middle part."""
    _quick_sort_y_v2(values, 0, len(values))


def _intro_sort(values: MutableSequence[Any], lo: int, hi: int, life: int) -> None:
    if hi - lo < _LOWER_BOUND:
        _sort_range(simple_sort, values, lo, hi)
        return
    life -= 1
    if life < 0:
        _sort_range(heap_sort, values, lo, hi)
        return
    mid = _partition(values, lo, hi)
    _intro_sort(values, lo, mid, life)
    _intro_sort(values, mid, hi, life)


def intro_sort(values: MutableSequence[Any]) -> None:
    """Quick sort that falls back to heap sort when recursion gets too deep."""
    _intro_sort(values, 0, len(values), len(values).bit_length() * 2)


def _block_intro_sort(values: MutableSequence[Any], lo: int, hi: int, life: int) -> None:
    while hi - lo >= _LOWER_BOUND:
        life -= 1
        if life < 0:
            _sort_range(heap_sort, values, lo, hi)
            return
        mid = _block_partition(values, lo, hi)
        _block_intro_sort(values, mid, hi, life)
        hi = mid
    _sort_range(simple_sort, values, lo, hi)


def block_intro_sort(values: MutableSequence[Any]) -> None:
    """Introspective sort using block partitioning."""
    _block_intro_sort(values, 0, len(values), len(values).bit_length() * 2)


def _intro_sort_y(values: MutableSequence[Any], lo: int, hi: int, life: int) -> None:
    while hi - lo > _LOWER_BOUND_Y:
        life -= 1
        if life < 0:
            _sort_range(heap_sort, values, lo, hi)
            return
        fst, snd = _tri_partition(values, lo, hi)
        _intro_sort_y(values, lo, fst, life)
        _intro_sort_y(values, snd + 1, hi, life)
        if values[fst] == values[snd]:
            return
        lo, hi = fst + 1, snd
    _sort_range(simple_sort, values, lo, hi)


def intro_sort_y(values: MutableSequence[Any]) -> None:
    """Introspective sort using dual-pivot partitioning."""
    _intro_sort_y(values, 0, len(values), len(values).bit_length() * 3 // 2)