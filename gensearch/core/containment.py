# gensearch/core/containment.py
# Membership tests over an already-built sequence: linear scan and binary search.
from __future__ import annotations
from typing import Any, Sequence


def linear_contains(sequence: Sequence, key: Any) -> bool:
    for item in sequence:
        if item == key:
            return True
    return False


def binary_contains(sequence: Sequence, key: Any, check_sorted: bool = False) -> bool:
    """
    Half-interval search. `sequence` must be sorted ascending; only `<` is used
    on the elements. Unsorted input gives a wrong answer rather than an error,
    unless check_sorted=True.
    """
    if check_sorted:
        for i in range(len(sequence) - 1):
            if sequence[i + 1] < sequence[i]:
                raise ValueError(
                    f"binary_contains needs a sorted sequence; "
                    f"item {i + 1} ({sequence[i + 1]!r}) < item {i} ({sequence[i]!r})"
                )

    lo, hi = 0, len(sequence)
    while lo < hi:
        mid = (lo + hi) // 2
        if key < sequence[mid]:
            hi = mid
        elif sequence[mid] < key:
            lo = mid + 1
        else:
            return True
    return False
