"""
inversions.py — Inversion Counter
==================================
Number of pairs (i < j) with a[i] > a[j], counted during a merge sort
of a private copy: whenever a right-half value is taken before the
remaining left-half values, each of those is one inversion.

O(n log n).  No steps, no store access: callers pass a snapshot.
"""

from typing import List, Sequence


def count_inversions(values: Sequence) -> int:
    work = list(values)
    temp = [None] * len(work)
    return _sort_count(work, temp, 0, len(work) - 1)


def _sort_count(arr: List, temp: List, left: int, right: int) -> int:
    if left >= right:
        return 0
    mid = (left + right) // 2
    inv  = _sort_count(arr, temp, left, mid)
    inv += _sort_count(arr, temp, mid + 1, right)
    inv += _merge_count(arr, temp, left, mid, right)
    return inv


def _merge_count(arr: List, temp: List, left: int, mid: int, right: int) -> int:
    i, j, k = left, mid + 1, left
    inv = 0
    while i <= mid and j <= right:
        if arr[i] <= arr[j]:
            temp[k] = arr[i]
            i += 1
        else:
            temp[k] = arr[j]
            j += 1
            inv += mid - i + 1
        k += 1
    while i <= mid:
        temp[k] = arr[i]
        i += 1
        k += 1
    while j <= right:
        temp[k] = arr[j]
        j += 1
        k += 1
    arr[left:right + 1] = temp[left:right + 1]
    return inv
