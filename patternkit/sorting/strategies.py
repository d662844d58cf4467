from __future__ import annotations

from typing import Any, List, Sequence

from patternkit.sorting.base import SortStrategy


class BuiltinSortStrategy(SortStrategy):
    """Delegates to Python's built-in ``sorted`` (Timsort)."""

    name = "builtin"

    def sort(self, data: Sequence[Any]) -> List[Any]:
        return sorted(data, key=self.key)


class ReverseSortStrategy(SortStrategy):
    """Built-in sort, largest first."""

    name = "reverse"

    def sort(self, data: Sequence[Any]) -> List[Any]:
        return sorted(data, key=self.key, reverse=True)


class MergeSortStrategy(SortStrategy):
    """Top-down merge sort.

    Stable: when two keys compare equal the element from the left half is
    emitted first, so the original relative order is preserved.
    """

    name = "merge"

    def sort(self, data: Sequence[Any]) -> List[Any]:
        items = list(data)
        if len(items) <= 1:
            return items
        return self._merge_sort(items)

    def _merge_sort(self, items: List[Any]) -> List[Any]:
        if len(items) <= 1:
            return items

        mid = len(items) // 2
        left = self._merge_sort(items[:mid])
        right = self._merge_sort(items[mid:])

        merged: List[Any] = []
        i = j = 0
        while i < len(left) and j < len(right):
            # Only `<`, as in sorted(); ties take the left element.
            if not self._key_of(right[j]) < self._key_of(left[i]):
                merged.append(left[i])
                i += 1
            else:
                merged.append(right[j])
                j += 1

        merged.extend(left[i:])
        merged.extend(right[j:])
        return merged


class QuickSortStrategy(SortStrategy):
    """Quicksort with a three-way (Dutch flag) partition.

    Elements equal to the pivot are collected once and never recursed into,
    so inputs with many duplicates do not degrade to quadratic depth.
    Stable: each partition keeps its elements in input order.
    """

    name = "quick"

    def sort(self, data: Sequence[Any]) -> List[Any]:
        return self._quick_sort(list(data))

    def _quick_sort(self, items: List[Any]) -> List[Any]:
        if len(items) <= 1:
            return items

        pivot = self._key_of(items[len(items) // 2])
        less: List[Any] = []
        equal: List[Any] = []
        greater: List[Any] = []
        for item in items:
            k = self._key_of(item)
            if k < pivot:
                less.append(item)
            elif pivot < k:
                greater.append(item)
            else:
                equal.append(item)

        return self._quick_sort(less) + equal + self._quick_sort(greater)
