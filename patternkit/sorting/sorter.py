from __future__ import annotations

import logging
from typing import Any, List, Sequence

from patternkit.sorting.base import SortStrategy

logger = logging.getLogger(__name__)


class DataSorter:
    """Context object of the Strategy pattern.

    Holds a single :class:`SortStrategy` and forwards every ``sort()`` call to
    it. The strategy can be swapped at runtime without touching callers.

    Example:
        sorter = DataSorter(BuiltinSortStrategy())
        sorter.sort([3, 1, 2])  # [1, 2, 3]
        sorter.set_strategy(ReverseSortStrategy())
        sorter.sort([3, 1, 2])  # [3, 2, 1]
    """

    def __init__(self, strategy: SortStrategy):
        self._strategy = self._check(strategy)

    @staticmethod
    def _check(strategy: Any) -> SortStrategy:
        if not isinstance(strategy, SortStrategy):
            raise TypeError(f"Expected a SortStrategy, got {type(strategy).__name__}")
        return strategy

    @property
    def strategy(self) -> SortStrategy:
        return self._strategy

    def set_strategy(self, strategy: SortStrategy) -> None:
        """Replace the current strategy."""
        self._strategy = self._check(strategy)
        logger.info("Sorting strategy set to %s", strategy.name or type(strategy).__name__)

    def sort(self, data: Sequence[Any]) -> List[Any]:
        logger.debug("Sorting %d items with %s", len(data), self._strategy.name)
        return self._strategy.sort(data)
