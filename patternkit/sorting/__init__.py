from patternkit.sorting.base import SortStrategy
from patternkit.sorting.factory import SortStrategyFactory
from patternkit.sorting.sorter import DataSorter
from patternkit.sorting.strategies import (
    BuiltinSortStrategy,
    MergeSortStrategy,
    QuickSortStrategy,
    ReverseSortStrategy,
)
