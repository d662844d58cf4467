import os
import sys
import unittest

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from patternkit.exceptions import UnsupportedTypeError
from patternkit.sorting import (
    BuiltinSortStrategy,
    DataSorter,
    MergeSortStrategy,
    QuickSortStrategy,
    ReverseSortStrategy,
    SortStrategy,
    SortStrategyFactory,
)


SAMPLES = [
    [],
    [1],
    [3, 1, 2],
    [5, 5, 1, 5, 0, -2, 5],
    list(range(20, 0, -1)),
    ["pear", "apple", "fig", "banana"],
    [2.5, -1.0, 2.5, 0.0],
]


class OnlyLt:
    """Orderable through `__lt__` alone."""

    def __init__(self, value):
        self.value = value

    def __lt__(self, other):
        return self.value < other.value


class TestStrategies(unittest.TestCase):
    def test_all_strategies_agree_with_sorted(self):
        for strategy_cls in (BuiltinSortStrategy, MergeSortStrategy, QuickSortStrategy):
            strategy = strategy_cls()
            for data in SAMPLES:
                with self.subTest(strategy=strategy.name, data=data):
                    self.assertEqual(strategy.sort(data), sorted(data))

    def test_reverse_strategy(self):
        strategy = ReverseSortStrategy()
        for data in SAMPLES:
            with self.subTest(data=data):
                self.assertEqual(strategy.sort(data), sorted(data, reverse=True))

    def test_key_is_honoured(self):
        words = ["ccc", "a", "bb"]
        for name in SortStrategyFactory.get_supported_strategies():
            strategy = SortStrategyFactory.get_strategy(name, key=len)
            expected = sorted(words, key=len, reverse=(name == "reverse"))
            with self.subTest(strategy=name):
                self.assertEqual(strategy.sort(words), expected)

    def test_only_less_than_is_required(self):
        data = [OnlyLt(3), OnlyLt(1), OnlyLt(2), OnlyLt(1)]
        for name in SortStrategyFactory.get_supported_strategies():
            strategy = SortStrategyFactory.get_strategy(name)
            expected = sorted(data, reverse=(name == "reverse"))
            with self.subTest(strategy=name):
                self.assertEqual([x.value for x in strategy.sort(data)], [x.value for x in expected])

    def test_partial_order_matches_sorted(self):
        data = [{1, 2}, {3}, {1}]
        for strategy_cls in (BuiltinSortStrategy, MergeSortStrategy, QuickSortStrategy):
            with self.subTest(strategy=strategy_cls.name):
                self.assertEqual(strategy_cls().sort(data), sorted(data))

    def test_merge_sort_is_stable(self):
        pairs = [("b", 1), ("a", 2), ("b", 0), ("a", 1), ("c", 9), ("a", 0)]
        result = MergeSortStrategy(key=lambda p: p[0]).sort(pairs)
        self.assertEqual(result, sorted(pairs, key=lambda p: p[0]))

    def test_quick_sort_is_stable(self):
        pairs = [("b", 1), ("a", 2), ("b", 0), ("a", 1), ("c", 9), ("a", 0)]
        result = QuickSortStrategy(key=lambda p: p[0]).sort(pairs)
        self.assertEqual(result, sorted(pairs, key=lambda p: p[0]))

    def test_input_is_not_mutated(self):
        data = [3, 1, 2]
        for strategy_cls in (BuiltinSortStrategy, ReverseSortStrategy, MergeSortStrategy, QuickSortStrategy):
            strategy_cls().sort(data)
        self.assertEqual(data, [3, 1, 2])

    def test_accepts_tuples(self):
        self.assertEqual(QuickSortStrategy().sort((2, 1)), [1, 2])


class TestDataSorter(unittest.TestCase):
    def test_delegates_to_strategy(self):
        sorter = DataSorter(BuiltinSortStrategy())
        self.assertEqual(sorter.sort([3, 1, 2]), [1, 2, 3])

    def test_strategy_can_be_swapped(self):
        sorter = DataSorter(BuiltinSortStrategy())
        sorter.set_strategy(ReverseSortStrategy())
        self.assertIsInstance(sorter.strategy, ReverseSortStrategy)
        self.assertEqual(sorter.sort([3, 1, 2]), [3, 2, 1])

    def test_swap_is_logged(self):
        sorter = DataSorter(BuiltinSortStrategy())
        with self.assertLogs("patternkit.sorting.sorter", level="INFO") as captured:
            sorter.set_strategy(MergeSortStrategy())
        self.assertIn("merge", captured.output[0])

    def test_custom_strategy(self):
        class FirstOnly(SortStrategy):
            name = "first"

            def sort(self, data):
                return list(data[:1])

        self.assertEqual(DataSorter(FirstOnly()).sort([9, 8]), [9])

    def test_rejects_non_strategy(self):
        with self.assertRaises(TypeError):
            DataSorter(sorted)  # type: ignore[arg-type]
        sorter = DataSorter(BuiltinSortStrategy())
        with self.assertRaises(TypeError):
            sorter.set_strategy("reverse")  # type: ignore[arg-type]
        self.assertIsInstance(sorter.strategy, BuiltinSortStrategy)


class TestSortStrategyFactory(unittest.TestCase):
    def test_known_names(self):
        expected = {
            "builtin": BuiltinSortStrategy,
            "reverse": ReverseSortStrategy,
            "merge": MergeSortStrategy,
            "quick": QuickSortStrategy,
        }
        for name, cls in expected.items():
            with self.subTest(name=name):
                self.assertIsInstance(SortStrategyFactory.get_strategy(name), cls)

    def test_lookup_ignores_case_and_whitespace(self):
        self.assertIsInstance(SortStrategyFactory.get_strategy("  Merge "), MergeSortStrategy)

    def test_unknown_name_raises(self):
        with self.assertRaises(UnsupportedTypeError) as ctx:
            SortStrategyFactory.get_strategy("bogo")
        self.assertEqual(ctx.exception.type_tag, "bogo")
        self.assertIn("merge", ctx.exception.supported)
        self.assertIn("bogo", str(ctx.exception))

    def test_register_strategy(self):
        class NoopStrategy(SortStrategy):
            name = "noop"

            def sort(self, data):
                return list(data)

        SortStrategyFactory.register_strategy(" NoOp ", NoopStrategy)
        try:
            self.assertIn("noop", SortStrategyFactory.get_supported_strategies())
            self.assertEqual(SortStrategyFactory.get_strategy("noop").sort([2, 1]), [2, 1])
        finally:
            SortStrategyFactory._strategies.pop("noop", None)

    def test_returns_fresh_instances(self):
        a = SortStrategyFactory.get_strategy("quick")
        b = SortStrategyFactory.get_strategy("quick")
        self.assertIsNot(a, b)


if __name__ == "__main__":
    unittest.main()
