from __future__ import annotations

import logging
from typing import Dict, List, Type

from patternkit.exceptions import UnsupportedTypeError
from patternkit.sorting.base import SortKey, SortStrategy
from patternkit.sorting.strategies import (
    BuiltinSortStrategy,
    MergeSortStrategy,
    QuickSortStrategy,
    ReverseSortStrategy,
)

logger = logging.getLogger(__name__)


class SortStrategyFactory:
    """Factory to instantiate a sorting strategy by name."""

    _strategies: Dict[str, Type[SortStrategy]] = {
        "builtin": BuiltinSortStrategy,
        "reverse": ReverseSortStrategy,
        "merge": MergeSortStrategy,
        "quick": QuickSortStrategy,
    }

    @classmethod
    def get_strategy(cls, name: str, key: SortKey = None) -> SortStrategy:
        """Return a new strategy instance registered under `name`.

        Raises:
            UnsupportedTypeError: If no strategy is registered under that name.
        """
        normalized = str(name or "").strip().lower()
        strategy_cls = cls._strategies.get(normalized)
        if strategy_cls is None:
            logger.warning("Rejected unknown sort strategy %r", name)
            raise UnsupportedTypeError(name, cls._strategies.keys(), kind="sort strategy")
        return strategy_cls(key=key)

    @classmethod
    def register_strategy(cls, name: str, strategy_cls: Type[SortStrategy]) -> None:
        """Register a new strategy under a name."""
        cls._strategies[name.strip().lower()] = strategy_cls

    @classmethod
    def get_supported_strategies(cls) -> List[str]:
        return list(cls._strategies.keys())
