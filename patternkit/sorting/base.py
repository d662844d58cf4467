from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, List, Optional, Sequence

SortKey = Optional[Callable[[Any], Any]]


class SortStrategy(ABC):
    """Abstract base class for interchangeable sorting algorithms."""

    name: str = ""

    def __init__(self, key: SortKey = None):
        self.key = key

    def _key_of(self, item: Any) -> Any:
        return self.key(item) if self.key is not None else item

    @abstractmethod
    def sort(self, data: Sequence[Any]) -> List[Any]:
        """Return a new sorted list; the input is left untouched."""
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key={self.key!r})"
