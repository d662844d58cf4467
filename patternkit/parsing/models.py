from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional


@dataclass
class ParsedDocument:
    """Format-neutral result returned by every parser."""

    format: str  # e.g. "json", "csv", "yaml"
    records: List[Any] = field(default_factory=list)
    source: Optional[str] = None

    def __len__(self) -> int:
        return len(self.records)
