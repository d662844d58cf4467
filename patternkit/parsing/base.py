from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from patternkit.parsing.models import ParsedDocument


class BaseParser(ABC):
    """Abstract base class for format-specific parsers."""

    format_name: str = ""

    def describe(self) -> str:
        """Return a one-line human description, e.g. ``"Parsing JSON data"``."""
        return f"Parsing {self.format_name.upper()} data"

    @abstractmethod
    def parse(self, content: str, *, source: Optional[str] = None) -> ParsedDocument:
        """Parse raw text content and return a ParsedDocument."""
        pass
