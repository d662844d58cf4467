"""Core library for patternkit.

The executable entrypoints live at the repo root:
- app.py (FastAPI)
- cli.py (CLI)
- config.py (YAML config)

This package holds the reusable pieces: sorting strategies (Strategy pattern)
and format parsers (Factory pattern).
"""

from patternkit.exceptions import ParseError, PatternKitError, UnsupportedTypeError
from patternkit.parsing import BaseParser, ParsedDocument, ParserFactory
from patternkit.sorting import DataSorter, SortStrategy, SortStrategyFactory

__all__ = [
    "BaseParser",
    "DataSorter",
    "ParseError",
    "ParsedDocument",
    "ParserFactory",
    "PatternKitError",
    "SortStrategy",
    "SortStrategyFactory",
    "UnsupportedTypeError",
]
