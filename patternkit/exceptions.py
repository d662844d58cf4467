from __future__ import annotations

from typing import Iterable, List, Optional


class PatternKitError(Exception):
    """Base class for all errors raised by patternkit."""


class UnsupportedTypeError(PatternKitError, ValueError):
    """Raised when a factory is asked for a type tag it does not know."""

    def __init__(self, type_tag: str, supported: Iterable[str] = (), *, kind: str = "type") -> None:
        self.type_tag = type_tag
        self.supported: List[str] = sorted(supported)
        self.kind = kind
        supported_str = ", ".join(self.supported) or "none"
        super().__init__(f"Unsupported {kind}: {type_tag!r} (supported: {supported_str})")


class ParseError(PatternKitError):
    """Raised when a parser cannot decode its input."""

    def __init__(self, format_name: str, message: str, *, source: Optional[str] = None) -> None:
        self.format_name = format_name
        self.source = source
        where = f" in {source}" if source else ""
        super().__init__(f"Invalid {format_name.upper()} input{where}: {message}")
