from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, Field


class SortRequest(BaseModel):
    """Sort request payload."""

    values: List[Any] = Field(..., description="Values to sort. Must be mutually comparable.")
    strategy: Optional[str] = Field(
        default=None,
        description="Strategy name (builtin, reverse, merge, quick). Defaults to config.default_strategy.",
    )


class SortResponse(BaseModel):
    strategy: str
    values: List[Any]


class ParseRequest(BaseModel):
    """Parse request payload."""

    content: str = Field(..., description="Raw document text.")
    type: Optional[str] = Field(
        default=None,
        description="Parser type tag (json, csv, yaml). Defaults to config.default_parser.",
    )
    delimiter: Optional[str] = Field(default=None, min_length=1, max_length=1)
    has_header: Optional[bool] = None


class ParseResponse(BaseModel):
    format: str
    count: int
    records: List[Any]
    description: str
