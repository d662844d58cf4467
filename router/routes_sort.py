from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request

from patternkit.exceptions import PatternKitError
from patternkit.sorting import DataSorter, SortStrategyFactory
from router.common import get_config, to_http_error
from router.schemas import SortRequest, SortResponse


router = APIRouter()


@router.post("/sort", response_model=SortResponse)
def sort_values(request: Request, req: SortRequest) -> SortResponse:
    """Sort `values` with the requested (or default) strategy."""

    name = req.strategy or get_config(request).default_strategy
    try:
        strategy = SortStrategyFactory.get_strategy(name)
    except PatternKitError as e:
        raise to_http_error(e) from e

    try:
        values = DataSorter(strategy).sort(req.values)
    except TypeError as e:
        raise HTTPException(status_code=422, detail={"error": f"Values are not comparable: {e}"}) from e

    return SortResponse(strategy=strategy.name, values=values)
