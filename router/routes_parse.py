from __future__ import annotations

from fastapi import APIRouter, Request

from patternkit.exceptions import PatternKitError
from patternkit.parsing import ParserFactory
from router.common import get_config, to_http_error
from router.schemas import ParseRequest, ParseResponse


router = APIRouter()


@router.post("/parse", response_model=ParseResponse)
def parse_content(request: Request, req: ParseRequest) -> ParseResponse:
    """Parse `content` with the parser selected by `type`."""

    config = get_config(request)
    type_tag = req.type or config.default_parser

    try:
        options = {}
        if type_tag.strip().lower() == "csv":
            options = {
                "delimiter": req.delimiter or config.csv_delimiter,
                "has_header": config.csv_has_header if req.has_header is None else req.has_header,
            }
        parser = ParserFactory.create_parser(type_tag, **options)
        document = parser.parse(req.content, source="request")
    except PatternKitError as e:
        raise to_http_error(e) from e

    return ParseResponse(
        format=document.format,
        count=len(document),
        records=document.records,
        description=parser.describe(),
    )
