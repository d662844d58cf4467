from __future__ import annotations

import json
import logging
from typing import Optional

from patternkit.exceptions import ParseError
from patternkit.parsing.base import BaseParser
from patternkit.parsing.models import ParsedDocument

logger = logging.getLogger(__name__)


class JsonParser(BaseParser):
    """Parser for JSON documents.

    A top-level array becomes one record per element; any other top-level
    value becomes a single record.
    """

    format_name = "json"

    def parse(self, content: str, *, source: Optional[str] = None) -> ParsedDocument:
        logger.debug("%s (source=%s)", self.describe(), source)
        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise ParseError(self.format_name, str(e), source=source) from e

        records = data if isinstance(data, list) else [data]
        return ParsedDocument(format=self.format_name, records=records, source=source)
