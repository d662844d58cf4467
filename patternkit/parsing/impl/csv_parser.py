from __future__ import annotations

import csv
import io
import logging
from typing import Any, List, Optional

from patternkit.exceptions import ParseError
from patternkit.parsing.base import BaseParser
from patternkit.parsing.models import ParsedDocument

logger = logging.getLogger(__name__)


class CsvParser(BaseParser):
    """Parser for delimited text.

    With a header row each record is a dict keyed by column name, otherwise
    each record is the list of cell values. Blank lines are skipped.
    """

    format_name = "csv"

    def __init__(self, delimiter: str = ",", has_header: bool = True):
        if len(delimiter) != 1:
            raise ValueError(f"CSV delimiter must be a single character, got {delimiter!r}")
        self.delimiter = delimiter
        self.has_header = has_header

    def parse(self, content: str, *, source: Optional[str] = None) -> ParsedDocument:
        logger.debug("%s (source=%s, delimiter=%r)", self.describe(), source, self.delimiter)

        reader = csv.reader(io.StringIO(content), delimiter=self.delimiter, strict=True)
        try:
            rows = [row for row in reader if row]
        except csv.Error as e:
            raise ParseError(self.format_name, str(e), source=source) from e

        records: List[Any]
        if self.has_header and rows:
            header, body = rows[0], rows[1:]
            records = []
            for line_no, row in enumerate(body, start=2):
                if len(row) != len(header):
                    raise ParseError(
                        self.format_name,
                        f"row {line_no} has {len(row)} fields, expected {len(header)}",
                        source=source,
                    )
                records.append(dict(zip(header, row)))
        else:
            records = rows

        return ParsedDocument(format=self.format_name, records=records, source=source)
