from __future__ import annotations

import logging
from typing import Any, List, Optional

import yaml

from patternkit.exceptions import ParseError
from patternkit.parsing.base import BaseParser
from patternkit.parsing.models import ParsedDocument

logger = logging.getLogger(__name__)


class YamlParser(BaseParser):
    """Parser for (multi-document) YAML streams, using ``yaml.safe_load_all``."""

    format_name = "yaml"

    def parse(self, content: str, *, source: Optional[str] = None) -> ParsedDocument:
        logger.debug("%s (source=%s)", self.describe(), source)
        try:
            documents = list(yaml.safe_load_all(content))
        except yaml.YAMLError as e:
            raise ParseError(self.format_name, str(e), source=source) from e

        records: List[Any] = []
        for doc in documents:
            if doc is None:
                continue
            if isinstance(doc, list):
                records.extend(doc)
            else:
                records.append(doc)

        return ParsedDocument(format=self.format_name, records=records, source=source)
