from __future__ import annotations

import logging
import os
from typing import Any, Dict, Iterable, List, Type

from patternkit.exceptions import UnsupportedTypeError
from patternkit.parsing.base import BaseParser
from patternkit.parsing.impl.csv_parser import CsvParser
from patternkit.parsing.impl.json_parser import JsonParser
from patternkit.parsing.impl.yaml_parser import YamlParser

logger = logging.getLogger(__name__)


def _normalize(type_tag: str) -> str:
    return str(type_tag or "").strip().lower()


class ParserFactory:
    """Factory to instantiate the correct parser for a type tag or file."""

    _parsers: Dict[str, Type[BaseParser]] = {
        "json": JsonParser,
        "csv": CsvParser,
        "yaml": YamlParser,
        "yml": YamlParser,
    }

    _extensions: Dict[str, str] = {
        ".json": "json",
        ".csv": "csv",
        ".yaml": "yaml",
        ".yml": "yaml",
    }

    _instances: Dict[Type[BaseParser], BaseParser] = {}

    @classmethod
    def _lookup(cls, type_tag: str) -> Type[BaseParser]:
        parser_cls = cls._parsers.get(_normalize(type_tag))
        if parser_cls is None:
            logger.warning("Rejected unknown parser type %r", type_tag)
            raise UnsupportedTypeError(type_tag, cls._parsers.keys())
        return parser_cls

    @classmethod
    def create_parser(cls, type_tag: str, **options: Any) -> BaseParser:
        """Return a new parser for `type_tag`, built with `options`.

        Raises:
            UnsupportedTypeError: If the tag is not registered.
        """
        return cls._lookup(type_tag)(**options)

    @classmethod
    def get_parser(cls, type_tag: str) -> BaseParser:
        """Return a default-configured parser for `type_tag` (cached)."""
        parser_cls = cls._lookup(type_tag)
        if parser_cls not in cls._instances:
            cls._instances[parser_cls] = parser_cls()
        return cls._instances[parser_cls]

    @classmethod
    def type_for_file(cls, file_path: str) -> str:
        """Map a file path to its registered type tag via its extension."""
        _, ext = os.path.splitext(file_path)
        type_tag = cls._extensions.get(ext.lower())
        if not ext:
            logger.warning("Rejected file without extension %r", file_path)
            raise UnsupportedTypeError(file_path, cls._extensions.keys(), kind="file (no extension)")
        if type_tag is None:
            logger.warning("Rejected unknown file extension %r (%s)", ext, file_path)
            raise UnsupportedTypeError(ext, cls._extensions.keys(), kind="file extension")
        return type_tag

    @classmethod
    def get_parser_for_file(cls, file_path: str) -> BaseParser:
        return cls.get_parser(cls.type_for_file(file_path))

    @classmethod
    def register_parser(
        cls, type_tag: str, parser_cls: Type[BaseParser], extensions: Iterable[str] = ()
    ) -> None:
        """Register a new parser for a type tag and, optionally, file extensions."""
        tag = _normalize(type_tag)
        cls._parsers[tag] = parser_cls
        for ext in extensions:
            ext = ext.lower()
            cls._extensions[ext if ext.startswith(".") else f".{ext}"] = tag

    @classmethod
    def get_supported_types(cls) -> List[str]:
        """Return a list of supported type tags (e.g. ['json', 'csv'])."""
        return list(cls._parsers.keys())

    @classmethod
    def get_supported_extensions(cls) -> List[str]:
        """Return a list of supported file extensions (e.g. ['.json', '.csv'])."""
        return list(cls._extensions.keys())
