from patternkit.parsing.base import BaseParser
from patternkit.parsing.factory import ParserFactory
from patternkit.parsing.impl.csv_parser import CsvParser
from patternkit.parsing.impl.json_parser import JsonParser
from patternkit.parsing.impl.yaml_parser import YamlParser
from patternkit.parsing.models import ParsedDocument
