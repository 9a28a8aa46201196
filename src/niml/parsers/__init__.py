from .base import DocumentParser
from .config import ParserConfig
from .models import ParsedDocument, Scalar, Section, Value
from .niml_parser import NimlParser, parse_text

__all__ = [
    "DocumentParser",
    "NimlParser",
    "ParsedDocument",
    "ParserConfig",
    "Scalar",
    "Section",
    "Value",
    "parse_text",
]
