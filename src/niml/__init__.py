# Coercion
from .coercion import to_boolean, to_float, to_integer, to_unsigned

# Errors
from .errors import (
    CoercionError,
    FieldError,
    NimlError,
    NimlLoadError,
    RecordTypeError,
)

# Loader
from .loader import load, loads

# Observability
from .observability import InMemoryMetricsHook, MetricsHook, NoOpMetricsHook

# Parsers
from .parsers import (
    DocumentParser,
    NimlParser,
    ParsedDocument,
    ParserConfig,
    parse_text,
)

# Records
from .records import (
    FieldDescriptor,
    FieldKind,
    FillerConfig,
    RecordFiller,
    Unsigned,
    describe_fields,
    fill_record,
)

__all__ = [
    # Coercion
    "to_boolean",
    "to_float",
    "to_integer",
    "to_unsigned",
    # Errors
    "CoercionError",
    "FieldError",
    "NimlError",
    "NimlLoadError",
    "RecordTypeError",
    # Loader
    "load",
    "loads",
    # Observability
    "InMemoryMetricsHook",
    "MetricsHook",
    "NoOpMetricsHook",
    # Parsers
    "DocumentParser",
    "NimlParser",
    "ParsedDocument",
    "ParserConfig",
    "parse_text",
    # Records
    "FieldDescriptor",
    "FieldKind",
    "FillerConfig",
    "RecordFiller",
    "Unsigned",
    "describe_fields",
    "fill_record",
]
