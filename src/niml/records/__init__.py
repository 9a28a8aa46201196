from .config import FillerConfig
from .fields import (
    UNSIGNED,
    FieldDescriptor,
    FieldKind,
    Unsigned,
    describe_fields,
    is_record,
    is_record_type,
)
from .filler import RecordFiller, fill_record

__all__ = [
    "FieldDescriptor",
    "FieldKind",
    "FillerConfig",
    "RecordFiller",
    "UNSIGNED",
    "Unsigned",
    "describe_fields",
    "fill_record",
    "is_record",
    "is_record_type",
]
