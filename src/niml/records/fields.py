# src/niml/records/fields.py

"""Field enumeration for fill targets.

A record is a dataclass or a pydantic model. Each public field is described
by a ``FieldDescriptor``: the document key it reads, its kind and, for
nested records, the record type to recurse into.

Key overrides:

    @dataclass
    class Server:
        host: str = field(default="", metadata={"niml": "hostname"})
        port: Unsigned = 0

    class Server(BaseModel):
        host: str = Field(default="", json_schema_extra={"niml": "hostname"})
"""

import dataclasses
import types
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Annotated, Any, Union, get_args, get_origin, get_type_hints

from pydantic import BaseModel

from niml.errors import RecordTypeError

DEFAULT_TAG = "niml"


class _UnsignedMarker:
    def __repr__(self) -> str:
        return "UNSIGNED"


UNSIGNED = _UnsignedMarker()

Unsigned = Annotated[int, UNSIGNED]


class FieldKind(str, Enum):
    """Closed set of field types the filler knows how to set."""

    STRING = "string"
    INTEGER = "integer"
    UNSIGNED = "unsigned"
    FLOAT = "float"
    BOOLEAN = "boolean"
    RECORD = "record"


@dataclass(frozen=True)
class FieldDescriptor:
    name: str
    key: str
    kind: FieldKind
    record_type: type | None = None
    optional: bool = False


def is_record_type(tp: object) -> bool:
    if not isinstance(tp, type):
        return False
    return dataclasses.is_dataclass(tp) or issubclass(tp, BaseModel)


def is_record(obj: object) -> bool:
    """True for dataclass and pydantic model *instances* (not classes)."""
    return not isinstance(obj, type) and is_record_type(type(obj))


def ensure_writable_record(target: object) -> None:
    """Raise ``RecordTypeError`` unless ``target`` can be filled in place."""
    if isinstance(target, type):
        raise RecordTypeError(
            f"target must be a record instance, got the class {target.__name__}"
        )
    if not is_record(target):
        raise RecordTypeError(
            "target must be a dataclass or pydantic model instance, "
            f"got {type(target).__name__}"
        )
    record_type = type(target)
    if _is_frozen(record_type):
        raise RecordTypeError(f"{record_type.__name__} is frozen and cannot be filled")


def describe_fields(
    record_type: type, tag: str = DEFAULT_TAG
) -> list[FieldDescriptor]:
    """List the settable fields of ``record_type`` in declaration order.

    Private fields (leading underscore) and fields whose annotation has no
    ``FieldKind`` are left out.

    Raises:
        RecordTypeError: If ``record_type`` is not a dataclass or pydantic
            model class.
    """
    if not is_record_type(record_type):
        raise RecordTypeError(f"{record_type!r} is not a record type")
    return list(_describe(record_type, tag))


@lru_cache(maxsize=256)
def _describe(record_type: type, tag: str) -> tuple[FieldDescriptor, ...]:
    if issubclass(record_type, BaseModel):
        entries = _pydantic_entries(record_type, tag)
    else:
        entries = _dataclass_entries(record_type, tag)

    descriptors = []
    for name, key, annotation, metadata in entries:
        if name.startswith("_"):
            continue
        descriptor = _classify(name, key, annotation, metadata)
        if descriptor is not None:
            descriptors.append(descriptor)
    return tuple(descriptors)


def _dataclass_entries(record_type: type, tag: str) -> list[tuple[str, str, Any, tuple]]:
    try:
        hints = get_type_hints(record_type, include_extras=True)
    except NameError as exc:
        raise RecordTypeError(
            f"cannot resolve field annotation {exc.name!r} of {record_type.__name__}"
        ) from exc
    return [
        (f.name, f.metadata.get(tag) or f.name, hints.get(f.name, f.type), ())
        for f in dataclasses.fields(record_type)
    ]


def _pydantic_entries(
    record_type: type[BaseModel], tag: str
) -> list[tuple[str, str, Any, tuple]]:
    entries = []
    for name, info in record_type.model_fields.items():
        extra = info.json_schema_extra
        override = extra.get(tag) if isinstance(extra, dict) else None
        key = override or info.alias or name
        entries.append((name, str(key), info.annotation, tuple(info.metadata)))
    return entries


def _classify(
    name: str, key: str, annotation: Any, metadata: tuple
) -> FieldDescriptor | None:
    optional = False

    if get_origin(annotation) is Annotated:
        metadata = metadata + tuple(annotation.__metadata__)
        annotation = annotation.__origin__

    if get_origin(annotation) in (Union, types.UnionType):
        args = [a for a in get_args(annotation) if a is not type(None)]
        if len(args) != 1:
            return None
        optional = True
        annotation = args[0]
        if get_origin(annotation) is Annotated:
            metadata = metadata + tuple(annotation.__metadata__)
            annotation = annotation.__origin__

    record_type = None
    if annotation is bool:
        kind = FieldKind.BOOLEAN
    elif annotation is int:
        kind = FieldKind.UNSIGNED if UNSIGNED in metadata else FieldKind.INTEGER
    elif annotation is float:
        kind = FieldKind.FLOAT
    elif annotation is str:
        kind = FieldKind.STRING
    elif is_record_type(annotation):
        kind = FieldKind.RECORD
        record_type = annotation
    else:
        return None

    return FieldDescriptor(
        name=name,
        key=key,
        kind=kind,
        record_type=record_type,
        optional=optional,
    )


def _is_frozen(record_type: type) -> bool:
    if issubclass(record_type, BaseModel):
        return bool(record_type.model_config.get("frozen"))
    return record_type.__dataclass_params__.frozen
