# src/niml/records/filler.py

import logging
from collections.abc import Callable, Mapping
from time import monotonic

from pydantic import ValidationError

from niml.coercion import to_boolean, to_float, to_integer, to_unsigned
from niml.errors import CoercionError, FieldError, RecordTypeError
from niml.observability import names
from niml.observability.base import MetricsHook, NoOpMetricsHook

from .config import FillerConfig
from .fields import FieldDescriptor, FieldKind, describe_fields, ensure_writable_record

logger = logging.getLogger(__name__)

_COERCERS: dict[FieldKind, Callable[[object], object]] = {
    FieldKind.INTEGER: to_integer,
    FieldKind.UNSIGNED: to_unsigned,
    FieldKind.FLOAT: to_float,
    FieldKind.BOOLEAN: to_boolean,
}


class RecordFiller:
    """Populates record fields from a parsed document or one of its sections.

    - Missing keys leave fields untouched
    - Strings are assigned as-is, numbers and booleans are coerced
    - Nested records are filled from sections, scalars for them are ignored
    - The first failed coercion aborts the fill; fields set before it stay set
    """

    def __init__(
        self,
        config: FillerConfig | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.config = config or FillerConfig()
        self.metrics_hook = metrics_hook

    def fill(self, mapping: Mapping[str, object], target: object) -> None:
        """Fill ``target`` in place from ``mapping``.

        Args:
            mapping: A ``ParsedDocument``, one of its sections, or any mapping
                of the same shape.
            target: A dataclass or pydantic model instance.

        Raises:
            RecordTypeError: If ``target`` is not a writable record.
            FieldError: If a field value cannot be converted.
        """
        ensure_writable_record(target)
        start = monotonic()
        count = self._fill(mapping, target, prefix="")
        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.FILL_DURATION, elapsed_ms)
        self.metrics_hook.increment(names.FILL_FIELDS_SET_TOTAL, count)

    def _fill(self, mapping: Mapping[str, object], target: object, prefix: str) -> int:
        count = 0
        for descriptor in describe_fields(type(target), self.config.tag):
            if descriptor.key not in mapping:
                continue
            path = prefix + descriptor.name
            count += self._set_field(descriptor, mapping[descriptor.key], target, path)
        return count

    def _set_field(
        self, descriptor: FieldDescriptor, value: object, target: object, path: str
    ) -> int:
        if descriptor.kind is FieldKind.STRING:
            if not isinstance(value, str):
                return 0
            self._assign(descriptor, target, value, path)
            return 1

        if descriptor.kind is FieldKind.RECORD:
            if not isinstance(value, Mapping):
                return 0
            nested = getattr(target, descriptor.name, None)
            if nested is None:
                nested = self._new_record(descriptor, path)
                self._assign(descriptor, target, nested, path)
            else:
                ensure_writable_record(nested)
            return self._fill(value, nested, prefix=path + ".")

        try:
            converted = _COERCERS[descriptor.kind](value)
        except CoercionError as exc:
            raise self._field_error(descriptor, path, exc) from exc

        self._assign(descriptor, target, converted, path)
        return 1

    def _assign(
        self, descriptor: FieldDescriptor, target: object, value: object, path: str
    ) -> None:
        # pydantic models may validate on assignment or freeze single fields
        try:
            setattr(target, descriptor.name, value)
        except ValidationError as exc:
            raise self._field_error(descriptor, path, exc) from exc
        logger.debug("Set field %s", path)

    def _field_error(
        self, descriptor: FieldDescriptor, path: str, exc: Exception
    ) -> FieldError:
        logger.error("Cannot set field %s from key %r: %s", path, descriptor.key, exc)
        self.metrics_hook.increment(names.FILL_ERRORS_TOTAL, labels={"field": path})
        return FieldError(field=path, key=descriptor.key, detail=str(exc))

    def _new_record(self, descriptor: FieldDescriptor, path: str) -> object:
        record_type = descriptor.record_type
        if record_type is None:
            raise RecordTypeError(f"field {path} has no record type to create")
        try:
            return record_type()
        except (TypeError, ValidationError) as exc:
            raise RecordTypeError(
                f"cannot create a default {record_type.__name__} "
                f"for field {path}: {exc}"
            ) from exc


def fill_record(mapping: Mapping[str, object], target: object) -> None:
    """Fill ``target`` from ``mapping`` with the default filler."""
    RecordFiller().fill(mapping, target)
