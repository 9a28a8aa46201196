# src/niml/errors.py

"""Exception hierarchy for niml.

Parsing never raises on malformed input. Errors come from three places:
- Misuse: the fill target is not a writable record (``RecordTypeError``)
- Conversion: a stored value cannot become the declared type
  (``CoercionError``, surfaced to callers wrapped in ``FieldError``)
- I/O: the source file cannot be read (``NimlLoadError``)
"""

from pathlib import Path


class NimlError(Exception):
    """Base class for all niml errors."""


class RecordTypeError(NimlError, TypeError):
    """Raised when a fill target is not a writable structured record."""


class CoercionError(NimlError, ValueError):
    def __init__(self, message: str, *, value: object, target: str) -> None:
        super().__init__(message)
        self.value = value
        self.target = target


class FieldError(NimlError):
    """Raised when a single record field cannot be populated.

    ``field`` is the dotted attribute path (``db.port`` for nested records).
    The underlying ``CoercionError`` is available as ``__cause__``.
    """

    def __init__(self, *, field: str, key: str, detail: str) -> None:
        super().__init__(f"failed to set field {field}: {detail}")
        self.field = field
        self.key = key
        self.detail = detail


class NimlLoadError(NimlError):
    def __init__(self, *, path: str | Path, detail: str) -> None:
        super().__init__(f"failed to read file: {detail}")
        self.path = Path(path)
        self.detail = detail
