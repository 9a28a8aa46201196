# src/niml/loader.py

"""Read niml text and populate a record in one call.

Example:
    >>> from dataclasses import dataclass, field
    >>> from niml import load
    >>>
    >>> @dataclass
    ... class Config:
    ...     host: str = field(default="", metadata={"niml": "host"})
    ...     port: int = 0
    >>>
    >>> cfg = load("config.niml", Config())
    >>> cfg.port
    8080
"""

import logging
from pathlib import Path
from time import monotonic
from typing import TypeVar

from niml.errors import NimlLoadError
from niml.observability import names
from niml.observability.base import MetricsHook, NoOpMetricsHook
from niml.parsers import DocumentParser, NimlParser
from niml.records import RecordFiller
from niml.records.fields import ensure_writable_record

logger = logging.getLogger(__name__)

R = TypeVar("R")


def loads(
    text: str,
    record: R,
    *,
    parser: DocumentParser | None = None,
    filler: RecordFiller | None = None,
) -> R:
    """Parse ``text`` and fill ``record`` in place.

    Returns:
        ``record`` itself, for chaining.

    Raises:
        RecordTypeError: If ``record`` is not a writable record. Checked
            before parsing.
        FieldError: If a field value cannot be converted.
    """
    ensure_writable_record(record)
    document = (parser or NimlParser()).parse(text)
    (filler or RecordFiller()).fill(document, record)
    return record


def load(
    path: str | Path,
    record: R,
    *,
    encoding: str = "utf-8",
    parser: DocumentParser | None = None,
    filler: RecordFiller | None = None,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> R:
    """Read the niml file at ``path`` and fill ``record`` in place.

    Raises:
        RecordTypeError: If ``record`` is not a writable record. Checked
            before the file is read.
        NimlLoadError: If the file cannot be read or decoded.
        FieldError: If a field value cannot be converted.
    """
    ensure_writable_record(record)
    path = Path(path)
    logger.info("Loading %s into %s", path, type(record).__name__)
    start = monotonic()

    try:
        text = path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Cannot read %s: %s", path, exc)
        metrics_hook.increment(names.LOAD_ERRORS_TOTAL)
        raise NimlLoadError(path=path, detail=str(exc)) from exc

    loads(text, record, parser=parser, filler=filler)

    elapsed_ms = 1000 * (monotonic() - start)
    metrics_hook.record_latency(names.LOAD_DURATION, elapsed_ms)
    return record
