# src/niml/parsers/niml_parser.py

import logging
from time import monotonic

from niml.observability import names
from niml.observability.base import MetricsHook, NoOpMetricsHook

from .base import DocumentParser
from .config import ParserConfig
from .models import ParsedDocument

logger = logging.getLogger(__name__)


class NimlParser(DocumentParser):
    """
    Line-oriented niml parser.
    - One topic level: a header applies until the next header
    - Repeated headers reuse the same section
    - Malformed lines are skipped, never rejected
    """

    def __init__(
        self,
        config: ParserConfig | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.config = config or ParserConfig()
        self.metrics_hook = metrics_hook

    def parse(self, text: str) -> ParsedDocument:
        start = monotonic()
        cfg = self.config
        result: dict[str, str | dict[str, str]] = {}
        current_topic = ""
        line_count = 0

        for line_no, raw in enumerate(text.split("\n"), start=1):
            line_count += 1
            line = self._strip_comment(raw.strip())
            if not line:
                continue

            if line.startswith(cfg.topic_open) and line.endswith(cfg.topic_close):
                current_topic = line.strip(cfg.topic_open + cfg.topic_close)
                if current_topic not in result:
                    result[current_topic] = {}
                continue

            if not line.startswith(cfg.declaration_prefix):
                self._skip(line_no, "unrecognized")
                continue

            declaration = line[len(cfg.declaration_prefix) :].strip()
            key, sep, value = declaration.partition(cfg.assignment)
            if not sep:
                self._skip(line_no, "missing_assignment")
                continue

            key = key.strip()
            value = value.strip().strip(cfg.quote)

            if not current_topic:
                result[key] = value
                continue

            section = result[current_topic]
            if isinstance(section, dict):
                section[key] = value
            else:
                # Header name already taken by a top-level scalar
                self._skip(line_no, "shadowed_topic")

        document = ParsedDocument(result)

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.PARSE_DURATION, elapsed_ms)
        self.metrics_hook.increment(names.PARSE_LINES_TOTAL, line_count)
        self.metrics_hook.record_gauge(names.PARSE_SECTIONS, len(document.sections()))
        logger.debug(
            "Parsed %d lines into %d entries (%d sections)",
            line_count,
            len(document),
            len(document.sections()),
        )
        return document

    def _strip_comment(self, line: str) -> str:
        marker = self.config.comment_marker
        if line.startswith(marker):
            return ""
        idx = line.find(marker)
        if idx != -1:
            line = line[:idx].strip()
        return line

    def _skip(self, line_no: int, reason: str) -> None:
        logger.debug("Skipping line %d: %s", line_no, reason)
        self.metrics_hook.increment(
            names.PARSE_LINES_SKIPPED_TOTAL, labels={"reason": reason}
        )


def parse_text(text: str) -> ParsedDocument:
    """Parse ``text`` with the default syntax.

    Example:
        >>> doc = parse_text('(db)\\n/ host = "localhost"')
        >>> doc["db"]["host"]
        'localhost'
    """
    return NimlParser().parse(text)
