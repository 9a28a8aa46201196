# src/niml/observability/base.py

from dataclasses import dataclass, field
from typing import Protocol


class MetricsHook(Protocol):
    """Sink for parser and filler measurements.

    Implementations forward to a metrics backend. niml never depends on one.
    """

    def record_latency(
        self,
        name: str,
        value_ms: float,
        labels: dict[str, str] | None = None,
    ) -> None: ...

    def increment(
        self,
        name: str,
        value: int = 1,
        labels: dict[str, str] | None = None,
    ) -> None: ...

    def record_gauge(
        self,
        name: str,
        value: float,
        labels: dict[str, str] | None = None,
    ) -> None: ...


class NoOpMetricsHook:
    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        pass

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        pass

    def record_gauge(
        self, name: str, value: float, labels: dict[str, str] | None = None
    ) -> None:
        pass


@dataclass(frozen=True)
class MetricEvent:
    name: str
    value: float
    labels: dict[str, str]


@dataclass
class InMemoryMetricsHook:
    """Keeps every event in memory. Handy for debugging and tests."""

    latencies: list[MetricEvent] = field(default_factory=list)
    counters: list[MetricEvent] = field(default_factory=list)
    gauges: list[MetricEvent] = field(default_factory=list)

    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        self.latencies.append(MetricEvent(name, value_ms, dict(labels or {})))

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        self.counters.append(MetricEvent(name, value, dict(labels or {})))

    def record_gauge(
        self, name: str, value: float, labels: dict[str, str] | None = None
    ) -> None:
        self.gauges.append(MetricEvent(name, value, dict(labels or {})))

    def total(self, name: str, labels: dict[str, str] | None = None) -> float:
        """Sum of all increments recorded under ``name`` (and ``labels``)."""
        return sum(
            event.value
            for event in self.counters
            if event.name == name and (labels is None or event.labels == labels)
        )
