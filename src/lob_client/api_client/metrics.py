"""
Per-client call metrics.

A metrics sink receives one observation per API call. CallMetrics keeps
counters in memory; pass any object with a compatible ``record`` method to
LobClient to forward observations elsewhere.
"""
import threading
from dataclasses import dataclass
from typing import Dict, Optional


@dataclass
class MetricsBundle:
    """Counters for one operation."""
    name: str
    calls: int = 0
    errors: int = 0
    total_seconds: float = 0.0

    @property
    def mean_seconds(self) -> float:
        if self.calls == 0:
            return 0.0
        return self.total_seconds / self.calls


class MetricsSink:
    """Interface for metrics sinks. The default implementation discards everything."""

    def record(self, operation: str, elapsed: float, error: Optional[BaseException] = None) -> None:
        pass


class CallMetrics(MetricsSink):
    """Thread-safe in-memory metrics, one MetricsBundle per operation name."""

    def __init__(self):
        self._lock = threading.Lock()
        self._bundles: Dict[str, MetricsBundle] = {}

    def record(self, operation: str, elapsed: float, error: Optional[BaseException] = None) -> None:
        with self._lock:
            bundle = self._bundles.get(operation)
            if bundle is None:
                bundle = self._bundles[operation] = MetricsBundle(operation)
            bundle.calls += 1
            bundle.total_seconds += elapsed
            if error is not None:
                bundle.errors += 1

    def get(self, operation: str) -> Optional[MetricsBundle]:
        with self._lock:
            return self._bundles.get(operation)

    def snapshot(self) -> Dict[str, MetricsBundle]:
        """Return a copy of all bundles."""
        with self._lock:
            return {
                name: MetricsBundle(b.name, b.calls, b.errors, b.total_seconds)
                for name, b in self._bundles.items()
            }
