"""Tests for the in-memory call metrics sink."""

import threading

from lob_client.api_client.metrics import CallMetrics, MetricsBundle, MetricsSink


class TestCallMetrics:
    """CallMetrics bookkeeping."""

    def test_unknown_operation(self):
        assert CallMetrics().get('address_verify') is None

    def test_records_calls_errors_and_latency(self):
        metrics = CallMetrics()
        metrics.record('address_verify', 0.25)
        metrics.record('address_verify', 0.75, ValueError('bad'))

        bundle = metrics.get('address_verify')
        assert bundle.calls == 2
        assert bundle.errors == 1
        assert bundle.total_seconds == 1.0
        assert bundle.mean_seconds == 0.5

    def test_snapshot_is_a_copy(self):
        metrics = CallMetrics()
        metrics.record('check_create', 0.1)
        snapshot = metrics.snapshot()
        metrics.record('check_create', 0.1)
        assert snapshot['check_create'].calls == 1
        assert metrics.get('check_create').calls == 2

    def test_concurrent_records_are_all_counted(self):
        metrics = CallMetrics()

        def worker():
            for _ in range(500):
                metrics.record('states_list', 0.001)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        assert metrics.get('states_list').calls == 4000

    def test_empty_bundle_mean(self):
        assert MetricsBundle('x').mean_seconds == 0.0

    def test_default_sink_discards(self):
        assert MetricsSink().record('anything', 1.0) is None
