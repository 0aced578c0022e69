from __future__ import annotations

import unittest
from unittest.mock import patch

from opentelemetry.sdk.metrics.export import InMemoryMetricReader

from trafficnotifications.telemetry import TelemetryManager


def _collect(reader: InMemoryMetricReader) -> dict:
    """Map metric name to a list of (attributes, value) data points."""
    points: dict = {}
    data = reader.get_metrics_data()
    if data is None:
        return points
    for resource_metrics in data.resource_metrics:
        for scope_metrics in resource_metrics.scope_metrics:
            for metric in scope_metrics.metrics:
                points.setdefault(metric.name, []).extend(
                    (dict(point.attributes or {}), point.value)
                    for point in metric.data.data_points
                )
    return points


class TelemetryManagerTests(unittest.TestCase):
    def _initialized(self) -> tuple[TelemetryManager, InMemoryMetricReader]:
        reader = InMemoryMetricReader()
        telemetry = TelemetryManager(service_name="tn_test")
        with patch("trafficnotifications.telemetry.start_http_server") as server, patch(
            "trafficnotifications.telemetry.PrometheusMetricReader", return_value=reader
        ), patch("trafficnotifications.telemetry.metrics.set_meter_provider"):
            telemetry.initialize(prometheus_port=9999)
        server.assert_called_once_with(port=9999, addr="0.0.0.0")
        return telemetry, reader

    def test_counters_created(self) -> None:
        telemetry, _ = self._initialized()
        self.assertIsNotNone(telemetry.meter)
        self.assertIsNotNone(telemetry.notification_counter)
        self.assertIsNotNone(telemetry.cleared_counter)
        self.assertIsNotNone(telemetry.render_counter)

    def test_records_values_and_attributes(self) -> None:
        telemetry, reader = self._initialized()
        telemetry.record_notification("packets_threshold_exceeded")
        telemetry.record_notification("packets_threshold_exceeded")
        telemetry.record_notification("favorite_transmitted")
        telemetry.record_clear(3)
        telemetry.record_render("populated")

        points = _collect(reader)
        notifications = {attrs["kind"]: value for attrs, value in points["tn.notification.count"]}
        self.assertEqual(
            notifications,
            {"packets_threshold_exceeded": 2, "favorite_transmitted": 1},
        )
        self.assertEqual(points["tn.notification.cleared"], [({}, 3)])
        self.assertEqual(points["tn.page.render"], [({"state": "populated"}, 1)])

    def test_failed_exporter_is_logged(self) -> None:
        telemetry = TelemetryManager()
        with patch(
            "trafficnotifications.telemetry.start_http_server",
            side_effect=OSError("address in use"),
        ), self.assertLogs("trafficnotifications.telemetry", level="ERROR") as logs:
            telemetry.initialize(prometheus_port=9999)

        self.assertIn("address in use", logs.output[0])
        self.assertIsNone(telemetry.meter)
        self.assertIsNone(telemetry.notification_counter)
        # recording without instruments is a no-op
        telemetry.record_notification("bytes_threshold_exceeded")
        telemetry.record_clear(1)
        telemetry.record_render("unconfigured")


if __name__ == "__main__":
    unittest.main()
