import logging
from prometheus_client import start_http_server

from opentelemetry import metrics
from opentelemetry.exporter.prometheus import PrometheusMetricReader
from opentelemetry.sdk.metrics import MeterProvider
from opentelemetry.sdk.resources import SERVICE_NAME, Resource

log = logging.getLogger(__name__)

class TelemetryManager:
    """Manages OpenTelemetry setup and notification counters."""

    def __init__(self, service_name: str = "traffic_notifications"):
        self.service_name = service_name
        self.meter = None

        self.notification_counter = None
        self.cleared_counter = None
        self.render_counter = None

    def initialize(self, prometheus_port: int = 9464) -> None:
        """Initialize MeterProvider and start Prometheus exporter."""
        try:
            resource = Resource(attributes={SERVICE_NAME: self.service_name})

            # Exporter server bound explicitly so the reader's registry is served on all interfaces
            start_http_server(port=prometheus_port, addr="0.0.0.0")
            reader = PrometheusMetricReader()

            provider = MeterProvider(resource=resource, metric_readers=[reader])
            metrics.set_meter_provider(provider)

            self.meter = provider.get_meter(self.service_name)
            self._create_instruments()

            log.info("Telemetry initialized. Prometheus metrics on port %d", prometheus_port)
        except Exception as e:
            log.error("Failed to initialize telemetry: %s", e)

    def _create_instruments(self) -> None:
        if not self.meter:
            return

        self.notification_counter = self.meter.create_counter(
            "tn.notification.count",
            description="Number of notifications logged",
        )
        self.cleared_counter = self.meter.create_counter(
            "tn.notification.cleared",
            description="Number of notifications removed by clear-all",
        )
        self.render_counter = self.meter.create_counter(
            "tn.page.render",
            description="Number of notifications page renders",
        )

    def record_notification(self, kind: str) -> None:
        if self.notification_counter:
            self.notification_counter.add(1, {"kind": kind})

    def record_clear(self, removed: int) -> None:
        if self.cleared_counter:
            self.cleared_counter.add(removed)

    def record_render(self, state: str) -> None:
        if self.render_counter:
            self.render_counter.add(1, {"state": state})
