#!/usr/bin/env python3
"""trafficnotifications entrypoint script."""

from __future__ import annotations

import argparse
import logging
import signal
import sys

from trafficnotifications.config import load_config
from trafficnotifications.models import (
    BytesThresholdExceeded,
    DataInfoHost,
    FavoriteTransmitted,
    HostSummary,
    PacketsThresholdExceeded,
)
from trafficnotifications.presenter import EventPresenter
from trafficnotifications.service import NotificationsService
from trafficnotifications.telemetry import TelemetryManager
from trafficnotifications.translations import Language, Translator
from trafficnotifications.web import create_app


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Serve the notification log of the traffic monitor."
    )
    parser.add_argument(
        "--config",
        type=str,
        help="Path to configuration YAML file.",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        help="Override log level (DEBUG, INFO, WARNING, ERROR).",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Load configuration, print the current page state and exit.",
    )
    parser.add_argument(
        "--demo",
        action="store_true",
        help="Seed the log with one notification of each kind.",
    )
    return parser.parse_args(argv)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
    )


def seed_demo(service: NotificationsService) -> None:
    service.notify(
        PacketsThresholdExceeded(
            threshold=500, incoming=420, outgoing=180, timestamp="08:15:02"
        )
    )
    service.notify(
        BytesThresholdExceeded(
            threshold=1_000_000,
            incoming=3_400_000,
            outgoing=250_000,
            timestamp="08:15:07",
        )
    )
    service.notify(
        FavoriteTransmitted(
            host=HostSummary(
                domain="example.com",
                asn_name="AS15133 Edgecast",
                country="US",
                traffic_stats=DataInfoHost(
                    incoming_packets=12,
                    outgoing_packets=9,
                    incoming_bytes=8_400,
                    outgoing_bytes=1_250,
                ),
            ),
            timestamp="08:15:11",
        )
    )


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv or sys.argv[1:])
    config = load_config(args.config)

    log_level = args.log_level or config.log_level
    configure_logging(log_level)
    log = logging.getLogger("tn")
    log.info("trafficnotifications starting up.")

    telemetry = None
    if config.telemetry.enabled:
        telemetry = TelemetryManager()
        telemetry.initialize(config.telemetry.prometheus_port)

    translator = Translator(Language.from_code(config.language))
    service = NotificationsService(
        config=config.notifications,
        presenter=EventPresenter(translator),
        telemetry=telemetry,
    )
    if args.demo:
        seed_demo(service)

    def _graceful_shutdown(signum, frame):  # type: ignore[unused-argument]
        log.info("Received signal %s; exiting.", signum)
        sys.exit(0)

    signal.signal(signal.SIGINT, _graceful_shutdown)
    signal.signal(signal.SIGTERM, _graceful_shutdown)

    if args.dry_run:
        page = service.render()
        log.info(
            "Dry run complete. Page state: %s (%d notifications).",
            page.kind.value,
            len(page.records),
        )
        return 0

    if not config.web.enabled:
        log.error("Web interface disabled in configuration; nothing to serve.")
        return 1

    app = create_app(config, service)
    log.info("Serving notifications on http://%s:%d", config.web.host, config.web.port)
    app.run(host=config.web.host, port=config.web.port)
    return 0


if __name__ == "__main__":
    sys.exit(main())
