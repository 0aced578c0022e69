#!/usr/bin/env python3
"""
Push sample notifications to a running trafficnotifications server.

Useful to exercise the notifications page without a detection engine.
"""

from __future__ import annotations

import argparse
import random
import sys
import time
from datetime import datetime

import requests


def _timestamp() -> str:
    return datetime.now().strftime("%Y/%m/%d %H:%M:%S")


def post_event(base_url: str, payload: dict) -> None:
    response = requests.post(f"{base_url}/notifications", json=payload, timeout=5)
    response.raise_for_status()


def send_packets_exceeded(base_url: str, threshold: int) -> None:
    incoming = random.randint(threshold, threshold * 3)
    outgoing = random.randint(0, threshold)
    print(f"[+] Packets threshold {threshold}/s exceeded ({incoming + outgoing} packets)")
    post_event(
        base_url,
        {
            "kind": "packets_threshold_exceeded",
            "threshold": threshold,
            "incoming": incoming,
            "outgoing": outgoing,
            "timestamp": _timestamp(),
        },
    )


def send_bytes_exceeded(base_url: str, threshold: int) -> None:
    incoming = random.randint(threshold, threshold * 10)
    outgoing = random.randint(0, threshold * 2)
    print(f"[+] Bytes threshold {threshold}/s exceeded ({incoming + outgoing} bytes)")
    post_event(
        base_url,
        {
            "kind": "bytes_threshold_exceeded",
            "threshold": threshold,
            "incoming": incoming,
            "outgoing": outgoing,
            "timestamp": _timestamp(),
        },
    )


def send_favorite(base_url: str, domain: str, asn_name: str, country: str) -> None:
    print(f"[+] Favorite host {domain} transmitted")
    post_event(
        base_url,
        {
            "kind": "favorite_transmitted",
            "timestamp": _timestamp(),
            "host": {
                "domain": domain,
                "asn_name": asn_name,
                "country": country,
                "traffic_stats": {
                    "incoming_packets": random.randint(1, 500),
                    "outgoing_packets": random.randint(1, 500),
                    "incoming_bytes": random.randint(100, 500_000),
                    "outgoing_bytes": random.randint(100, 500_000),
                },
            },
        },
    )


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Simulate notifications for trafficnotifications."
    )
    parser.add_argument(
        "--url",
        default="http://127.0.0.1:8080",
        help="Base URL of the trafficnotifications server.",
    )
    parser.add_argument(
        "--rounds",
        type=int,
        # Default enough rounds to trigger the 30-notification disclaimer
        default=11,
        help="How many times to send one notification of each kind.",
    )
    parser.add_argument(
        "--packets-threshold",
        type=int,
        default=500,
        help="Packets per second threshold echoed in the events.",
    )
    parser.add_argument(
        "--bytes-threshold",
        type=int,
        default=1_000_000,
        help="Bytes per second threshold echoed in the events.",
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=0.2,
        help="Seconds to wait between rounds.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv or sys.argv[1:])
    base_url = args.url.rstrip("/")

    try:
        for _ in range(args.rounds):
            send_packets_exceeded(base_url, args.packets_threshold)
            send_bytes_exceeded(base_url, args.bytes_threshold)
            send_favorite(base_url, "example.com", "AS15133 Edgecast", "US")
            time.sleep(args.delay)
    except requests.RequestException as exc:
        print(f"FAILURE: could not post notification: {exc}", file=sys.stderr)
        return 1

    print("[+] Simulation complete.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
