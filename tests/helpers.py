from __future__ import annotations

from trafficnotifications.models import (
    BytesThresholdExceeded,
    DataInfoHost,
    FavoriteTransmitted,
    HostSummary,
    PacketsThresholdExceeded,
)


def packets_event(timestamp: str = "T", **overrides) -> PacketsThresholdExceeded:
    fields = {"threshold": 100, "incoming": 40, "outgoing": 10, "timestamp": timestamp}
    fields.update(overrides)
    return PacketsThresholdExceeded(**fields)


def bytes_event(timestamp: str = "T", **overrides) -> BytesThresholdExceeded:
    fields = {
        "threshold": 1_000_000,
        "incoming": 1_500,
        "outgoing": 500,
        "timestamp": timestamp,
    }
    fields.update(overrides)
    return BytesThresholdExceeded(**fields)


def favorite_event(
    timestamp: str = "T", asn_name: str = "AS123 Example", country: str = "it"
) -> FavoriteTransmitted:
    return FavoriteTransmitted(
        host=HostSummary(
            domain="example.com",
            asn_name=asn_name,
            country=country,
            traffic_stats=DataInfoHost(
                incoming_packets=7,
                outgoing_packets=3,
                incoming_bytes=1_000,
                outgoing_bytes=500,
            ),
        ),
        timestamp=timestamp,
    )
