"""Notification event dataclasses shared by the log, presenter and web layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Union

U32_MAX = 2**32 - 1
U64_MAX = 2**64 - 1

UNKNOWN_COUNTRY = "ZZ"


class InvalidNotificationError(ValueError):
    """Raised when a notification event is structurally malformed."""


def _check_uint(name: str, value: Any, maximum: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidNotificationError(
            f"{name} must be an integer, got {type(value).__name__}"
        )
    if value < 0 or value > maximum:
        raise InvalidNotificationError(f"{name}={value} out of range [0, {maximum}]")


def _check_str(name: str, value: Any) -> None:
    if not isinstance(value, str):
        raise InvalidNotificationError(
            f"{name} must be a string, got {type(value).__name__}"
        )


def normalize_country(code: Any) -> str:
    """Return an upper-case ISO 3166 alpha-2 code, or ZZ when unknown."""
    if not isinstance(code, str):
        return UNKNOWN_COUNTRY
    code = code.strip().upper()
    if len(code) != 2 or not code.isalpha():
        return UNKNOWN_COUNTRY
    return code


@dataclass(frozen=True, slots=True)
class DataInfoHost:
    """Traffic counters accumulated for a single host."""

    incoming_packets: int = 0
    outgoing_packets: int = 0
    incoming_bytes: int = 0
    outgoing_bytes: int = 0

    def __post_init__(self) -> None:
        _check_uint("incoming_packets", self.incoming_packets, U64_MAX)
        _check_uint("outgoing_packets", self.outgoing_packets, U64_MAX)
        _check_uint("incoming_bytes", self.incoming_bytes, U64_MAX)
        _check_uint("outgoing_bytes", self.outgoing_bytes, U64_MAX)

    def tot_packets(self) -> int:
        return self.incoming_packets + self.outgoing_packets

    def tot_bytes(self) -> int:
        return self.incoming_bytes + self.outgoing_bytes

    def to_dict(self) -> Dict[str, int]:
        return {
            "incoming_packets": self.incoming_packets,
            "outgoing_packets": self.outgoing_packets,
            "incoming_bytes": self.incoming_bytes,
            "outgoing_bytes": self.outgoing_bytes,
        }


@dataclass(frozen=True, slots=True)
class HostSummary:
    """Denormalized info about the host behind a favorite transmission."""

    domain: str
    asn_name: str = ""
    country: str = UNKNOWN_COUNTRY
    traffic_stats: DataInfoHost = field(default_factory=DataInfoHost)

    def __post_init__(self) -> None:
        _check_str("domain", self.domain)
        _check_str("asn_name", self.asn_name)
        if not isinstance(self.traffic_stats, DataInfoHost):
            raise InvalidNotificationError("traffic_stats must be a DataInfoHost")
        # frozen dataclass: bypass __setattr__ to store the normalized code
        object.__setattr__(self, "country", normalize_country(self.country))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "domain": self.domain,
            "asn_name": self.asn_name,
            "country": self.country,
            "traffic_stats": self.traffic_stats.to_dict(),
        }


@dataclass(frozen=True, slots=True)
class PacketsThresholdExceeded:
    """Packets per second went over the configured threshold."""

    kind = "packets_threshold_exceeded"

    threshold: int
    incoming: int
    outgoing: int
    timestamp: str

    def __post_init__(self) -> None:
        _check_uint("threshold", self.threshold, U32_MAX)
        _check_uint("incoming", self.incoming, U32_MAX)
        _check_uint("outgoing", self.outgoing, U32_MAX)
        _check_str("timestamp", self.timestamp)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "threshold": self.threshold,
            "incoming": self.incoming,
            "outgoing": self.outgoing,
            "timestamp": self.timestamp,
        }


@dataclass(frozen=True, slots=True)
class BytesThresholdExceeded:
    """Bytes per second went over the configured threshold."""

    kind = "bytes_threshold_exceeded"

    threshold: int
    incoming: int
    outgoing: int
    timestamp: str

    def __post_init__(self) -> None:
        _check_uint("threshold", self.threshold, U32_MAX)
        _check_uint("incoming", self.incoming, U64_MAX)
        _check_uint("outgoing", self.outgoing, U64_MAX)
        _check_str("timestamp", self.timestamp)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "threshold": self.threshold,
            "incoming": self.incoming,
            "outgoing": self.outgoing,
            "timestamp": self.timestamp,
        }


@dataclass(frozen=True, slots=True)
class FavoriteTransmitted:
    """A host marked as favorite exchanged data."""

    kind = "favorite_transmitted"

    host: HostSummary
    timestamp: str

    def __post_init__(self) -> None:
        if not isinstance(self.host, HostSummary):
            raise InvalidNotificationError("host must be a HostSummary")
        _check_str("timestamp", self.timestamp)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "host": self.host.to_dict(),
            "timestamp": self.timestamp,
        }


NotificationEvent = Union[
    PacketsThresholdExceeded, BytesThresholdExceeded, FavoriteTransmitted
]

EVENT_TYPES = (PacketsThresholdExceeded, BytesThresholdExceeded, FavoriteTransmitted)


def event_from_dict(data: Dict[str, Any]) -> NotificationEvent:
    """Build a notification event from its tagged dict form."""
    if not isinstance(data, dict):
        raise InvalidNotificationError("Notification payload must be a mapping.")

    kind = data.get("kind")
    try:
        if kind == PacketsThresholdExceeded.kind:
            return PacketsThresholdExceeded(
                threshold=data["threshold"],
                incoming=data["incoming"],
                outgoing=data["outgoing"],
                timestamp=data["timestamp"],
            )
        if kind == BytesThresholdExceeded.kind:
            return BytesThresholdExceeded(
                threshold=data["threshold"],
                incoming=data["incoming"],
                outgoing=data["outgoing"],
                timestamp=data["timestamp"],
            )
        if kind == FavoriteTransmitted.kind:
            host = data["host"]
            if not isinstance(host, dict):
                raise InvalidNotificationError("host must be a mapping.")
            stats = host.get("traffic_stats") or {}
            if not isinstance(stats, dict):
                raise InvalidNotificationError("traffic_stats must be a mapping.")
            return FavoriteTransmitted(
                host=HostSummary(
                    domain=host["domain"],
                    asn_name=host.get("asn_name", ""),
                    country=host.get("country", UNKNOWN_COUNTRY),
                    traffic_stats=DataInfoHost(**stats),
                ),
                timestamp=data["timestamp"],
            )
    except KeyError as exc:
        raise InvalidNotificationError(f"Missing field {exc.args[0]!r}") from exc
    except TypeError as exc:
        raise InvalidNotificationError(str(exc)) from exc

    raise InvalidNotificationError(f"Unknown notification kind {kind!r}")
