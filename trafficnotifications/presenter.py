"""Turn notification events into presentation records for the rendering layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from .models import (
    UNKNOWN_COUNTRY,
    BytesThresholdExceeded,
    DataInfoHost,
    FavoriteTransmitted,
    NotificationEvent,
    PacketsThresholdExceeded,
)
from .translations import Translator
from .units import ByteMultiple


class IconKind(Enum):
    PACKETS_THRESHOLD = "packets_threshold"
    BYTES_THRESHOLD = "bytes_threshold"
    STAR = "star"


@dataclass(frozen=True)
class PresentationRecord:
    """Language-resolved content of one notification card."""

    icon_kind: IconKind
    title_key: str
    title: str
    timestamp: str
    subtitle_lines: List[str] = field(default_factory=list)
    detail_lines: List[str] = field(default_factory=list)
    country: Optional[str] = None
    traffic_stats: Optional[DataInfoHost] = None
    flag_tooltip: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "icon": self.icon_kind.value,
            "title_key": self.title_key,
            "title": self.title,
            "timestamp": self.timestamp,
            "subtitle_lines": list(self.subtitle_lines),
            "detail_lines": list(self.detail_lines),
            "country": self.country,
            "traffic_stats": (
                self.traffic_stats.to_dict() if self.traffic_stats else None
            ),
            "flag_tooltip": self.flag_tooltip,
        }


def get_flag_tooltip(
    country: str,
    traffic_stats: DataInfoHost,
    translate: Translator,
    format_bytes: Callable[[int], str] = ByteMultiple.formatted_string,
) -> str:
    """Tooltip text shown over a host's flag."""
    place = translate("unknown_country") if country == UNKNOWN_COUNTRY else country
    return "\n".join(
        [
            place,
            f"{traffic_stats.tot_packets()} {translate('packets')}",
            format_bytes(traffic_stats.tot_bytes()),
        ]
    )


class EventPresenter:
    """Pure mapping from notification events to presentation records."""

    def __init__(
        self,
        translator: Translator,
        format_bytes: Callable[[int], str] = ByteMultiple.formatted_string,
    ) -> None:
        self.translate = translator
        self.format_bytes = format_bytes

    def present(self, event: NotificationEvent) -> PresentationRecord:
        if isinstance(event, PacketsThresholdExceeded):
            return self._packets(event)
        if isinstance(event, BytesThresholdExceeded):
            return self._bytes(event)
        if isinstance(event, FavoriteTransmitted):
            return self._favorite(event)
        raise TypeError(f"Unhandled notification type: {type(event).__name__}")

    def present_all(self, events) -> List[PresentationRecord]:
        return [self.present(event) for event in events]

    def _direction_lines(self, incoming: str, outgoing: str) -> List[str]:
        t = self.translate
        return [
            f" - {t('incoming')}: {incoming}",
            f" - {t('outgoing')}: {outgoing}",
        ]

    def _packets(self, event: PacketsThresholdExceeded) -> PresentationRecord:
        t = self.translate
        total = event.incoming + event.outgoing
        return PresentationRecord(
            icon_kind=IconKind.PACKETS_THRESHOLD,
            title_key="packets_exceeded",
            title=t("packets_exceeded"),
            timestamp=event.timestamp,
            subtitle_lines=[
                f"{t('threshold')}: {event.threshold} {t('per_second')}"
            ],
            detail_lines=[t("packets_exceeded_value", value=total)]
            + self._direction_lines(str(event.incoming), str(event.outgoing)),
        )

    def _bytes(self, event: BytesThresholdExceeded) -> PresentationRecord:
        t = self.translate
        fmt = self.format_bytes
        # ints do not wrap, so the total of two u64 counts is exact
        total = event.incoming + event.outgoing
        return PresentationRecord(
            icon_kind=IconKind.BYTES_THRESHOLD,
            title_key="bytes_exceeded",
            title=t("bytes_exceeded"),
            timestamp=event.timestamp,
            subtitle_lines=[
                f"{t('threshold')}: {fmt(event.threshold)} {t('per_second')}"
            ],
            detail_lines=[t("bytes_exceeded_value", value=fmt(total))]
            + self._direction_lines(fmt(event.incoming), fmt(event.outgoing)),
        )

    def _favorite(self, event: FavoriteTransmitted) -> PresentationRecord:
        host = event.host
        domain_asn = host.domain
        if host.asn_name:
            domain_asn += f" - {host.asn_name}"
        return PresentationRecord(
            icon_kind=IconKind.STAR,
            title_key="favorite_transmitted",
            title=self.translate("favorite_transmitted"),
            timestamp=event.timestamp,
            detail_lines=[domain_asn],
            country=host.country,
            traffic_stats=host.traffic_stats,
            flag_tooltip=get_flag_tooltip(
                host.country, host.traffic_stats, self.translate, self.format_bytes
            ),
        )
