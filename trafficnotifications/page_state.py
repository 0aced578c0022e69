"""Decide what the notifications page shows for a given config and log."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List

from .config import NotificationsConfig
from .notification_log import LogSnapshot
from .presenter import EventPresenter, PresentationRecord


class PageKind(Enum):
    UNCONFIGURED = "unconfigured"
    WAITING_FOR_EVENTS = "waiting_for_events"
    POPULATED = "populated"


@dataclass(frozen=True)
class PageState:
    kind: PageKind
    records: List[PresentationRecord] = field(default_factory=list)
    show_disclaimer: bool = False
    messages: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "state": self.kind.value,
            "records": [record.to_dict() for record in self.records],
            "show_disclaimer": self.show_disclaimer,
            "messages": dict(self.messages),
        }


def select_page_state(config: NotificationsConfig, snapshot: LogSnapshot) -> PageKind:
    """Classify the page. A non-empty log always wins over configuration."""
    if not snapshot.is_empty():
        return PageKind.POPULATED
    if not config.any_enabled():
        return PageKind.UNCONFIGURED
    return PageKind.WAITING_FOR_EVENTS


def build_page_state(
    config: NotificationsConfig,
    snapshot: LogSnapshot,
    presenter: EventPresenter,
    dots: str = "",
) -> PageState:
    t = presenter.translate
    kind = select_page_state(config, snapshot)

    if kind is PageKind.UNCONFIGURED:
        return PageState(
            kind=kind,
            messages={"body": t("no_notifications_set"), "settings_page": "notifications"},
        )

    if kind is PageKind.WAITING_FOR_EVENTS:
        return PageState(
            kind=kind,
            messages={"body": t("no_notifications_received"), "dots": dots},
        )

    show_disclaimer = snapshot.at_or_over_cap()
    messages = {"clear_all": t("clear_all")}
    if show_disclaimer:
        messages["disclaimer"] = t("only_last_30")
    return PageState(
        kind=kind,
        records=presenter.present_all(snapshot),
        show_disclaimer=show_disclaimer,
        messages=messages,
    )
