"""Configuration loading for trafficnotifications."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .models import U32_MAX


DEFAULT_CONFIG_PATHS = (
    Path("/etc/trafficnotifications/config.yaml"),
    Path.home() / ".config" / "trafficnotifications" / "config.yaml",
    Path("config.yaml"),
)

ENV_PREFIX = "TN_"


@dataclass
class NotificationsConfig:
    """Threshold settings as resolved by the settings page.

    ``None`` means the corresponding notification is disabled.
    """

    packets_threshold: Optional[int] = None
    bytes_threshold: Optional[int] = None
    favorite_notify_enabled: bool = False

    def any_enabled(self) -> bool:
        return (
            self.packets_threshold is not None
            or self.bytes_threshold is not None
            or self.favorite_notify_enabled
        )


@dataclass
class WebConfig:
    enabled: bool = True
    host: str = "127.0.0.1"
    port: int = 8080


@dataclass
class TelemetryConfig:
    enabled: bool = False
    prometheus_port: int = 9464


@dataclass
class AppConfig:
    notifications: NotificationsConfig = field(default_factory=NotificationsConfig)
    web: WebConfig = field(default_factory=WebConfig)
    telemetry: TelemetryConfig = field(default_factory=TelemetryConfig)
    language: str = "en"
    log_level: str = "INFO"


def _merge_dict(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Deep merge override into base dict."""
    for key, value in override.items():
        if (
            key in base
            and isinstance(base[key], dict)
            and isinstance(value, dict)
        ):
            base[key] = _merge_dict(base[key], value)
        else:
            base[key] = value
    return base


def _dataclass_from_dict(datacls, data: Dict[str, Any]):
    field_names = {f.name for f in datacls.__dataclass_fields__.values()}  # type: ignore[attr-defined]
    kwargs = {}
    for key, value in data.items():
        if key in field_names:
            kwargs[key] = value
    return datacls(**kwargs)


def load_config(path: Optional[str] = None) -> AppConfig:
    """Load configuration from YAML file and environment overrides."""
    config_dict: Dict[str, Any] = {}

    paths_to_try = [Path(path)] if path else list(DEFAULT_CONFIG_PATHS)
    for candidate in paths_to_try:
        if candidate.is_file():
            with candidate.open("r", encoding="utf-8") as fh:
                loaded = yaml.safe_load(fh) or {}
            if not isinstance(loaded, dict):
                raise ValueError(f"Config file {candidate} must contain a mapping.")
            config_dict = _merge_dict(config_dict, loaded)

    env_override = _load_env_override()
    if env_override:
        config_dict = _merge_dict(config_dict, env_override)

    return build_config(config_dict)


def build_config(data: Dict[str, Any]) -> AppConfig:
    """Build AppConfig dataclass from raw dict."""
    raw_notifications = _section(data, "notifications")
    notifications = NotificationsConfig(
        packets_threshold=_parse_threshold(
            "packets_threshold", raw_notifications.get("packets_threshold")
        ),
        bytes_threshold=_parse_threshold(
            "bytes_threshold", raw_notifications.get("bytes_threshold")
        ),
        favorite_notify_enabled=bool(
            raw_notifications.get("favorite_notify_enabled", False)
        ),
    )
    web = _dataclass_from_dict(WebConfig, _section(data, "web"))
    telemetry = _dataclass_from_dict(TelemetryConfig, _section(data, "telemetry"))

    return AppConfig(
        notifications=notifications,
        web=web,
        telemetry=telemetry,
        language=str(data.get("language", "en")),
        log_level=str(data.get("log_level", "INFO")),
    )


def _section(data: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = data.get(name)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ValueError(f"Config section {name!r} must be a mapping.")
    return section


def _parse_threshold(name: str, value: Any) -> Optional[int]:
    if value is None or value == "":
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer or null, got {value!r}")
    if value < 0 or value > U32_MAX:
        raise ValueError(f"{name}={value} out of range [0, {U32_MAX}]")
    return value


def _load_env_override() -> Dict[str, Any]:
    """Read overrides from environment variables prefixed with TN_."""
    overrides: Dict[str, Any] = {}
    for key, value in os.environ.items():
        if not key.startswith(ENV_PREFIX):
            continue
        path = key[len(ENV_PREFIX):].lower().split("__")
        _assign_override(overrides, path, value)
    return overrides


def _assign_override(target: Dict[str, Any], path: List[str], value: str) -> None:
    cursor = target
    for segment in path[:-1]:
        cursor = cursor.setdefault(segment, {})
    leaf = path[-1]
    cursor[leaf] = _parse_env_value(value)


def _parse_env_value(raw: str) -> Any:
    lowered = raw.lower()
    if lowered in {"none", "null"}:
        return None
    if raw.isdigit():
        return int(raw)
    if lowered in {"true", "yes"}:
        return True
    if lowered in {"false", "no"}:
        return False
    return raw
