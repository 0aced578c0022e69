"""
trafficnotifications package.

This package keeps the notification log of a network traffic monitor:
threshold and favorite-host alerts are collected in a bounded log and turned
into page states for the operator's notifications view. The package is used
by the `tn_main.py` entrypoint script but can also be imported by a detection
engine that produces events.
"""

__all__ = [
    "config",
    "models",
    "notification_log",
    "page_state",
    "presenter",
    "service",
    "telemetry",
    "translations",
    "units",
    "web",
    "version",
]

version = "0.1.0"
