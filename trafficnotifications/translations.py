"""String lookup for the notifications page."""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

log = logging.getLogger(__name__)

LOCALES_DIR = Path(__file__).parent / "locales"

TRANSLATION_KEYS = frozenset(
    {
        "threshold",
        "per_second",
        "incoming",
        "outgoing",
        "packets",
        "bytes",
        "unknown_country",
        "packets_exceeded",
        "packets_exceeded_value",
        "bytes_exceeded",
        "bytes_exceeded_value",
        "favorite_transmitted",
        "clear_all",
        "only_last_30",
        "no_notifications_set",
        "no_notifications_received",
    }
)


class Language(Enum):
    EN = "en"
    IT = "it"

    @classmethod
    def from_code(cls, code: Optional[str]) -> "Language":
        """Resolve a configured language code, falling back to English."""
        if code:
            try:
                return cls(code.strip().lower())
            except ValueError:
                log.warning("Unsupported language %r; falling back to English.", code)
        return cls.EN


def load_catalog(language: Language, locales_dir: Path = LOCALES_DIR) -> Dict[str, Any]:
    path = locales_dir / f"{language.value}.yaml"
    with path.open("r", encoding="utf-8") as fh:
        loaded = yaml.safe_load(fh) or {}
    if not isinstance(loaded, dict):
        raise ValueError(f"Catalog {path} must contain a mapping.")
    missing = TRANSLATION_KEYS - loaded.keys()
    if missing:
        raise ValueError(f"Catalog {path} is missing keys: {sorted(missing)}")
    return loaded


class Translator:
    """Look up display strings by key for one language."""

    def __init__(self, language: Language = Language.EN) -> None:
        self.language = language
        self._catalog = load_catalog(language)

    def get(self, key: str, **values: Any) -> str:
        """Return the string for key, formatted with values.

        Plural entries are mappings with ``one``/``other`` forms selected by
        the ``value`` argument.
        """
        entry = self._catalog[key]
        if isinstance(entry, dict):
            entry = entry["one"] if values.get("value") == 1 else entry["other"]
        if values:
            return entry.format(**values)
        return entry

    __call__ = get
