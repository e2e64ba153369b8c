"""Persistent user settings for word completion."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict, dataclass, field, fields

log = logging.getLogger("word_complete.settings")

MIN_SUGGESTIONS = 3
MAX_SUGGESTIONS = 10


@dataclass
class CompletionSettings:
    enabled: bool = True
    language: str = "English"
    max_suggestions: int = 3
    custom_dict: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.max_suggestions = max(
            MIN_SUGGESTIONS, min(MAX_SUGGESTIONS, int(self.max_suggestions))
        )
        if not isinstance(self.custom_dict, list):
            log.warning(
                "custom_dict must be a list of words, got %s; ignoring it",
                type(self.custom_dict).__name__,
            )
            self.custom_dict = []
            return
        words = [w for w in self.custom_dict if isinstance(w, str) and w]
        if len(words) != len(self.custom_dict):
            log.warning(
                "Dropped %d invalid custom_dict entries",
                len(self.custom_dict) - len(words),
            )
            self.custom_dict = words


CONFIG_DIR = os.path.join(os.path.expanduser("~"), ".word_complete")
SETTINGS_FILE = os.getenv("WORD_COMPLETE_SETTINGS") or os.path.join(
    CONFIG_DIR, "settings.json"
)


def load_settings(path: str = SETTINGS_FILE) -> CompletionSettings:
    """Return saved settings or defaults if unavailable."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        log.debug("No settings at %s, using defaults", path)
        return CompletionSettings()
    except (OSError, json.JSONDecodeError) as exc:
        log.warning("Could not read settings from %s (%s); using defaults", path, exc)
        return CompletionSettings()

    if not isinstance(data, dict):
        log.warning("Settings in %s are not a JSON object; using defaults", path)
        return CompletionSettings()

    known = {f.name for f in fields(CompletionSettings)}
    try:
        return CompletionSettings(**{k: v for k, v in data.items() if k in known})
    except (TypeError, ValueError) as exc:
        log.warning("Invalid settings in %s (%s); using defaults", path, exc)
        return CompletionSettings()


def save_settings(settings: CompletionSettings, path: str = SETTINGS_FILE) -> None:
    """Persist ``settings`` to ``path`` in JSON format."""
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(asdict(settings), f, indent=2)
    log.debug("Saved settings to %s", path)
