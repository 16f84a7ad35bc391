# -*- coding: utf-8 -*-
"""
Persisted generator preferences.

PreferencesStore talks to anything shaped like QtCore.QSettings
(``value(key, default, type=...)`` and ``setValue(key, value)``), so the
desktop app hands it a real QSettings and tests hand it an in-memory fake.
Generated passwords are never written to settings.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Any

from .constants import (
    DEFAULT_EXCLUDE_DUPLICATES,
    DEFAULT_EXCLUDE_SIMILAR,
    DEFAULT_LENGTH,
    DEFAULT_USE_DIGITS,
    DEFAULT_USE_LOWERCASE,
    DEFAULT_USE_SYMBOLS,
    DEFAULT_USE_UPPERCASE,
    MAX_LENGTH,
    MIN_LENGTH,
)

logger = logging.getLogger(__name__)


def clamp_length(length: int) -> int:
    return max(MIN_LENGTH, min(MAX_LENGTH, int(length)))


@dataclass(frozen=True)
class GeneratorPreferences:
    length: int = DEFAULT_LENGTH
    use_lowercase: bool = DEFAULT_USE_LOWERCASE
    use_uppercase: bool = DEFAULT_USE_UPPERCASE
    use_digits: bool = DEFAULT_USE_DIGITS
    use_symbols: bool = DEFAULT_USE_SYMBOLS
    exclude_duplicates: bool = DEFAULT_EXCLUDE_DUPLICATES
    exclude_similar: bool = DEFAULT_EXCLUDE_SIMILAR


class PreferencesStore:
    """Load/save GeneratorPreferences (best-effort)."""

    BOOL_KEYS = (
        "use_lowercase",
        "use_uppercase",
        "use_digits",
        "use_symbols",
        "exclude_duplicates",
        "exclude_similar",
    )

    def __init__(self, settings: Any) -> None:
        self._settings = settings

    def load(self) -> GeneratorPreferences:
        defaults = GeneratorPreferences()
        try:
            length = clamp_length(self._settings.value("length", defaults.length, type=int))
            flags = {
                key: bool(self._settings.value(key, getattr(defaults, key), type=bool))
                for key in self.BOOL_KEYS
            }
        except Exception:
            # Unreadable or corrupt settings: start from defaults.
            logger.debug("Failed to load preferences; using defaults.", exc_info=True)
            return defaults

        return GeneratorPreferences(length=length, **flags)

    def save(self, preferences: GeneratorPreferences) -> None:
        try:
            for key, value in asdict(preferences).items():
                self._settings.setValue(key, value)
        except Exception:
            logger.debug("Failed to save preferences; continuing.", exc_info=True)
