# -*- coding: utf-8 -*-
"""
Presentation state for the generator screen, independent of any UI toolkit.

The view model is the caller the core expects: it clamps the requested
length, turns generation errors into user-facing text, persists preferences
on every change and refreshes the strength score whenever the password
changes (generated or typed).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Callable, List, Optional

from .constants import (
    DEFAULT_EXCLUDE_DUPLICATES,
    DEFAULT_EXCLUDE_SIMILAR,
    DEFAULT_LENGTH,
    DEFAULT_USE_DIGITS,
    DEFAULT_USE_LOWERCASE,
    DEFAULT_USE_SYMBOLS,
    DEFAULT_USE_UPPERCASE,
)
from .generator import PasswordGenerator
from .models import GenerationConfig, GenerationError, StrengthTier
from .settings import GeneratorPreferences, PreferencesStore, clamp_length
from .strength import estimate_score

logger = logging.getLogger(__name__)

ERROR_MESSAGES = {
    GenerationError.NO_CHARSETS: "Select at least one character set.",
    GenerationError.NOT_ENOUGH_UNIQUE_CHARS: (
        "Not enough unique characters for this length. "
        "Reduce the length or allow repeated characters."
    ),
}


def error_message(reason: GenerationError) -> str:
    return ERROR_MESSAGES[reason]


@dataclass(frozen=True)
class GeneratorState:
    password: str = ""
    length: int = DEFAULT_LENGTH
    use_lowercase: bool = DEFAULT_USE_LOWERCASE
    use_uppercase: bool = DEFAULT_USE_UPPERCASE
    use_digits: bool = DEFAULT_USE_DIGITS
    use_symbols: bool = DEFAULT_USE_SYMBOLS
    exclude_duplicates: bool = DEFAULT_EXCLUDE_DUPLICATES
    exclude_similar: bool = DEFAULT_EXCLUDE_SIMILAR
    strength_score: int = 0

    @property
    def strength(self) -> StrengthTier:
        return StrengthTier.from_score(self.strength_score)

    @classmethod
    def from_preferences(cls, preferences: GeneratorPreferences) -> "GeneratorState":
        return cls(
            length=preferences.length,
            use_lowercase=preferences.use_lowercase,
            use_uppercase=preferences.use_uppercase,
            use_digits=preferences.use_digits,
            use_symbols=preferences.use_symbols,
            exclude_duplicates=preferences.exclude_duplicates,
            exclude_similar=preferences.exclude_similar,
        )

    def to_preferences(self) -> GeneratorPreferences:
        return GeneratorPreferences(
            length=self.length,
            use_lowercase=self.use_lowercase,
            use_uppercase=self.use_uppercase,
            use_digits=self.use_digits,
            use_symbols=self.use_symbols,
            exclude_duplicates=self.exclude_duplicates,
            exclude_similar=self.exclude_similar,
        )

    def to_generation_config(self) -> GenerationConfig:
        return GenerationConfig(
            length=self.length,
            use_lowercase=self.use_lowercase,
            use_uppercase=self.use_uppercase,
            use_digits=self.use_digits,
            use_symbols=self.use_symbols,
            exclude_similar=self.exclude_similar,
            exclude_duplicates=self.exclude_duplicates,
        )


StateListener = Callable[[GeneratorState], None]
ErrorListener = Callable[[GenerationError, str], None]


class GeneratorViewModel:
    def __init__(self, store: PreferencesStore, generator: Optional[PasswordGenerator] = None) -> None:
        self._store = store
        self._generator = generator if generator is not None else PasswordGenerator()
        self._state_listeners: List[StateListener] = []
        self._error_listeners: List[ErrorListener] = []

        self._state = self._with_strength(GeneratorState.from_preferences(store.load()))
        self.generate()

    @property
    def state(self) -> GeneratorState:
        return self._state

    # ---------- LISTENERS ----------

    def add_state_listener(self, listener: StateListener) -> None:
        self._state_listeners.append(listener)

    def add_error_listener(self, listener: ErrorListener) -> None:
        self._error_listeners.append(listener)

    # ---------- INPUTS ----------

    def set_password(self, password: str) -> None:
        self._update(password=password, persist=False)

    def set_length(self, length: int) -> None:
        self._update(length=clamp_length(length))

    def set_lowercase(self, enabled: bool) -> None:
        self._update(use_lowercase=bool(enabled))

    def set_uppercase(self, enabled: bool) -> None:
        self._update(use_uppercase=bool(enabled))

    def set_digits(self, enabled: bool) -> None:
        self._update(use_digits=bool(enabled))

    def set_symbols(self, enabled: bool) -> None:
        self._update(use_symbols=bool(enabled))

    def set_exclude_duplicates(self, enabled: bool) -> None:
        self._update(exclude_duplicates=bool(enabled))

    def set_exclude_similar(self, enabled: bool) -> None:
        self._update(exclude_similar=bool(enabled))

    # ---------- ACTIONS ----------

    def generate(self) -> Optional[str]:
        """
        Generate a new password from the current policy.

        Returns None on success, or the user-facing error message. On error
        the current password is left as it is.
        """
        result = self._generator.generate(self._state.to_generation_config())
        if not result.ok:
            message = error_message(result.reason)
            logger.debug("Generation failed: %s", result.reason.name)
            for listener in self._error_listeners:
                listener(result.reason, message)
            return message

        self._update(password=result.password, persist=False)
        return None

    # ---------- INTERNALS ----------

    def _with_strength(self, state: GeneratorState) -> GeneratorState:
        return replace(state, strength_score=estimate_score(state.password))

    def _update(self, persist: bool = True, **changes) -> None:
        new_state = self._with_strength(replace(self._state, **changes))
        self._state = new_state

        if persist:
            self._store.save(new_state.to_preferences())

        for listener in self._state_listeners:
            listener(new_state)
