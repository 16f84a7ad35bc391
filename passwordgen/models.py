# -*- coding: utf-8 -*-
"""
Value types shared by the generator and the strength estimator.

Everything here is immutable. A CharPool or a result lives for a single call;
nothing is cached between calls.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Tuple, Union

from .constants import DIGIT_CHARS, LOWERCASE_CHARS, SYMBOL_CHARS, UPPERCASE_CHARS


class CharacterCategory(enum.Enum):
    """The four character classes, declared in pool order."""

    LOWERCASE = LOWERCASE_CHARS
    UPPERCASE = UPPERCASE_CHARS
    DIGIT = DIGIT_CHARS
    SYMBOL = SYMBOL_CHARS

    @property
    def alphabet(self) -> str:
        return self.value


@dataclass(frozen=True)
class GenerationConfig:
    """
    Generation policy.

    The length is not clamped here: callers keep it within
    [MIN_LENGTH, MAX_LENGTH], and the generator copes with anything else.
    """

    length: int
    use_lowercase: bool = True
    use_uppercase: bool = True
    use_digits: bool = True
    use_symbols: bool = True
    exclude_similar: bool = False
    exclude_duplicates: bool = False

    def selected_categories(self) -> Tuple[CharacterCategory, ...]:
        flags = (
            (CharacterCategory.LOWERCASE, self.use_lowercase),
            (CharacterCategory.UPPERCASE, self.use_uppercase),
            (CharacterCategory.DIGIT, self.use_digits),
            (CharacterCategory.SYMBOL, self.use_symbols),
        )
        return tuple(category for category, selected in flags if selected)


@dataclass(frozen=True)
class CharPool:
    groups: Tuple[str, ...]
    all_chars: str

    @property
    def distinct_count(self) -> int:
        return len(set(self.all_chars))

    @property
    def is_empty(self) -> bool:
        return not self.groups or not self.all_chars


class GenerationError(enum.Enum):
    NO_CHARSETS = "no_charsets"
    NOT_ENOUGH_UNIQUE_CHARS = "not_enough_unique_chars"


@dataclass(frozen=True)
class Success:
    password: str

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Error:
    reason: GenerationError

    @property
    def ok(self) -> bool:
        return False


GenerationResult = Union[Success, Error]


class StrengthTier(enum.Enum):
    VERY_WEAK = "Very weak"
    WEAK = "Weak"
    MEDIUM = "Medium"
    STRONG = "Strong"
    VERY_STRONG = "Very strong"

    @property
    def label(self) -> str:
        return self.value

    @classmethod
    def from_score(cls, score: int) -> "StrengthTier":
        """Human-friendly tier for a 0-100 score."""
        if score < 20:
            return cls.VERY_WEAK
        if score < 40:
            return cls.WEAK
        if score < 60:
            return cls.MEDIUM
        if score < 80:
            return cls.STRONG
        return cls.VERY_STRONG
