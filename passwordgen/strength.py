# -*- coding: utf-8 -*-
"""
Heuristic password strength score (0-100).

The score is an entropy estimate normalised against a 20-character password
over the full 95-character printable alphabet, minus fixed penalties for
short, all-digit, sequential and repetitive passwords. It is deterministic and
makes no use of dictionaries.
"""

from __future__ import annotations

import math

from .constants import (
    DIGIT_SPACE,
    FULL_CHARSPACE,
    LOWERCASE_SPACE,
    MAX_SCORE,
    REF_LENGTH_FOR_MAX_SCORE,
    SYMBOL_SPACE,
    UPPERCASE_SPACE,
)
from .models import StrengthTier

SHORT_LENGTH = 6
MEDIUM_LENGTH = 8
SHORT_LENGTH_PENALTY = 35
MEDIUM_LENGTH_PENALTY = 25

DIGITS_ONLY_MAX_LENGTH = 10
DIGITS_ONLY_PENALTY = 15

SEQUENTIAL_MIN_LENGTH = 3
SEQUENTIAL_PENALTY = 20

REPEAT_MIN_LENGTH = 4
REPEAT_RATIO = 0.5
REPEAT_PENALTY = 10

SINGLE_CHAR_MIN_LENGTH = 3
SINGLE_CHAR_PENALTY = 10


def _is_symbol(c: str) -> bool:
    return not (c.isalpha() or c.isdigit())


def char_space(password: str) -> int:
    """Size of the alphabet the password appears to be drawn from (never 0)."""
    space = 0
    if any(c.islower() for c in password):
        space += LOWERCASE_SPACE
    if any(c.isupper() for c in password):
        space += UPPERCASE_SPACE
    if any(c.isdigit() for c in password):
        space += DIGIT_SPACE
    if any(_is_symbol(c) for c in password):
        space += SYMBOL_SPACE
    # Letters without case (e.g. CJK) fall in no bucket.
    return space or 1


def entropy_bits(length: int, alphabet_size: int) -> float:
    """Return Shannon entropy (bits) for a uniformly random password from an alphabet."""
    if length <= 0 or alphabet_size <= 1:
        return 0.0
    return float(length) * math.log2(float(alphabet_size))


def entropy_score(password: str) -> int:
    bits = entropy_bits(len(password), char_space(password))
    max_bits = REF_LENGTH_FOR_MAX_SCORE * math.log2(FULL_CHARSPACE)
    return int(bits * 100.0 / max_bits)


def is_sequential(password: str) -> bool:
    """True if the whole string is a +1 or -1 code point run, e.g. "abcd" or "4321"."""
    if len(password) < SEQUENTIAL_MIN_LENGTH:
        return False

    ascending = True
    descending = True
    for prev, cur in zip(password, password[1:]):
        diff = ord(cur) - ord(prev)
        if diff != 1:
            ascending = False
        if diff != -1:
            descending = False
        if not ascending and not descending:
            return False

    return ascending or descending


def has_many_repeats(password: str) -> bool:
    if len(password) < REPEAT_MIN_LENGTH:
        return False
    return len(set(password)) / len(password) < REPEAT_RATIO


def is_single_char(password: str) -> bool:
    return len(password) >= SINGLE_CHAR_MIN_LENGTH and len(set(password)) == 1


def password_penalty(password: str) -> int:
    """Sum of all pattern penalties, as a non-positive number."""
    length = len(password)
    adjustment = 0

    # Mutually exclusive tiers: only the harsher one applies below 6.
    if length < SHORT_LENGTH:
        adjustment -= SHORT_LENGTH_PENALTY
    elif length < MEDIUM_LENGTH:
        adjustment -= MEDIUM_LENGTH_PENALTY

    has_lower = any(c.islower() for c in password)
    has_upper = any(c.isupper() for c in password)
    has_digit = any(c.isdigit() for c in password)
    has_symbol = any(_is_symbol(c) for c in password)
    if length < DIGITS_ONLY_MAX_LENGTH and has_digit and not (has_lower or has_upper or has_symbol):
        adjustment -= DIGITS_ONLY_PENALTY

    if is_sequential(password):
        adjustment -= SEQUENTIAL_PENALTY
    if has_many_repeats(password):
        adjustment -= REPEAT_PENALTY
    if is_single_char(password):
        adjustment -= SINGLE_CHAR_PENALTY

    return adjustment


def estimate_score(password: str) -> int:
    """Score ``password`` from 0 (trivial) to 100."""
    if not password:
        return 0
    score = entropy_score(password) + password_penalty(password)
    return max(0, min(MAX_SCORE, score))


def estimate_strength(password: str) -> StrengthTier:
    return StrengthTier.from_score(estimate_score(password))
