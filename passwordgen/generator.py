# -*- coding: utf-8 -*-
"""
Password generation.

Guarantees
- Every character comes from the selected (optionally look-alike filtered) alphabets.
- At least one character from each selected category, whenever the length allows it.
- No repeated characters when duplicate exclusion is on.
- All selections and the final shuffle draw from a cryptographically secure source.

Configuration problems are returned as Error values, never raised.
"""

from __future__ import annotations

import logging
from typing import FrozenSet, List, Optional, Tuple

from .constants import LOOK_ALIKE_CHARS
from .models import CharPool, Error, GenerationConfig, GenerationError, GenerationResult, Success
from .random_source import RandomSource, SecureRandomSource

logger = logging.getLogger(__name__)


# -------------------------
# Character pool
# -------------------------

def filter_look_alikes(chars: str) -> str:
    return "".join(c for c in chars if c not in LOOK_ALIKE_CHARS)


def build_char_pool(config: GenerationConfig) -> CharPool:
    """
    Build the per-category alphabets in fixed order (lower, upper, digit, symbol).

    A category contributes only if it is selected and still non-empty after
    look-alike filtering.
    """
    groups: List[str] = []
    for category in config.selected_categories():
        chars = category.alphabet
        if config.exclude_similar:
            chars = filter_look_alikes(chars)
        if chars:
            groups.append(chars)

    return CharPool(groups=tuple(groups), all_chars="".join(groups))


# -------------------------
# Selection
# -------------------------

def available_chars(chars: str, used: FrozenSet[str], exclude_duplicates: bool) -> str:
    if not exclude_duplicates:
        return chars
    return "".join(c for c in chars if c not in used)


def pick_available(
    chars: str,
    used: FrozenSet[str],
    rng: RandomSource,
    exclude_duplicates: bool,
) -> Tuple[Optional[str], FrozenSet[str]]:
    """
    Pick one character uniformly from the characters of ``chars`` still available.

    Returns (None, used) when duplicate exclusion has exhausted ``chars``.
    """
    candidates = available_chars(chars, used, exclude_duplicates)
    if not candidates:
        return None, used

    c = candidates[rng.randbelow(len(candidates))]
    return c, used | {c}


# -------------------------
# Generator
# -------------------------

class PasswordGenerator:
    """
    Stateless password generator.

    The only thing held between calls is the random source, which defaults to
    the OS CSPRNG and can be replaced for deterministic tests.
    """

    def __init__(self, rng: Optional[RandomSource] = None) -> None:
        self._rng: RandomSource = rng if rng is not None else SecureRandomSource()

    def generate(self, config: GenerationConfig) -> GenerationResult:
        pool = build_char_pool(config)

        if pool.is_empty:
            logger.debug("Rejected config: no usable character sets.")
            return Error(GenerationError.NO_CHARSETS)

        if config.exclude_duplicates and config.length > pool.distinct_count:
            logger.debug(
                "Rejected config: length %d exceeds %d distinct characters.",
                config.length,
                pool.distinct_count,
            )
            return Error(GenerationError.NOT_ENOUGH_UNIQUE_CHARS)

        return Success(self.assemble(config.length, pool, config.exclude_duplicates))

    def assemble(self, length: int, pool: CharPool, exclude_duplicates: bool) -> str:
        """
        Assemble and shuffle a password from an already validated pool.

        Degenerate input (non-positive length, empty pool) yields "".
        """
        if length <= 0 or pool.is_empty:
            logger.debug("Degenerate generation request (length=%d); returning empty password.", length)
            return ""

        chars: List[str] = []
        used: FrozenSet[str] = frozenset()

        # Coverage pass: one character per category while there is room.
        for group in pool.groups:
            if len(chars) >= length:
                break
            c, used = pick_available(group, used, self._rng, exclude_duplicates)
            if c is None:
                continue
            chars.append(c)

        # Fill pass from the whole pool.
        while len(chars) < length:
            c, used = pick_available(pool.all_chars, used, self._rng, exclude_duplicates)
            if c is None:
                c, used = pick_available(pool.all_chars, used, self._rng, False)
            chars.append(c)

        # Shuffle so the coverage characters aren't always at the front.
        self._rng.shuffle(chars)
        return "".join(chars)


_default_generator = PasswordGenerator()


def generate(config: GenerationConfig) -> GenerationResult:
    """Generate a password with the shared secure generator."""
    return _default_generator.generate(config)
