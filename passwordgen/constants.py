# -*- coding: utf-8 -*-
"""Fixed alphabets, length bounds and scoring reference values."""

from __future__ import annotations

# -------------------------
# Application Constants
# -------------------------

APP_ORG = "PasswordGen"
APP_NAME = "PasswordGenerator"
APP_TITLE = "Password Generator"

MIN_LENGTH = 4
MAX_LENGTH = 64

# -------------------------
# Character sets
# -------------------------

LOWERCASE_CHARS = "abcdefghijklmnopqrstuvwxyz"
UPPERCASE_CHARS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
DIGIT_CHARS = "0123456789"
SYMBOL_CHARS = "!@#$%^&*()-_=+[]{};:,.<>?/|"

# Characters that are easy to confuse when read or typed by a human.
LOOK_ALIKE_CHARS = "iIl1oO0"

# -------------------------
# Strength scoring
# -------------------------

# Size of the full printable alphabet the entropy score is normalised against.
FULL_CHARSPACE = 95
# A uniformly random password of this length over FULL_CHARSPACE scores 100.
REF_LENGTH_FOR_MAX_SCORE = 20

LOWERCASE_SPACE = 26
UPPERCASE_SPACE = 26
DIGIT_SPACE = 10
SYMBOL_SPACE = 33

MAX_SCORE = 100

# -------------------------
# Defaults (caller-owned)
# -------------------------

DEFAULT_LENGTH = 16
DEFAULT_USE_LOWERCASE = True
DEFAULT_USE_UPPERCASE = True
DEFAULT_USE_DIGITS = True
DEFAULT_USE_SYMBOLS = True
DEFAULT_EXCLUDE_DUPLICATES = True
DEFAULT_EXCLUDE_SIMILAR = True
