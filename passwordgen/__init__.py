"""Secure password generation and heuristic strength scoring."""

from .generator import PasswordGenerator, build_char_pool, generate
from .models import (
    CharacterCategory,
    CharPool,
    Error,
    GenerationConfig,
    GenerationError,
    GenerationResult,
    StrengthTier,
    Success,
)
from .random_source import RandomSource, SecureRandomSource
from .strength import estimate_score, estimate_strength

__all__ = [
    "CharPool",
    "CharacterCategory",
    "Error",
    "GenerationConfig",
    "GenerationError",
    "GenerationResult",
    "PasswordGenerator",
    "RandomSource",
    "SecureRandomSource",
    "StrengthTier",
    "Success",
    "build_char_pool",
    "estimate_score",
    "estimate_strength",
    "generate",
]

__version__ = "1.0.0"
