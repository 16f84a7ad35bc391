"""Tests for the password generator."""

from __future__ import annotations

import string

import pytest

from conftest import ScriptedRandom

from passwordgen.constants import DIGIT_CHARS, LOOK_ALIKE_CHARS, LOWERCASE_CHARS, SYMBOL_CHARS, UPPERCASE_CHARS
from passwordgen.generator import PasswordGenerator, build_char_pool, generate, pick_available
from passwordgen.models import CharPool, Error, GenerationConfig, GenerationError, Success
from passwordgen.random_source import SecureRandomSource

ALL_CHARS = LOWERCASE_CHARS + UPPERCASE_CHARS + DIGIT_CHARS + SYMBOL_CHARS


def only(**flags):
    base = dict(use_lowercase=False, use_uppercase=False, use_digits=False, use_symbols=False)
    base.update(flags)
    return base


class TestCharPool:
    def test_fixed_category_order(self):
        pool = build_char_pool(GenerationConfig(length=8, use_uppercase=False))
        assert pool.groups == (LOWERCASE_CHARS, DIGIT_CHARS, SYMBOL_CHARS)
        assert pool.all_chars == LOWERCASE_CHARS + DIGIT_CHARS + SYMBOL_CHARS

    def test_look_alikes_removed_from_every_group(self):
        pool = build_char_pool(GenerationConfig(length=8, exclude_similar=True))
        assert pool.groups[0] == "abcdefghjkmnpqrstuvwxyz"
        assert pool.groups[1] == "ABCDEFGHJKLMNPQRSTUVWXYZ"
        assert pool.groups[2] == "23456789"
        assert pool.groups[3] == SYMBOL_CHARS
        assert not set(pool.all_chars) & set(LOOK_ALIKE_CHARS)

    def test_distinct_count(self):
        assert build_char_pool(GenerationConfig(length=8)).distinct_count == 89
        assert build_char_pool(GenerationConfig(length=8, exclude_similar=True)).distinct_count == 82

    def test_nothing_selected_is_empty(self):
        pool = build_char_pool(GenerationConfig(length=8, **only()))
        assert pool.groups == ()
        assert pool.is_empty


class TestPickAvailable:
    def test_returns_new_used_snapshot(self):
        used = frozenset("a")
        c, new_used = pick_available("abc", used, ScriptedRandom(), exclude_duplicates=True)
        assert c == "b"
        assert new_used == {"a", "b"}
        assert used == {"a"}

    def test_duplicates_allowed_ignores_used(self):
        c, _ = pick_available("abc", frozenset("abc"), ScriptedRandom(), exclude_duplicates=False)
        assert c == "a"

    def test_exhausted(self):
        used = frozenset("ab")
        assert pick_available("ab", used, ScriptedRandom(), exclude_duplicates=True) == (None, used)


class TestGenerateDeterministic:
    def test_coverage_then_fill(self, generator):
        result = generator.generate(GenerationConfig(length=6))
        assert result == Success("aA0!aa")

    def test_coverage_stops_at_length(self, generator, scripted):
        result = generator.generate(GenerationConfig(length=2))
        assert result == Success("aA")
        assert scripted.bounds == [26, 26]

    def test_no_duplicates_draws_from_shrinking_pool(self, generator, scripted):
        result = generator.generate(GenerationConfig(length=3, exclude_duplicates=True, **only(use_lowercase=True)))
        assert result == Success("abc")
        assert scripted.bounds == [26, 25, 24]

    def test_fill_skips_coverage_characters(self, generator):
        config = GenerationConfig(length=3, exclude_similar=True, exclude_duplicates=True,
                                  **only(use_lowercase=True, use_uppercase=True))
        assert generator.generate(config) == Success("aAb")

    def test_result_is_shuffled(self):
        gen = PasswordGenerator(rng=ScriptedRandom(reverse=True))
        result = gen.generate(GenerationConfig(length=5, exclude_duplicates=True, **only(use_lowercase=True)))
        assert result == Success("edcba")

    def test_digits_without_look_alikes(self, generator):
        config = GenerationConfig(length=4, exclude_similar=True, **only(use_digits=True))
        assert generator.generate(config) == Success("2222")

    def test_exhausted_group_is_skipped_during_coverage(self, generator):
        pool = CharPool(groups=("a", "a", "b"), all_chars="aab")
        assert generator.assemble(2, pool, exclude_duplicates=True) == "ab"

    def test_fill_falls_back_to_full_pool(self, generator):
        pool = CharPool(groups=("ab",), all_chars="ab")
        assert generator.assemble(3, pool, exclude_duplicates=True) == "aba"


class TestValidation:
    def test_no_charsets(self, generator):
        assert generator.generate(GenerationConfig(length=10, **only())) == Error(GenerationError.NO_CHARSETS)

    def test_no_charsets_wins_over_degenerate_length(self, generator):
        assert generator.generate(GenerationConfig(length=0, **only())) == Error(GenerationError.NO_CHARSETS)

    def test_not_enough_unique_chars(self, generator):
        config = GenerationConfig(length=27, exclude_duplicates=True, **only(use_lowercase=True))
        assert generator.generate(config) == Error(GenerationError.NOT_ENOUGH_UNIQUE_CHARS)

    def test_not_enough_unique_chars_after_filtering(self, generator):
        ok = GenerationConfig(length=23, exclude_similar=True, exclude_duplicates=True, **only(use_lowercase=True))
        too_long = GenerationConfig(length=24, exclude_similar=True, exclude_duplicates=True,
                                    **only(use_lowercase=True))
        assert generator.generate(ok).ok
        assert generator.generate(too_long) == Error(GenerationError.NOT_ENOUGH_UNIQUE_CHARS)

    def test_repeats_allowed_beyond_distinct_count(self, generator):
        result = generator.generate(GenerationConfig(length=40, **only(use_digits=True)))
        assert result.ok
        assert len(result.password) == 40

    @pytest.mark.parametrize("length", [0, -5])
    def test_degenerate_length_gives_empty_password(self, generator, scripted, length):
        assert generator.generate(GenerationConfig(length=length, exclude_duplicates=True)) == Success("")
        assert scripted.bounds == []


class TestGenerateSecure:
    def test_length_and_alphabet(self):
        for length in (4, 16, 64):
            result = generate(GenerationConfig(length=length))
            assert result.ok
            assert len(result.password) == length
            assert set(result.password) <= set(ALL_CHARS)

    def test_every_category_covered(self):
        gen = PasswordGenerator()
        for _ in range(200):
            pwd = gen.generate(GenerationConfig(length=4, exclude_similar=True)).password
            assert any(c in LOWERCASE_CHARS for c in pwd)
            assert any(c in UPPERCASE_CHARS for c in pwd)
            assert any(c in DIGIT_CHARS for c in pwd)
            assert any(c in SYMBOL_CHARS for c in pwd)
            assert not set(pwd) & set(LOOK_ALIKE_CHARS)

    def test_full_unique_alphabet(self):
        config = GenerationConfig(length=26, exclude_duplicates=True, **only(use_lowercase=True))
        result = generate(config)
        assert "".join(sorted(result.password)) == string.ascii_lowercase

    def test_lowercase_without_repeats(self):
        config = GenerationConfig(length=8, exclude_similar=False, exclude_duplicates=True, **only(use_lowercase=True))
        pwd = generate(config).password
        assert len(pwd) == 8
        assert len(set(pwd)) == 8
        assert set(pwd) <= set(LOWERCASE_CHARS)

    def test_lowercase_without_repeats_or_look_alikes(self):
        config = GenerationConfig(length=5, exclude_similar=True, exclude_duplicates=True, **only(use_lowercase=True))
        for _ in range(50):
            pwd = generate(config).password
            assert len(set(pwd)) == 5
            assert set(pwd) <= set(LOWERCASE_CHARS) - set("ilo")

    def test_all_categories_without_repeats(self):
        result = generate(GenerationConfig(length=64, exclude_similar=True, exclude_duplicates=True))
        assert len(set(result.password)) == 64


class TestSecureRandomSource:
    def test_randbelow_range(self):
        rng = SecureRandomSource()
        assert {rng.randbelow(3) for _ in range(300)} == {0, 1, 2}

    def test_randbelow_rejects_empty_range(self):
        with pytest.raises(ValueError):
            SecureRandomSource().randbelow(0)

    def test_shuffle_is_a_permutation(self):
        items = list("abcdefgh")
        SecureRandomSource().shuffle(items)
        assert sorted(items) == list("abcdefgh")
