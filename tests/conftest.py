"""Shared fixtures: a scripted random source and an in-memory settings backend."""

from __future__ import annotations

import pytest

from passwordgen.generator import PasswordGenerator


class ScriptedRandom:
    """
    Deterministic stand-in for SecureRandomSource.

    randbelow() returns queued values (reduced modulo the bound), then 0.
    shuffle() leaves the order alone unless ``reverse`` is set.
    """

    def __init__(self, values=(), reverse=False):
        self.values = list(values)
        self.reverse = reverse
        self.bounds = []
        self.shuffled = 0

    def randbelow(self, upper):
        self.bounds.append(upper)
        if self.values:
            return self.values.pop(0) % upper
        return 0

    def shuffle(self, items):
        self.shuffled += 1
        if self.reverse:
            items.reverse()


class FakeSettings:
    """Mimics the QSettings value()/setValue() pair."""

    def __init__(self, initial=None):
        self.data = dict(initial or {})
        self.writes = 0

    def value(self, key, default=None, type=None):
        raw = self.data.get(key, default)
        return type(raw) if type is not None else raw

    def setValue(self, key, value):
        self.writes += 1
        self.data[key] = value


@pytest.fixture
def scripted():
    return ScriptedRandom()


@pytest.fixture
def generator(scripted):
    return PasswordGenerator(rng=scripted)


@pytest.fixture
def fake_settings():
    return FakeSettings()
