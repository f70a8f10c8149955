"""Shared fixtures for greek-preprocess tests."""

import pytest

from greek_preprocess.diacritics import (
    DiacriticStripper,
    UnicodedataNormalizer,
    _engine,
)


@pytest.fixture
def engine() -> UnicodedataNormalizer:
    """Return a fresh unicodedata engine."""
    return UnicodedataNormalizer()


@pytest.fixture
def stripper(engine) -> DiacriticStripper:
    """Return a case-preserving stripper over the unicodedata engine."""
    return DiacriticStripper(engine)


@pytest.fixture
def isolated_registry(monkeypatch):
    """Give each test its own copy of the engine registry."""
    registry = dict(_engine._ENGINES)
    monkeypatch.setattr(_engine, "_ENGINES", registry)
    return registry


@pytest.fixture
def polytonic_samples() -> list[str]:
    """Mixed Greek/Latin strings with and without marks, NFC and NFD."""
    return [
        "",
        "hello",
        "λογος",
        "ΛΟΓΟΣ",
        "ἐν ἀρχῇ ἦν ὁ λόγος",
        "Ἑλλάς, ᾠδὴ, ᾄδω",
        "ῥόδον Ῥήτορος",
        "προϊέναι",
        "\u03b1\u0313\u0301\u03bd\u03b8\u03c1\u03c9\u03c0\u03bf\u03c2",  # NFD
        "café naïve",
        "한국어",
        "ᾼ ῼ ῌ",
    ]
