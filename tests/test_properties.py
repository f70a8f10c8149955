"""
Invariants of diacritic stripping over a mixed sample corpus.
"""

import unicodedata
from collections import Counter
from concurrent.futures import ThreadPoolExecutor

import pytest

from greek_preprocess import strip_diacritics
from greek_preprocess.diacritics import DiacriticStripper, _strip


class TestInvariants:
    def test_idempotent(self, polytonic_samples):
        for text in polytonic_samples:
            once = strip_diacritics(text)
            assert strip_diacritics(once) == once, text

    def test_deterministic(self, polytonic_samples):
        for text in polytonic_samples:
            assert strip_diacritics(text) == strip_diacritics(text)

    def test_no_new_code_points(self, polytonic_samples):
        for text in polytonic_samples:
            source = Counter(unicodedata.normalize("NFD", text))
            result = Counter(unicodedata.normalize("NFD", strip_diacritics(text)))
            assert not result - source, text

    def test_length_never_grows(self, polytonic_samples):
        for text in polytonic_samples:
            nfd = unicodedata.normalize("NFD", text)
            assert len(strip_diacritics(text)) <= len(nfd)

    def test_no_nonspacing_marks_remain(self, polytonic_samples):
        for text in polytonic_samples:
            nfd = unicodedata.normalize("NFD", strip_diacritics(text))
            assert all(unicodedata.category(c) != "Mn" for c in nfd), text

    def test_output_is_nfc(self, polytonic_samples):
        for text in polytonic_samples:
            assert unicodedata.is_normalized("NFC", strip_diacritics(text))

    @pytest.mark.parametrize("text", [
        "hello",
        "123 + 456 = 579",
        "λογος και ΛΟΓΟΣ",
        "Arma virumque cano",
        "tab\tand\nnewline",
    ])
    def test_unmarked_passthrough(self, text):
        assert strip_diacritics(text) == text

    def test_nfc_and_nfd_inputs_agree(self, polytonic_samples):
        for text in polytonic_samples:
            nfc = unicodedata.normalize("NFC", text)
            nfd = unicodedata.normalize("NFD", text)
            assert strip_diacritics(nfc) == strip_diacritics(nfd)


class TestThreadSharing:
    def test_module_helper_across_threads(self):
        texts = ["Ἑλλάς, ᾠδὴ, ᾄδω"] * 2000
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(strip_diacritics, texts))
        assert results == ["Ελλας, ωδη, αδω"] * 2000

    def test_shared_stripper_across_threads(self, stripper, polytonic_samples):
        expected = [stripper.strip(t) for t in polytonic_samples]
        texts = polytonic_samples * 200
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(stripper.strip, texts))
        assert results == expected * 200

    def test_default_built_once_under_contention(self, monkeypatch):
        monkeypatch.setattr(_strip, "_default_stripper", None)
        built = []
        original_init = DiacriticStripper.__init__

        def counting_init(self, *args, **kwargs):
            built.append(self)
            original_init(self, *args, **kwargs)

        monkeypatch.setattr(DiacriticStripper, "__init__", counting_init)
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(strip_diacritics, ["ᾳ"] * 500))
        assert results == ["α"] * 500
        assert len(built) == 1
