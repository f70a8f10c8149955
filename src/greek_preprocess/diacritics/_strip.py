"""
Diacritic stripping for Greek text.

Decomposes to NFD, drops every nonspacing mark (category Mn), then
recomposes to NFC. The filter is category-based rather than
script-based, so marks on non-Greek letters are removed too.
"""

from __future__ import annotations

import threading
from typing import Iterable, Optional

from greek_preprocess.diacritics._engine import Normalizer, create_engine

__all__ = [
    "DiacriticStripper",
    "base_char",
    "strip_diacritics",
]


class DiacriticStripper:
    """
    Remove tone accents, breathings, iota subscripts and other
    nonspacing marks from text.

    The Unicode engine is injected. When none is given the default
    engine is built here, so a missing Unicode database raises
    UnicodeEngineUnavailable at construction rather than per call.

    Example:
        >>> stripper = DiacriticStripper()
        >>> stripper.strip("Ἑλλάς, ᾠδὴ, ᾄδω")
        'Ελλας, ωδη, αδω'
    """

    def __init__(
        self,
        normalizer: Optional[Normalizer] = None,
        *,
        lowercase: bool = False,
    ) -> None:
        self.normalizer = normalizer if normalizer is not None else create_engine()
        self.lowercase = lowercase

    def strip(self, text: str) -> str:
        """
        Strip all nonspacing marks from text.

        Args:
            text: Text, possibly with polytonic diacritics (NFC, NFD or mixed)

        Returns:
            NFC text with no nonspacing marks
        """
        if not text:
            return ""
        if self.lowercase:
            text = text.lower()
        engine = self.normalizer
        decomposed = engine.decompose(text)
        stripped = "".join(c for c in decomposed if not engine.is_nonspacing_mark(c))
        return engine.compose(stripped)

    __call__ = strip

    def base_char(self, ch: str) -> str:
        """
        Return the base character for a (possibly accented) character.

        Args:
            ch: A single character

        Returns:
            The character with its marks removed; "" for a bare mark

        Raises:
            ValueError: If ch is not exactly one character
        """
        if len(ch) != 1:
            raise ValueError(f"Expected a single character, got {ch!r}")
        return self.strip(ch)

    def strip_many(self, texts: Iterable[str]) -> list[str]:
        """Strip each text in an iterable."""
        return [self.strip(t) for t in texts]

    def has_diacritics(self, text: str) -> bool:
        """Return True if text contains any nonspacing mark after NFD."""
        engine = self.normalizer
        return any(engine.is_nonspacing_mark(c) for c in engine.decompose(text))

    def __repr__(self) -> str:
        return (
            f"DiacriticStripper(engine={self.normalizer.name!r}, "
            f"lowercase={self.lowercase})"
        )


# Shared instance for the module-level helpers, built on first use and
# read-only afterwards. A failed build is not cached.
_default_lock = threading.Lock()
_default_stripper: Optional[DiacriticStripper] = None


def _get_default_stripper() -> DiacriticStripper:
    global _default_stripper
    if _default_stripper is None:
        with _default_lock:
            if _default_stripper is None:
                _default_stripper = DiacriticStripper()
    return _default_stripper


def strip_diacritics(text: str) -> str:
    """
    Remove all diacritics from Greek text, preserving case.

    The default engine is built on the first call; if it cannot be
    initialized this raises UnicodeEngineUnavailable.

    Args:
        text: Greek text (possibly with polytonic diacritics)

    Returns:
        Text with only base letters

    Example:
        >>> strip_diacritics("ἄνθρωπος")
        'ανθρωπος'
    """
    return _get_default_stripper().strip(text)


def base_char(ch: str) -> str:
    """Return the base character for a (possibly accented) character."""
    return _get_default_stripper().base_char(ch)
