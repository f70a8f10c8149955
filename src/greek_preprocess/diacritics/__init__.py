"""
Diacritics submodule.

Provides diacritic stripping for Greek text over a pluggable Unicode
engine.

Basic usage:
    >>> from greek_preprocess.diacritics import strip_diacritics
    >>> strip_diacritics("ἄνθρωπος")
    'ανθρωπος'

    >>> from greek_preprocess.diacritics import DiacriticStripper, create_engine
    >>> stripper = DiacriticStripper(create_engine("unicodedata"), lowercase=True)
    >>> stripper.strip("Ἀθῆναι")
    'αθηναι'
"""

from greek_preprocess.diacritics._engine import (
    DEFAULT_ENGINE,
    Normalizer,
    UnicodeEngineUnavailable,
    UnicodedataNormalizer,
    available_engines,
    create_engine,
    register_engine,
)
from greek_preprocess.diacritics._strip import (
    DiacriticStripper,
    base_char,
    strip_diacritics,
)

__all__ = [
    "DEFAULT_ENGINE",
    "DiacriticStripper",
    "Normalizer",
    "UnicodeEngineUnavailable",
    "UnicodedataNormalizer",
    "available_engines",
    "base_char",
    "create_engine",
    "register_engine",
    "strip_diacritics",
]
