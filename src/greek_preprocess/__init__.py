"""
greek-preprocess: Greek text preprocessing.

Strips tone accents, breathings and iota subscripts from polytonic
Greek by decomposing, dropping nonspacing marks and recomposing.

Basic usage:
    >>> from greek_preprocess import strip_diacritics
    >>> strip_diacritics("Ἄνθρωπος ἔφυγε ἀπὸ τὸ σπίτι του.")
    'Ανθρωπος εφυγε απο το σπιτι του.'

With an explicit engine:
    >>> from greek_preprocess import DiacriticStripper, create_engine
    >>> stripper = DiacriticStripper(create_engine())
    >>> stripper("ᾳ")
    'α'
"""

from greek_preprocess.diacritics import (
    DiacriticStripper,
    Normalizer,
    UnicodeEngineUnavailable,
    UnicodedataNormalizer,
    available_engines,
    base_char,
    create_engine,
    register_engine,
    strip_diacritics,
)

__version__ = "0.1.0"
__all__ = [
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


# Lazy import for spaCy components (only when spacy is installed)
def __getattr__(name: str):
    if name == "DiacriticStripperComponent":
        try:
            from greek_preprocess.spacy import DiacriticStripperComponent
            return DiacriticStripperComponent
        except ImportError:
            raise ImportError(
                "spaCy integration requires spacy. "
                "Install with: pip install greek-preprocess[spacy]"
            )
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
