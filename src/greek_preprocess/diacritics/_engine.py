"""
Unicode engines for diacritic stripping.

An engine supplies the three primitives the stripper needs:

- canonical decomposition (NFD)
- nonspacing-mark detection (general category Mn)
- canonical composition (NFC)

The default engine wraps the standard library's ``unicodedata`` module.
Other engines can be registered by name and built with create_engine().
Registration belongs in application setup, before any engine is built;
the registry is not meant to change while stripping is under way.
"""

from __future__ import annotations

import logging
from typing import Callable, Protocol

__all__ = [
    "Normalizer",
    "UnicodedataNormalizer",
    "UnicodeEngineUnavailable",
    "available_engines",
    "create_engine",
    "register_engine",
]

logger = logging.getLogger(__name__)

DEFAULT_ENGINE = "unicodedata"

# ἄ: alpha + smooth breathing + acute
_PROBE_COMPOSED = "\u1f04"
_PROBE_DECOMPOSED = "\u03b1\u0313\u0301"


class UnicodeEngineUnavailable(RuntimeError):
    """Raised when a Unicode engine cannot be initialized."""

    def __init__(self, engine: str, reason: str) -> None:
        self.engine = engine
        self.reason = reason
        super().__init__(
            f"Unicode engine {engine!r} is unavailable ({reason}). "
            "Diacritic stripping needs Unicode normalization and character "
            "category data; install a Python build with the full unicodedata "
            "module or register a working engine."
        )


class Normalizer(Protocol):
    """Capability interface required by DiacriticStripper."""

    name: str

    def decompose(self, text: str) -> str: ...

    def is_nonspacing_mark(self, ch: str) -> bool: ...

    def compose(self, text: str) -> str: ...


class UnicodedataNormalizer:
    """
    Engine backed by the standard library ``unicodedata`` module.

    The module is imported and probed on construction, so a broken
    environment fails here rather than on the first call.
    """

    name = "unicodedata"

    def __init__(self) -> None:
        try:
            import unicodedata
        except ImportError as exc:
            raise UnicodeEngineUnavailable(self.name, str(exc)) from exc

        self._ud = unicodedata
        self.unidata_version: str = getattr(unicodedata, "unidata_version", "")
        self._probe()

    def _probe(self) -> None:
        decomposed = self.decompose(_PROBE_COMPOSED)
        ok = (
            decomposed == _PROBE_DECOMPOSED
            and not self.is_nonspacing_mark(decomposed[0])
            and all(self.is_nonspacing_mark(c) for c in decomposed[1:])
            and self.compose(decomposed) == _PROBE_COMPOSED
        )
        if not ok:
            logger.error(
                "unicodedata probe failed (unidata_version=%r, got %r)",
                self.unidata_version,
                decomposed,
            )
            raise UnicodeEngineUnavailable(
                self.name, "Greek polytonic decomposition probe failed"
            )

    def decompose(self, text: str) -> str:
        return self._ud.normalize("NFD", text)

    def is_nonspacing_mark(self, ch: str) -> bool:
        return self._ud.category(ch) == "Mn"

    def compose(self, text: str) -> str:
        return self._ud.normalize("NFC", text)

    def __repr__(self) -> str:
        return f"UnicodedataNormalizer(unidata_version={self.unidata_version!r})"


_ENGINES: dict[str, Callable[[], Normalizer]] = {
    DEFAULT_ENGINE: UnicodedataNormalizer,
}


def register_engine(name: str, factory: Callable[[], Normalizer]) -> None:
    """
    Register a zero-argument factory that builds a Normalizer.

    Call this during setup only. Strippers already built keep the engine
    they were given; registering later does not affect them.

    Args:
        name: Engine name used with create_engine()
        factory: Callable returning a new engine instance

    Raises:
        ValueError: If the name is already registered
    """
    if name in _ENGINES:
        raise ValueError(f"Engine {name!r} is already registered.")
    _ENGINES[name] = factory
    logger.debug("Registered Unicode engine %r", name)


def available_engines() -> list[str]:
    """Return the sorted names of all registered engines."""
    return sorted(_ENGINES)


def create_engine(name: str = DEFAULT_ENGINE) -> Normalizer:
    """
    Build a fresh engine by name.

    Args:
        name: A registered engine name

    Returns:
        A ready-to-use Normalizer

    Raises:
        ValueError: If no engine is registered under ``name``
        UnicodeEngineUnavailable: If the engine cannot be initialized
    """
    try:
        factory = _ENGINES[name]
    except KeyError:
        raise ValueError(
            f"Unknown engine: {name}. Available: {', '.join(available_engines())}"
        ) from None
    engine = factory()
    logger.debug("Created Unicode engine %r", engine)
    return engine
