"""
spaCy integration for greek-preprocess.

Provides a pipeline component that strips diacritics from documents,
tokens and lemmas.

Example:
    >>> import spacy
    >>> nlp = spacy.blank("grc")
    >>> nlp.add_pipe("greek_diacritic_stripper")
    >>> doc = nlp("ἐν ἀρχῇ ἦν ὁ λόγος")
    >>> doc._.stripped
    'εν αρχη ην ο λογος'
"""

from typing import Optional

from spacy.language import Language
from spacy.tokens import Doc, Token

from greek_preprocess.diacritics._engine import DEFAULT_ENGINE, create_engine
from greek_preprocess.diacritics._strip import DiacriticStripper

__all__ = [
    "DiacriticStripperComponent",
    "create_diacritic_stripper",
    "get_stripper_pipe",
]


@Language.factory(
    "greek_diacritic_stripper",
    default_config={"engine": DEFAULT_ENGINE, "lowercase": False},
    assigns=["doc._.stripped", "token._.stripped", "token._.stripped_lemma"],
)
def create_diacritic_stripper(
    nlp: Language,
    name: str,
    engine: str = DEFAULT_ENGINE,
    lowercase: bool = False,
) -> "DiacriticStripperComponent":
    """Create a diacritic stripper pipeline component."""
    return DiacriticStripperComponent(nlp, name, engine=engine, lowercase=lowercase)


class DiacriticStripperComponent:
    """
    spaCy pipeline component for diacritic stripping.

    The Unicode engine is built once, when the component is created.

    Extensions:
        - Doc._.stripped: Full stripped text.
        - Token._.stripped: Stripped token text.
        - Token._.stripped_lemma: Stripped lemma.

    Note: token.text and token.lemma_ are never modified.
    """

    def __init__(
        self,
        nlp: Language,
        name: str,
        *,
        engine: str = DEFAULT_ENGINE,
        lowercase: bool = False,
    ) -> None:
        self.name = name
        self.engine = engine
        self.lowercase = lowercase
        self._stripper = DiacriticStripper(create_engine(engine), lowercase=lowercase)

        if not Doc.has_extension("stripped"):
            Doc.set_extension("stripped", default=None)
        if not Token.has_extension("stripped"):
            Token.set_extension("stripped", default=None)
        if not Token.has_extension("stripped_lemma"):
            Token.set_extension("stripped_lemma", default=None)

    def __call__(self, doc: Doc) -> Doc:
        doc._.stripped = self._stripper.strip(doc.text)

        for token in doc:
            token._.stripped = self._stripper.strip(token.text)
            token._.stripped_lemma = self._stripper.strip(token.lemma_)

        return doc

    def to_disk(self, path: str, *, exclude: tuple[str, ...] = ()) -> None:
        pass

    def from_disk(
        self, path: str, *, exclude: tuple[str, ...] = ()
    ) -> "DiacriticStripperComponent":
        return self

    def to_bytes(self, *, exclude: tuple[str, ...] = ()) -> bytes:
        return b""

    def from_bytes(
        self, data: bytes, *, exclude: tuple[str, ...] = ()
    ) -> "DiacriticStripperComponent":
        return self


def get_stripper_pipe(nlp: Language) -> Optional[DiacriticStripperComponent]:
    """Get the diacritic stripper component from a pipeline."""
    if "greek_diacritic_stripper" in nlp.pipe_names:
        return nlp.get_pipe("greek_diacritic_stripper")
    return None
