"""
Error taxonomy for the tokiparse toolchain.

Every failure is terminal for the line being parsed and propagates unchanged
from the routine that detected it up to the caller of `parse_toki_pona`.

Classes:
    ParseError: Base class for all lexical and grammatical errors.
    UnrecognizedWord: A token is not part of the closed vocabulary.
    EmptyNounPhrase, EmptyContext, EmptySubject, EmptyPredicate,
    EmptyVerbPhrase, EmptyPreposition: A grammar rule received a zero-length span.
    InvalidSubject: No predicate marker and no usable subject.
    InvalidNoun: A noun phrase would be headed or modified by a particle.
    InvalidPreposition: A preposition phrase is not headed by a preposition.

The string form of an error mirrors its kind, e.g. ``EmptyContext`` or
``InvalidNoun(li)``, so the REPL can print it directly.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tokiparse.tokiparse_word import Word


class ParseError(Exception):
    """Base class for every error raised while tokenizing or parsing a line.

    Attributes:
        word (Word | None): The offending word, for errors that carry one.
    """

    def __init__(self, word: Word | None = None) -> None:
        self.word = word
        super().__init__(self.describe())

    @property
    def kind(self) -> str:
        return type(self).__name__

    def describe(self) -> str:
        if self.word is None:
            return self.kind
        return f"{self.kind}({self.word})"

    def __str__(self) -> str:
        return self.describe()


class UnrecognizedWord(ParseError):
    """Raised when a token is not in the vocabulary.

    Attributes:
        text (str): The token text as it appeared in the input.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__()

    def describe(self) -> str:
        return f"{self.kind}({self.text!r})"


class EmptyNounPhrase(ParseError):
    pass


class EmptyContext(ParseError):
    pass


class EmptySubject(ParseError):
    pass


class EmptyPredicate(ParseError):
    pass


class EmptyVerbPhrase(ParseError):
    pass


class EmptyPreposition(ParseError):
    pass


class InvalidSubject(ParseError):
    pass


class InvalidNoun(ParseError):
    pass


class InvalidPreposition(ParseError):
    pass


__all__ = [
    "EmptyContext",
    "EmptyNounPhrase",
    "EmptyPredicate",
    "EmptyPreposition",
    "EmptySubject",
    "EmptyVerbPhrase",
    "InvalidNoun",
    "InvalidPreposition",
    "InvalidSubject",
    "ParseError",
    "UnrecognizedWord",
]
