"""
Tokenizer for toki pona input lines.

Splits a raw line into whitespace-separated chunks, trims punctuation from the
edges of every chunk and classifies what is left.

Classes:
    Token: A classified chunk with its original text and position.
    Lexer: Produces `Token` objects from a single input line.

Functions:
    tokenize(line, aliases=None) -> list[Word]:
        Convenience wrapper returning only the classified words.

Features:
    - Leading/trailing characters that are not ASCII letters are discarded,
      so `...mi,` and `-pan` classify as `mi` and `pan`.
    - Punctuation never splits a chunk: `mi,pan` stays one (unrecognized) token.
    - Whitespace-only input yields no tokens.

Raises:
    UnrecognizedWord: On the first chunk that is not a vocabulary word.

Example:
    >>> tokenize("mi moku, kin!")
    [<Word.MI: 'mi'>, <Word.MOKU: 'moku'>, <Word.KIN: 'kin'>]
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator
from typing import TYPE_CHECKING, Any

from tokiparse.tokiparse_errors import UnrecognizedWord
from tokiparse.tokiparse_word import Word, classify

if TYPE_CHECKING:
    from tokiparse.tokiparse_aliases import AliasMapper

logger = logging.getLogger(__name__)

_EDGE_PUNCTUATION = re.compile(r"^[^A-Za-z]+|[^A-Za-z]+$")


def strip_chunk(chunk: str) -> str:
    """Removes every non-ASCII-letter character from both ends of a chunk."""
    return _EDGE_PUNCTUATION.sub("", chunk)


class Token:
    """A single classified word of an input line.

    Attributes:
        word (Word): The vocabulary entry the chunk resolved to.
        text (str): The chunk after punctuation stripping.
        raw (str): The chunk exactly as it appeared in the input.
        position (int): 0-based index of the chunk in the line.
    """

    def __init__(self, word: Word, text: str, raw: str = "", position: int = 0):
        self.word = word
        self.text = text
        self.raw = raw or text
        self.position = position

    def __repr__(self) -> str:
        return f"Token({self.word}, {self.raw!r})"

    def __eq__(self, other: Any) -> bool:
        return (
            isinstance(other, Token)
            and self.word == other.word
            and self.text == other.text
            and self.raw == other.raw
            and self.position == other.position
        )

    def __hash__(self) -> int:
        return hash((self.word, self.text, self.raw, self.position))


class Lexer:
    """Converts one input line into a stream of `Token` objects.

    Attributes:
        line (str): The raw input line.
        aliases (AliasMapper | None): Spelling aliases consulted during classification.
    """

    def __init__(self, line: str, aliases: AliasMapper | None = None) -> None:
        self.line = line
        self.aliases = aliases

    def tokens(self) -> Iterator[Token]:
        """Yields tokens left to right.

        Raises:
            UnrecognizedWord: When a chunk is not a vocabulary word. Chunks that
                strip down to nothing are reported with their original text.
        """
        for position, raw in enumerate(self.line.split()):
            text = strip_chunk(raw)
            if not text:
                raise UnrecognizedWord(raw)
            yield Token(classify(text, self.aliases), text, raw, position)


def tokenize(line: str, aliases: AliasMapper | None = None) -> list[Word]:
    """Splits, strips and classifies a line, returning its words in order."""
    words = [tok.word for tok in Lexer(line, aliases).tokens()]
    logger.debug("tokenized %r -> %s", line, " ".join(str(w) for w in words))
    return words


__all__ = ["Lexer", "Token", "strip_chunk", "tokenize"]
