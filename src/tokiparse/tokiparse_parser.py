"""
tokiparse Parser

Recursive-descent parser turning classified toki pona words into a phrase tree.

Each routine receives an immutable slice of words, narrows it, and recurses
into the next grammar level:

    sentence    -> [context la] subjects predicates
    context     -> sentence | group
    subjects    -> group (en group)*
    predicate   -> (li | o) verb_phrase (e group)* preposition*
    verb_phrase -> preverb* group
    preposition -> PREP group
    group       -> head modifier* (pi group)?

Disambiguation Rules
--------------------
- Context: the *last* `la` splits the sentence, so chains such as
  `mi la sina la ona la jan li lon` nest from right to left.
- Subjects: everything before the first predicate marker. A leading `o` gets
  the implicit subject `sina`; `mi` and `sina` may stand without `li`.
- Prepositions: trailing phrases are peeled off from the right, one at a
  time, while the last preposition word has something after it and sits at
  least two words past the last `e` (or at least one word into the predicate
  when there is no `e`). Anything else stays inside the verb or object.
- Possessive: the *first* `pi` of a group starts its nested group; modifiers
  before it stay flat.

Entry Points
------------
- `parse_toki_pona(line)`: tokenize and parse one input line.
- `parse_sentence(words)`: parse already classified words.

Raises
------
ParseError
    One of the subclasses in `tokiparse_errors`, raised by the routine that
    detected the problem and propagated unchanged.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

from tokiparse.tokiparse_ast import (
    Context,
    Group,
    Predicate,
    Preposition,
    Sentence,
    VerbPhrase,
)
from tokiparse.tokiparse_constants import BARE_PRONOUN_SUBJECTS
from tokiparse.tokiparse_errors import (
    EmptyContext,
    EmptyNounPhrase,
    EmptyPredicate,
    EmptyPreposition,
    EmptySubject,
    EmptyVerbPhrase,
    InvalidNoun,
    InvalidPreposition,
    InvalidSubject,
)
from tokiparse.tokiparse_lexer import tokenize
from tokiparse.tokiparse_word import Word

if TYPE_CHECKING:
    from tokiparse.tokiparse_aliases import AliasMapper

logger = logging.getLogger(__name__)

Words = tuple[Word, ...]


def _find(words: Words, test: Callable[[Word], bool]) -> int | None:
    for i, word in enumerate(words):
        if test(word):
            return i
    return None


def _rfind(words: Words, test: Callable[[Word], bool]) -> int | None:
    for i in range(len(words) - 1, -1, -1):
        if test(words[i]):
            return i
    return None


def _split(words: Words, marker: Word) -> list[Words]:
    """Splits on every `marker`, keeping empty pieces (n markers give n + 1 pieces)."""
    pieces: list[Words] = []
    start = 0
    for i, word in enumerate(words):
        if word is marker:
            pieces.append(words[start:i])
            start = i + 1
    pieces.append(words[start:])
    return pieces


def _render_words(words: Words) -> str:
    return " ".join(str(w) for w in words)


def parse_toki_pona(line: str, aliases: AliasMapper | None = None) -> Sentence:
    """Tokenizes and parses a single line of toki pona."""
    return parse_sentence(tokenize(line, aliases))


def parse_sentence(words: Sequence[Word], fragment: bool = False) -> Sentence:
    """Parses a sentence: optional context, subjects and predicates.

    Args:
        words: The classified words of the sentence.
        fragment: True when parsing the part of a sentence before `la`. Such
            fragments may consist of subjects only (`mi la sina la ...`).

    Raises:
        EmptyContext: `la` with nothing before it.
        EmptySubject: Nothing after the context, or a leading `li`.
        InvalidSubject: No predicate marker and the first word is a particle.
        EmptyPredicate: A complete sentence without any predicate.
    """
    words = tuple(words)

    context: Context | None = None
    la_index = _rfind(words, lambda w: w is Word.LA)
    if la_index is not None:
        logger.debug(
            "context split: %r | %r",
            _render_words(words[:la_index]),
            _render_words(words[la_index + 1 :]),
        )
        context = parse_fragment(words[:la_index])
        words = words[la_index + 1 :]

    if not words:
        raise EmptySubject()

    subjects: tuple[Group, ...]
    marker = _find(words, Word.is_predicate_marker)
    if marker == 0:
        if words[0] is not Word.O:
            raise EmptySubject()
        subjects = (Group.from_word(Word.SINA),)
    elif marker is not None:
        pieces = _split(words[:marker], Word.EN)
        subjects = tuple(parse_group(piece) for piece in pieces)
        words = words[marker:]
    elif words[0].value in BARE_PRONOUN_SUBJECTS:
        subjects = (Group.from_word(words[0]),)
        words = words[1:]
    elif words[0].is_particle():
        raise InvalidSubject(words[0])
    else:
        subjects = (parse_group(words),)
        words = ()

    predicates: list[Predicate] = []
    while words:
        following = _find(words[1:], Word.is_predicate_marker)
        end = following + 1 if following is not None else len(words)
        predicates.append(parse_predicate(words[:end]))
        words = words[end:]

    if not predicates and not fragment:
        raise EmptyPredicate()

    return Sentence(context, subjects, tuple(predicates))


def parse_fragment(words: Sequence[Word]) -> Context:
    """Parses the words before `la` as a sentence when they contain a
    predicate marker or another `la`, otherwise as a noun phrase."""
    words = tuple(words)
    if not words:
        raise EmptyContext()
    if any(w.is_predicate_marker() or w is Word.LA for w in words):
        return Context(sentence=parse_sentence(words, fragment=True))
    return Context(noun_phrase=parse_group(words))


def parse_group(words: Sequence[Word]) -> Group:
    """Parses a noun phrase: head, flat modifiers, and an optional `pi` group.

    Raises:
        EmptyNounPhrase: No words, e.g. after a trailing `e` or `pi`.
        InvalidNoun: The head or one of the modifiers is a particle.
    """
    words = tuple(words)
    if not words:
        raise EmptyNounPhrase()

    head, rest = words[0], words[1:]
    if head.is_particle():
        raise InvalidNoun(head)

    pi_index = _find(rest, lambda w: w is Word.PI)
    modifiers = rest if pi_index is None else rest[:pi_index]
    particle = _find(modifiers, Word.is_particle)
    if particle is not None:
        raise InvalidNoun(modifiers[particle])

    if pi_index is None:
        return Group(head, modifiers)
    return Group(head, modifiers, parse_group(rest[pi_index + 1 :]))


def _accepts_preposition(words: Words, index: int) -> bool:
    # The preposition needs a word after it, and must leave the verb (or the
    # last object) intact on its left.
    last_object = _rfind(words, lambda w: w is Word.E)
    boundary = last_object + 2 if last_object is not None else 1
    return boundary <= index <= len(words) - 2


def parse_predicate(words: Sequence[Word]) -> Predicate:
    """Parses one predicate run, starting at its `li`/`o` if present."""
    words = tuple(words)
    if not words:
        raise EmptyPredicate()

    imperative = words[0] is Word.O
    if words[0].is_predicate_marker():
        words = words[1:]

    prepositions: list[Preposition] = []
    while True:
        index = _rfind(words, Word.is_preposition)
        if index is None or not _accepts_preposition(words, index):
            break
        logger.debug("trailing preposition: %r", _render_words(words[index:]))
        prepositions.insert(0, parse_preposition(words[index:]))
        words = words[:index]

    objects: tuple[Group, ...] = ()
    e_index = _find(words, lambda w: w is Word.E)
    if e_index is None:
        verb = parse_verb_phrase(words)
    else:
        verb = parse_verb_phrase(words[:e_index])
        pieces = _split(words[e_index + 1 :], Word.E)
        objects = tuple(parse_group(piece) for piece in pieces)

    return Predicate(imperative, verb, objects, tuple(prepositions))


def parse_verb_phrase(words: Sequence[Word]) -> VerbPhrase:
    """Parses leading preverbs and the verb group. A preverb is only taken as
    such while at least one more word follows it."""
    words = tuple(words)
    if not words:
        raise EmptyVerbPhrase()

    preverbs: list[Word] = []
    while len(words) > 1 and words[0].is_preverb():
        preverbs.append(words[0])
        words = words[1:]
    return VerbPhrase(tuple(preverbs), parse_group(words))


def parse_preposition(words: Sequence[Word]) -> Preposition:
    words = tuple(words)
    if not words:
        raise EmptyPreposition()

    head = words[0]
    if not head.is_preposition():
        raise InvalidPreposition(head)
    return Preposition(head, parse_group(words[1:]))


__all__ = [
    "parse_fragment",
    "parse_group",
    "parse_predicate",
    "parse_preposition",
    "parse_sentence",
    "parse_toki_pona",
    "parse_verb_phrase",
]
