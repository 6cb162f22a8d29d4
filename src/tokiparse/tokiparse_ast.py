"""
Defines the phrase tree produced by the tokiparse parser.

Classes:
    Group: Noun phrase. A head word, flat modifiers and an optional nested `pi` group.
    VerbPhrase: Preverbs followed by a verb group.
    Preposition: A preposition word and the group it governs.
    Predicate: Mood, verb phrase, objects and trailing prepositions.
    Context: Either a sentence or a noun phrase placed before `la`.
    Sentence: Optional context, conjoined subjects and chained predicates.

Each node is immutable, owns its children exclusively and can be serialized
with `to_dict()` into plain dictionaries (see the `*Dict` TypedDicts) for JSON
output or inspection.

Example:
    Group(Word.JAN, (Word.PONA,)) is the tree for ``jan pona``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypedDict, Union

from tokiparse.tokiparse_word import Word


class GroupDict(TypedDict):
    kind: str
    word: str
    modifiers: list[str]
    of: GroupDict | None


class VerbPhraseDict(TypedDict):
    kind: str
    preverbs: list[str]
    verb: GroupDict


class PrepositionDict(TypedDict):
    kind: str
    preposition: str
    noun: GroupDict


class PredicateDict(TypedDict):
    kind: str
    imperative: bool
    verb: VerbPhraseDict
    objects: list[GroupDict]
    prepositions: list[PrepositionDict]


class ContextDict(TypedDict):
    """Serialized context. `type` is "sentence" or "noun_phrase"."""

    kind: str
    type: str
    value: Union["SentenceDict", GroupDict]


class SentenceDict(TypedDict):
    kind: str
    context: ContextDict | None
    subjects: list[GroupDict]
    predicates: list[PredicateDict]


@dataclass(frozen=True)
class Group:
    """A noun phrase.

    Attributes:
        word (Word): The head. Never a particle.
        modifiers (tuple[Word, ...]): Words modifying the head, left to right.
        of (Group | None): The group introduced by `pi`, if any.
    """

    word: Word
    modifiers: tuple[Word, ...] = ()
    of: Group | None = None

    @classmethod
    def from_word(cls, word: Word) -> Group:
        return cls(word)

    def to_dict(self) -> GroupDict:
        return {
            "kind": "group",
            "word": str(self.word),
            "modifiers": [str(m) for m in self.modifiers],
            "of": self.of.to_dict() if self.of is not None else None,
        }


@dataclass(frozen=True)
class VerbPhrase:
    preverbs: tuple[Word, ...]
    verb: Group

    def to_dict(self) -> VerbPhraseDict:
        return {
            "kind": "verb_phrase",
            "preverbs": [str(p) for p in self.preverbs],
            "verb": self.verb.to_dict(),
        }


@dataclass(frozen=True)
class Preposition:
    preposition: Word
    noun: Group

    def to_dict(self) -> PrepositionDict:
        return {
            "kind": "preposition",
            "preposition": str(self.preposition),
            "noun": self.noun.to_dict(),
        }


@dataclass(frozen=True)
class Predicate:
    """A single `li`/`o` clause.

    Attributes:
        imperative (bool): True when introduced by `o`.
        verb (VerbPhrase): The verb phrase.
        objects (tuple[Group, ...]): Direct objects, each introduced by `e`.
        prepositions (tuple[Preposition, ...]): Trailing prepositional phrases
            in their original left-to-right order.
    """

    imperative: bool
    verb: VerbPhrase
    objects: tuple[Group, ...] = ()
    prepositions: tuple[Preposition, ...] = ()

    def to_dict(self) -> PredicateDict:
        return {
            "kind": "predicate",
            "imperative": self.imperative,
            "verb": self.verb.to_dict(),
            "objects": [o.to_dict() for o in self.objects],
            "prepositions": [p.to_dict() for p in self.prepositions],
        }


@dataclass(frozen=True)
class Context:
    """The fragment before `la`: exactly one of `sentence` or `noun_phrase`."""

    sentence: Sentence | None = None
    noun_phrase: Group | None = None

    def __post_init__(self) -> None:
        if (self.sentence is None) == (self.noun_phrase is None):
            raise ValueError("Context must hold exactly one of sentence or noun_phrase")

    @property
    def kind(self) -> str:
        return "sentence" if self.sentence is not None else "noun_phrase"

    def to_dict(self) -> ContextDict:
        value: SentenceDict | GroupDict
        if self.sentence is not None:
            value = self.sentence.to_dict()
        else:
            assert self.noun_phrase is not None  # for mypy
            value = self.noun_phrase.to_dict()
        return {"kind": "context", "type": self.kind, "value": value}


@dataclass(frozen=True)
class Sentence:
    """A parsed sentence.

    Attributes:
        context (Context | None): The fragment before the last `la`.
        subjects (tuple[Group, ...]): Subjects joined by `en`.
        predicates (tuple[Predicate, ...]): Predicates sharing the subjects.
    """

    context: Context | None
    subjects: tuple[Group, ...]
    predicates: tuple[Predicate, ...] = ()

    def to_dict(self) -> SentenceDict:
        return {
            "kind": "sentence",
            "context": self.context.to_dict() if self.context is not None else None,
            "subjects": [s.to_dict() for s in self.subjects],
            "predicates": [p.to_dict() for p in self.predicates],
        }


__all__ = [
    "Context",
    "ContextDict",
    "Group",
    "GroupDict",
    "Predicate",
    "PredicateDict",
    "Preposition",
    "PrepositionDict",
    "Sentence",
    "SentenceDict",
    "VerbPhrase",
    "VerbPhraseDict",
]
