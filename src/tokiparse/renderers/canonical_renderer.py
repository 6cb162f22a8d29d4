"""
Renders tokiparse phrase trees into the canonical parenthesized form.

The canonical form is a debugging aid: it shows every attachment decision the
parser made by wrapping each head together with what modifies it.

Bracket scheme:
    - Group: one `(` per modifier, then `(head)`, then each modifier closing one
      level, e.g. ``jan pona mute`` -> ``(((jan)pona)mute)``. A `pi` group is
      appended as ``pi<group>)`` inside an extra outer `(`.
    - VerbPhrase: every preverb opens a level around everything to its right,
      e.g. ``wile moku`` -> ``(wile(moku))``.
    - Predicate: ``li``/``o``, the verb phrase, ``e<object>`` for each object,
      then the prepositions in original order.
    - Context: a sentence context is wrapped in parentheses and followed by ``la``.
    - Sentence: context, subjects joined by ``en``, predicates concatenated.

The exact character sequence is not a stable format; only the structure is.
"""

from tokiparse.tokiparse_ast import (
    Context,
    Group,
    Predicate,
    Preposition,
    Sentence,
    VerbPhrase,
)


class CanonicalRenderer:
    """Emits the canonical bracketed rendering of sentences.

    Attributes:
        lines (list[str]): One rendered sentence per entry.
    """

    def __init__(self) -> None:
        self.lines: list[str] = []

    def get_output(self) -> str:
        return "\n".join(self.lines)

    def emit_sentence(self, node: Sentence) -> None:
        self.lines.append(self.render_sentence(node))

    def render_sentence(self, node: Sentence) -> str:
        context = ""
        if node.context is not None:
            context = f"{self.render_context(node.context)}la"
        subjects = "en".join(self.render_group(s) for s in node.subjects)
        predicates = "".join(self.render_predicate(p) for p in node.predicates)
        return context + subjects + predicates

    def render_context(self, node: Context) -> str:
        if node.sentence is not None:
            return f"({self.render_sentence(node.sentence)})"
        assert node.noun_phrase is not None  # for mypy
        return self.render_group(node.noun_phrase)

    def render_group(self, node: Group) -> str:
        opening = ("(" if node.of is not None else "") + "(" * len(node.modifiers)
        modifiers = "".join(f"{m})" for m in node.modifiers)
        of = f"pi{self.render_group(node.of)})" if node.of is not None else ""
        return f"{opening}({node.word}){modifiers}{of}"

    def render_verb_phrase(self, node: VerbPhrase) -> str:
        preverbs = "".join(f"({p}" for p in node.preverbs)
        return preverbs + self.render_group(node.verb) + ")" * len(node.preverbs)

    def render_preposition(self, node: Preposition) -> str:
        return f"{node.preposition}{self.render_group(node.noun)}"

    def render_predicate(self, node: Predicate) -> str:
        marker = "o" if node.imperative else "li"
        objects = "".join(f"e{self.render_group(o)}" for o in node.objects)
        prepositions = "".join(self.render_preposition(p) for p in node.prepositions)
        return marker + self.render_verb_phrase(node.verb) + objects + prepositions


def render(sentence: Sentence) -> str:
    """Renders a single sentence in canonical form."""
    return CanonicalRenderer().render_sentence(sentence)


__all__ = ["CanonicalRenderer", "render"]
