"""
Renders tokiparse phrase trees as an indented outline.

Each node is printed on its own line, children indented by two spaces:

    sentence
      subject
        group jan
          modifiers: pona
      predicate li
        verb
          group moku
        object
          group pan
"""

from collections.abc import Callable
from typing import Any

from tokiparse.tokiparse_ast import (
    Context,
    Group,
    Predicate,
    Preposition,
    Sentence,
    VerbPhrase,
)


class TreeRenderer:
    """Emits an indented outline of sentences.

    Attributes:
        lines (list[str]): Accumulated output lines.
        indent (int): Current nesting depth.
    """

    def __init__(self) -> None:
        self.lines: list[str] = []
        self.indent = 0

    def indent_str(self) -> str:
        return "  " * self.indent

    def get_output(self) -> str:
        return "\n".join(self.lines)

    def _line(self, text: str) -> None:
        self.lines.append(f"{self.indent_str()}{text}")

    def _nested(self, label: str, emit: Callable[[Any], None], node: Any) -> None:
        self._line(label)
        self.indent += 1
        emit(node)
        self.indent -= 1

    def emit_sentence(self, node: Sentence) -> None:
        self._line("sentence")
        self.indent += 1
        if node.context is not None:
            self.emit_context(node.context)
        for subject in node.subjects:
            self._nested("subject", self.emit_group, subject)
        for predicate in node.predicates:
            self.emit_predicate(predicate)
        self.indent -= 1

    def emit_context(self, node: Context) -> None:
        if node.sentence is not None:
            self._nested("context", self.emit_sentence, node.sentence)
        else:
            self._nested("context", self.emit_group, node.noun_phrase)

    def emit_group(self, node: Group) -> None:
        self._line(f"group {node.word}")
        self.indent += 1
        if node.modifiers:
            self._line("modifiers: " + " ".join(str(m) for m in node.modifiers))
        if node.of is not None:
            self._nested("pi", self.emit_group, node.of)
        self.indent -= 1

    def emit_verb_phrase(self, node: VerbPhrase) -> None:
        self._line("verb")
        self.indent += 1
        for preverb in node.preverbs:
            self._line(f"preverb {preverb}")
        self.emit_group(node.verb)
        self.indent -= 1

    def emit_preposition(self, node: Preposition) -> None:
        self._nested(f"preposition {node.preposition}", self.emit_group, node.noun)

    def emit_predicate(self, node: Predicate) -> None:
        self._line("predicate " + ("o" if node.imperative else "li"))
        self.indent += 1
        self.emit_verb_phrase(node.verb)
        for obj in node.objects:
            self._nested("object", self.emit_group, obj)
        for preposition in node.prepositions:
            self.emit_preposition(preposition)
        self.indent -= 1


__all__ = ["TreeRenderer"]
