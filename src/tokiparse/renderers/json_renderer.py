"""
Renders tokiparse phrase trees as JSON, using `Sentence.to_dict()`.
"""

import json

from tokiparse.tokiparse_ast import Sentence


class JsonRenderer:
    """Emits one JSON document per sentence.

    Attributes:
        lines (list[str]): Serialized sentences.
        indent (int | None): Passed to `json.dumps`; None gives one line per sentence.
    """

    def __init__(self, indent: int | None = None) -> None:
        self.lines: list[str] = []
        self.indent = indent

    def get_output(self) -> str:
        return "\n".join(self.lines)

    def emit_sentence(self, node: Sentence) -> None:
        self.lines.append(json.dumps(node.to_dict(), indent=self.indent))


__all__ = ["JsonRenderer"]
