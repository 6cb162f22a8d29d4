"""
Provides the `Renderer` class for turning parsed sentences into text.

Classes and Features:
    - Backend (Protocol): Interface for all output backends. Requires `__init__` and `get_output`.
    - CanonicalRenderer: Fully parenthesized form exposing attachment decisions.
    - TreeRenderer: Indented outline, one node per line.
    - JsonRenderer: `Sentence.to_dict()` serialized as JSON.
    - Renderer: Selects a backend by target name and dispatches sentences to
      its `emit_sentence` method.

Usage:
    >>> Renderer("canonical").render([parse_toki_pona("jan pona li moku")])
    '((jan)pona)li(moku)'

Raises:
    ValueError: If the target is not supported.
    TypeError: If anything other than `Sentence` objects is passed in.
"""

from typing import Protocol

from tokiparse.renderers.canonical_renderer import CanonicalRenderer
from tokiparse.renderers.json_renderer import JsonRenderer
from tokiparse.renderers.tree_renderer import TreeRenderer
from tokiparse.tokiparse_ast import Sentence


class Backend(Protocol):  # pragma: no cover
    """Protocol for all tokiparse output backends.

    Methods:
        __init__(): Initializes the backend.
        emit_sentence(node): Appends the rendering of one sentence.
        get_output(): Returns everything emitted so far as a string.
    """

    def __init__(self) -> None: ...  # pragma: no cover

    def emit_sentence(self, node: Sentence) -> None: ...  # pragma: no cover

    def get_output(self) -> str: ...  # pragma: no cover


BackendType = type[Backend]
"""Alias for a concrete Backend class type."""

TARGETS: dict[str, BackendType] = {
    "canonical": CanonicalRenderer,
    "tree": TreeRenderer,
    "json": JsonRenderer,
}


class Renderer:
    """Dispatches sentences to the backend selected by target name.

    Attributes:
        target (str): The normalized target name.
        backend (Backend): The selected backend instance.
    """

    def __init__(self, target: str = "canonical") -> None:
        """Initializes the renderer with the desired output target.

        Args:
            target: "canonical", "tree" or "json", case-insensitive.

        Raises:
            ValueError: If the target is not supported.
        """
        target = target.lower()
        if target not in TARGETS:
            raise ValueError(f"Unknown render target: {target!r}")
        self.target = target
        self.backend: Backend = TARGETS[target]()

    def render(self, sentences: list[Sentence]) -> str:
        """Renders sentences in order and returns the backend output.

        Raises:
            TypeError: If any element is not a `Sentence`.
        """
        if not all(isinstance(s, Sentence) for s in sentences):
            raise TypeError("All items to render must be Sentence instances.")
        for sentence in sentences:
            self.backend.emit_sentence(sentence)
        return self.backend.get_output()


def render_sentence(sentence: Sentence, target: str = "canonical") -> str:
    """Renders one sentence with a fresh backend."""
    return Renderer(target).render([sentence])


__all__ = ["TARGETS", "Backend", "Renderer", "render_sentence"]
