import json
from typing import Any

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from tokiparse.renderers.canonical_renderer import CanonicalRenderer, render
from tokiparse.renderers.json_renderer import JsonRenderer
from tokiparse.renderers.tree_renderer import TreeRenderer
from tokiparse.tokiparse_ast import Group, VerbPhrase
from tokiparse.tokiparse_errors import ParseError
from tokiparse.tokiparse_parser import parse_sentence, parse_toki_pona
from tokiparse.tokiparse_render import TARGETS, Backend, Renderer, render_sentence
from tokiparse.tokiparse_word import Word


@pytest.mark.parametrize(  # type: ignore[misc]
    "source,expected",
    [
        ("mi moku", "(mi)li(moku)"),
        ("o moku", "(sina)o(moku)"),
        ("sina o moku", "(sina)o(moku)"),
        ("jan pona li moku", "((jan)pona)li(moku)"),
        ("jan li moku e pan e telo", "(jan)li(moku)e(pan)e(telo)"),
        ("jan en meli li moku", "(jan)en(meli)li(moku)"),
        ("jan li moku e pan li lanpan", "(jan)li(moku)e(pan)li(lanpan)"),
        (
            "ona li moku kepeken uta lon tomo",
            "(ona)li(moku)kepeken(uta)lon(tomo)",
        ),
        ("kule pi mi taso li pona", "((kule)pi((mi)taso))li(pona)"),
        ("mi wile moku", "(mi)li(wile(moku))"),
        ("mi la pan li pona", "(mi)la(pan)li(pona)"),
        (
            "mi la sina la ona la jan li lon",
            "(((mi)la(sina))la(ona))la(jan)li(lon)",
        ),
        (
            "ona li utala e jan pona mi la mi pilin ike",
            "((ona)li(utala)e(((jan)pona)mi))la(mi)li((pilin)ike)",
        ),
    ],
)
def test_canonical_rendering(source: str, expected: str) -> None:
    assert render(parse_toki_pona(source)) == expected


def test_canonical_objects_before_prepositions() -> None:
    rendered = render(parse_toki_pona("mi pana e pan tawa jan"))
    assert rendered == "(mi)li(pana)e(pan)tawa(jan)"


def test_canonical_modifier_chain() -> None:
    renderer = CanonicalRenderer()
    group = Group(Word.JAN, (Word.PONA, Word.MUTE))
    assert renderer.render_group(group) == "(((jan)pona)mute)"


def test_canonical_preverbs_wrap_verb() -> None:
    renderer = CanonicalRenderer()
    verb = VerbPhrase((Word.WILE, Word.KAMA), Group(Word.MOKU))
    assert renderer.render_verb_phrase(verb) == "(wile(kama(moku)))"


def test_canonical_renderer_collects_lines() -> None:
    renderer = CanonicalRenderer()
    renderer.emit_sentence(parse_toki_pona("mi moku"))
    renderer.emit_sentence(parse_toki_pona("o lape"))
    assert renderer.get_output() == "(mi)li(moku)\n(sina)o(lape)"


def test_tree_rendering() -> None:
    renderer = TreeRenderer()
    renderer.emit_sentence(parse_toki_pona("jan pona li moku e pan"))
    assert renderer.get_output() == "\n".join(
        [
            "sentence",
            "  subject",
            "    group jan",
            "      modifiers: pona",
            "  predicate li",
            "    verb",
            "      group moku",
            "    object",
            "      group pan",
        ]
    )


def test_tree_rendering_context_pi_preverb_and_preposition() -> None:
    output = render_sentence(
        parse_toki_pona("mi la jan pi ma ni o kama lon tomo"), "tree"
    )
    lines = output.splitlines()
    assert lines[0] == "sentence"
    assert lines[1:3] == ["  context", "    group mi"]
    assert "      pi" in lines
    assert "  predicate o" in lines
    assert "      group kama" in lines
    assert "    preposition lon" in lines


def test_json_rendering_round_trips_dict() -> None:
    sentence = parse_toki_pona("mi la pan li pona")
    output = render_sentence(sentence, "json")
    assert json.loads(output) == sentence.to_dict()
    assert "\n" not in output


def test_json_renderer_indent() -> None:
    renderer = JsonRenderer(indent=2)
    renderer.emit_sentence(parse_toki_pona("mi moku"))
    assert renderer.get_output().startswith("{\n  ")


def test_force_protocol_reference() -> None:
    assert hasattr(Backend, "emit_sentence")


@pytest.mark.parametrize("target", ["canonical", "TREE", "Json"])  # type: ignore[misc]
def test_renderer_selects_backend(target: str) -> None:
    renderer = Renderer(target)
    assert isinstance(renderer.backend, TARGETS[target.lower()])


def test_renderer_invalid_target_raises() -> None:
    with pytest.raises(ValueError, match="Unknown render target"):
        Renderer("xml")


def test_renderer_rejects_non_sentence() -> None:
    with pytest.raises(TypeError, match="Sentence"):
        Renderer().render(["mi moku"])  # type: ignore[list-item]


def test_renderer_calls_backend(monkeypatch: Any) -> None:
    calls: list[Any] = []

    class DummyBackend:
        def emit_sentence(self, node: Any) -> None:
            calls.append(node)

        def get_output(self) -> str:
            return "result"

    monkeypatch.setitem(TARGETS, "canonical", DummyBackend)
    sentence = parse_toki_pona("mi moku")
    assert Renderer().render([sentence]) == "result"
    assert calls == [sentence]


@settings(max_examples=200)  # type: ignore[misc]
@given(st.lists(st.sampled_from(list(Word)), max_size=12))  # type: ignore[misc]
def test_canonical_brackets_balance(sequence: list[Word]) -> None:
    try:
        sentence = parse_sentence(sequence)
    except ParseError:
        return
    depth = 0
    for ch in render(sentence):
        depth += {"(": 1, ")": -1}.get(ch, 0)
        assert depth >= 0
    assert depth == 0
