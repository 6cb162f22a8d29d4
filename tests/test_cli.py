import builtins
import json
import sys
from pathlib import Path
from typing import Any

import pytest

from tokiparse import tokiparse_cli
from tokiparse.tokiparse_aliases import AliasMapper
from tokiparse.tokiparse_constants import ALIASES_ENV_VAR

SOURCE = "mi moku\n\nla mi moku\njan li moku e pan e telo\n"


@pytest.fixture(autouse=True)  # type: ignore[misc]
def quiet_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(tokiparse_cli, "setup_logging", lambda **kwargs: None)


def test_run_string_input_prints(capsys: pytest.CaptureFixture[str]) -> None:
    failures = tokiparse_cli.run_tokiparse("mi moku", is_string=True)
    assert failures == 0
    assert capsys.readouterr().out.strip() == "(mi)li(moku)"


def test_run_reports_failures_per_line(capsys: pytest.CaptureFixture[str]) -> None:
    failures = tokiparse_cli.run_tokiparse(SOURCE, is_string=True)
    captured = capsys.readouterr()
    assert failures == 1
    assert captured.out.splitlines() == ["(mi)li(moku)", "(jan)li(moku)e(pan)e(telo)"]
    assert "[error] line 3: EmptyContext" in captured.err


def test_run_file_input(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "input.tp"
    path.write_text("o moku\n", encoding="utf-8")
    assert tokiparse_cli.run_tokiparse(str(path)) == 0
    assert "(sina)o(moku)" in capsys.readouterr().out


def test_run_rejects_unknown_suffix() -> None:
    with pytest.raises(ValueError, match="Only .tp and .txt"):
        tokiparse_cli.run_tokiparse("input.md")


def test_run_rejects_unknown_target() -> None:
    with pytest.raises(ValueError, match="Unknown render target"):
        tokiparse_cli.run_tokiparse("mi moku", is_string=True, target="xml")


def test_run_pretty_banner(capsys: pytest.CaptureFixture[str]) -> None:
    tokiparse_cli.run_tokiparse("mi moku", is_string=True, pretty=True)
    out = capsys.readouterr().out
    assert "Parsed (canonical)" in out
    assert "(mi)li(moku)" in out


def test_run_output_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    out_path = tmp_path / "out.jsonl"
    tokiparse_cli.run_tokiparse(
        SOURCE, is_string=True, target="json", out=str(out_path), pretty=True
    )
    lines = out_path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    assert json.loads(lines[0])["subjects"][0]["word"] == "mi"
    assert f"(wrote 2 sentence(s) to {out_path})" in capsys.readouterr().out


def test_run_with_aliases(capsys: pytest.CaptureFixture[str]) -> None:
    tokiparse_cli.run_tokiparse(
        "ali li pona", is_string=True, aliases=AliasMapper.from_defaults()
    )
    assert capsys.readouterr().out.strip() == "(ale)li(pona)"


def test_main_string(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr(sys, "argv", ["tokiparse", "-s", "mi moku", "-t", "tree"])
    tokiparse_cli.main()
    assert "  predicate li" in capsys.readouterr().out


def test_main_exits_nonzero_on_failure(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(sys, "argv", ["tokiparse", "-s", "li nasa"])
    with pytest.raises(SystemExit) as e:
        tokiparse_cli.main()
    assert e.value.code == 1


def test_main_calls_repl_on_no_args(monkeypatch: pytest.MonkeyPatch) -> None:
    called: dict[str, Any] = {}
    monkeypatch.setattr(sys, "argv", ["tokiparse"])
    monkeypatch.setattr(
        "tokiparse.tokiparse_repl.start_repl", lambda **kwargs: called.update(kwargs)
    )
    tokiparse_cli.main()
    assert called["target"] == "canonical"
    assert called["aliases"].summary() == {"ali": "ale"}


def test_main_no_args_sets_up_logging_and_env_aliases(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    path = tmp_path / "aliases.json"
    path.write_text(json.dumps({"nimisin": "sin"}), encoding="utf-8")
    monkeypatch.setenv(ALIASES_ENV_VAR, str(path))
    monkeypatch.setattr(sys, "argv", ["tokiparse"])
    logging_calls: list[dict[str, Any]] = []
    monkeypatch.setattr(
        tokiparse_cli, "setup_logging", lambda **kwargs: logging_calls.append(kwargs)
    )
    lines = iter(["nimisin li pona", "quit"])
    monkeypatch.setattr(builtins, "input", lambda _: next(lines))

    tokiparse_cli.main()

    assert logging_calls == [{"log_file": None, "debug": False}]
    assert "(sin)li(pona)" in capsys.readouterr().out.splitlines()


def test_main_repl_flag_passes_options(monkeypatch: pytest.MonkeyPatch) -> None:
    called: dict[str, Any] = {}
    monkeypatch.setattr(sys, "argv", ["tokiparse", "--repl", "-t", "json"])
    monkeypatch.setattr(
        "tokiparse.tokiparse_repl.start_repl", lambda **kwargs: called.update(kwargs)
    )
    tokiparse_cli.main()
    assert called["target"] == "json"
    assert isinstance(called["aliases"], AliasMapper)


def test_main_aliases_file(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    path = tmp_path / "aliases.json"
    path.write_text(json.dumps({"kaa": "ala"}), encoding="utf-8")
    argv = ["tokiparse", "-s", "mi kaa", "--aliases", str(path)]
    monkeypatch.setattr(sys, "argv", argv)
    tokiparse_cli.main()
    assert capsys.readouterr().out.strip() == "(mi)li(ala)"


def test_main_aliases_from_env(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    path = tmp_path / "aliases.json"
    path.write_text(json.dumps({"kaa": "ala"}), encoding="utf-8")
    monkeypatch.setenv(ALIASES_ENV_VAR, str(path))
    monkeypatch.setattr(sys, "argv", ["tokiparse", "-s", "mi kaa"])
    tokiparse_cli.main()
    assert capsys.readouterr().out.strip() == "(mi)li(ala)"


def test_main_bad_aliases_file(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    path = tmp_path / "aliases.json"
    path.write_text(json.dumps({"moku": "pan"}), encoding="utf-8")
    argv = ["tokiparse", "-s", "mi moku", "--aliases", str(path)]
    monkeypatch.setattr(sys, "argv", argv)
    with pytest.raises(SystemExit) as e:
        tokiparse_cli.main()
    assert e.value.code == 2
    err = capsys.readouterr().err
    assert "Alias collision" in err
    assert "shadows" in err


def test_main_invalid_target(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(sys, "argv", ["tokiparse", "-s", "mi moku", "-t", "xml"])
    with pytest.raises(SystemExit):
        tokiparse_cli.main()
