"""
Tests for the pronomacro command-line interface.
"""
import io
import json

import pytest

from pronomacro.cli import main


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("PRONOMACRO_LOG_FILE", raising=False)
    monkeypatch.delenv("PRONOMACRO_DEBUG", raising=False)
    monkeypatch.delenv("PRONOMACRO_DEBUG_LOG", raising=False)


def test_no_command_prints_help(capsys):
    assert main([]) == 1
    assert "usage: pronomacro" in capsys.readouterr().out


def test_convert_argument(capsys):
    assert main(["convert", "~He gave ~her presentation."]) == 0
    out = capsys.readouterr().out
    assert out == "{{pronounSubjectiveCap}} gave {{pronounPosDet}} presentation.\n"


def test_convert_stdin(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("Talk to ~her\n"))
    assert main(["convert"]) == 0
    assert capsys.readouterr().out == "Talk to {{pronounObjective}}\n"


def test_convert_files(tmp_path, capsys):
    first = tmp_path / "a.txt"
    second = tmp_path / "b.txt"
    first.write_text("~they're here\n", encoding="utf-8")
    second.write_text("{{char}} met ~him", encoding="utf-8")
    assert main(["convert", "-f", str(first), "-f", str(second)]) == 0
    out = capsys.readouterr().out
    assert out == "{{pronounSubjective}}'re here\n{{char}} met {{pronounObjective}}\n"


def test_convert_missing_file(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        main(["convert", "-f", str(tmp_path / "missing.txt")])
    assert exc.value.code == 1
    assert "ERROR" in capsys.readouterr().err



def test_convert_text_and_file_together_rejected(tmp_path, capsys):
    source = tmp_path / "a.txt"
    source.write_text("~them", encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        main(["convert", "~she", "-f", str(source)])
    assert exc.value.code == 2
    assert "not allowed with argument" in capsys.readouterr().err

def test_convert_json(capsys):
    assert main(["convert", "--format", "json", "~banana ~Them"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["output"] == "banana {{pronounObjectiveCap}}"
    assert data["stats"]["pronouns"] == 1
    assert data["stats"]["conversions"] == 1
    assert any(e["severity"] == "warning" for e in data["events"])


def test_convert_show_log_and_stats(capsys):
    assert main(["convert", "--show-log", "--stats", "~his cars"]) == 0
    captured = capsys.readouterr()
    assert captured.out == "{{pronounPosDet}} cars\n"
    assert "Ambiguous 'his' resolved to: {{pronounPosDet}}" in captured.err
    assert "Pronouns converted: 1" in captured.err
    assert "Ambiguous resolutions: 1" in captured.err
    assert "2 words in, 2 words out" in captured.err


def test_convert_log_file(tmp_path, capsys):
    target = tmp_path / "debug.txt"
    assert main(["convert", "--log-file", str(target), "~she"]) == 0
    contents = target.read_text(encoding="utf-8")
    assert "SUCCESS: Direct conversion: ~she → {{pronounSubjective}}" in contents


def test_convert_log_file_from_environment(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("PRONOMACRO_LOG_FILE", str(tmp_path))
    assert main(["convert", "~it"]) == 0
    saved = list(tmp_path.glob("pronoun-converter-debug-*.txt"))
    assert len(saved) == 1


def test_explain_ambiguous(capsys):
    assert main(["explain", "her", "--context", "kindness"]) == 0
    out = capsys.readouterr().out
    assert "Rule: ambiguous" in out
    assert "Result: {{pronounPosDet}}" in out


def test_explain_contraction_with_sigil(capsys):
    assert main(["explain", "~They're"]) == 0
    out = capsys.readouterr().out
    assert "Rule: contraction" in out
    assert "Category: subjective" in out
    assert "Result: {{pronounSubjectiveCap}}'re" in out


def test_explain_unresolved(capsys):
    assert main(["explain", "banana"]) == 0
    assert "Rule: none" in capsys.readouterr().out


def test_explain_rejects_non_word(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["explain", "123"])
    assert exc.value.code == 1


def test_info(capsys):
    assert main(["info"]) == 0
    out = capsys.readouterr().out
    assert "{{pronounReflexiveCap}}" in out
    assert "Lookahead steps: 6" in out
    assert "her, his" in out


def test_debug_log_records_progress_per_file(tmp_path, capsys):
    first = tmp_path / "a.txt"
    second = tmp_path / "b.txt"
    first.write_text("~she and ~they", encoding="utf-8")
    second.write_text("~banana", encoding="utf-8")
    debug_log = tmp_path / "run.log"
    args = ["--debug", "--debug-log", str(debug_log),
            "convert", "-f", str(first), "-f", str(second)]
    assert main(args) == 0
    contents = debug_log.read_text(encoding="utf-8")
    assert "NEW RUN STARTED" in contents
    assert f"[1/2] {first}: 2 pronouns converted" in contents
    assert f"[2/2] {second}: 0 pronouns converted" in contents


def test_debug_log_from_environment(tmp_path, monkeypatch, capsys):
    debug_log = tmp_path / "env.log"
    monkeypatch.setenv("PRONOMACRO_DEBUG_LOG", str(debug_log))
    assert main(["convert", "~banana"]) == 0
    assert "No conversion found for: ~banana → banana" in debug_log.read_text(encoding="utf-8")


def test_debug_log_unwritable(tmp_path, capsys):
    target = tmp_path / "missing" / "run.log"
    assert main(["--debug-log", str(target), "convert", "~she"]) == 1
    assert "ERROR opening debug log" in capsys.readouterr().err
