import io

import pytest
from rich.console import Console
from wordle_entropy.cli import assist, run
from wordle_entropy.cli.assist import handle_command
from wordle_entropy.session import Assistant

SCENARIO = ["crane", "slate", "trace", "brake"]


def _console():
    buf = io.StringIO()
    return Console(file=buf, width=200), buf


def test_apply_round_renders_candidates_and_suggestions():
    console, buf = _console()
    a = Assistant(SCENARIO)
    assert handle_command(a, "slate --G-G", console) is True
    out = buf.getvalue()
    assert "Candidates (2)" in out
    assert "Most likely: brake" in out
    assert "1.000" in out


def test_empty_candidate_set_has_no_suggestions():
    console, buf = _console()
    a = Assistant(SCENARIO)
    handle_command(a, "crane -----", console)
    assert "No suggestions (empty candidate set)" in buf.getvalue()


def test_errors_are_reported_not_raised():
    console, buf = _console()
    a = Assistant(SCENARIO)
    assert handle_command(a, "undo", console) is True
    assert handle_command(a, "cranes -----", console) is True
    assert handle_command(a, "crane GGZGG", console) is True
    assert buf.getvalue().count("error:") == 3
    assert len(a.history) == 0


def test_undo_reset_quit():
    console, buf = _console()
    a = Assistant(SCENARIO)
    handle_command(a, "crane -----", console)
    handle_command(a, "undo", console)
    assert "undid crane -----" in buf.getvalue()
    handle_command(a, "slate --G-G", console)
    handle_command(a, "reset", console)
    assert len(a.history) == 0
    assert handle_command(a, "", console) is True
    assert handle_command(a, "quit", console) is False


def test_run_main_writes_reports(tmp_path, capsys):
    words = tmp_path / "words.txt"
    words.write_text("\n".join(SCENARIO) + "\n", encoding="utf-8")
    outdir = tmp_path / "reports"

    rc = run.main(["--wordlist", str(words), "--outdir", str(outdir), "--progress", "off"])
    assert rc == 0
    assert "Solved 4/4" in capsys.readouterr().out
    assert len(list(outdir.glob("run_*.csv"))) == 1
    assert len(list(outdir.glob("run_*_manifest.json"))) == 1


def test_run_main_missing_wordlist(tmp_path):
    assert run.main(["--wordlist", str(tmp_path / "nope.txt"), "--progress", "off"]) == 2


def test_two_token_line_is_always_a_round():
    console, buf = _console()
    a = Assistant(SCENARIO + ["reset"])
    handle_command(a, "crane -----", console)
    assert handle_command(a, "reset -Y-G-", console) is True
    assert [e.guess for e in a.history] == ["reset", "crane"]
    assert a.history[0].key == "-Y-G-"

    handle_command(a, "undo", console)
    handle_command(a, "reset", console)
    assert len(a.history) == 0


def test_guess_outside_word_list_is_noted():
    console, buf = _console()
    a = Assistant(SCENARIO)
    handle_command(a, "build -----", console)
    assert "build is not in the word list" in buf.getvalue()
    assert len(a.history) == 1


@pytest.mark.parametrize("argv", [["--top", "-1"], ["--workers", "0"], ["--top", "ten"]])
def test_assist_rejects_bad_numeric_args(argv):
    with pytest.raises(SystemExit) as info:
        assist.main(argv)
    assert info.value.code == 2


@pytest.mark.parametrize("argv", [["--sample", "-3"], ["--sample", "0"], ["--workers", "-2"]])
def test_run_rejects_bad_numeric_args(argv, tmp_path):
    with pytest.raises(SystemExit) as info:
        run.main(argv + ["--outdir", str(tmp_path)])
    assert info.value.code == 2
    assert not list(tmp_path.glob("run_*"))
