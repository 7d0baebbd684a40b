import io

import pytest

from yall import __version__
from yall.repl import PROMPT, Repl, build_parser, format_error, main


def run_session(env, text):
    out = io.StringIO()
    Repl(env, io.StringIO(text), out).run()
    return out.getvalue()


# -------------------------
# REPL
# -------------------------

def test_eval_line(env):
    repl = Repl(env)
    assert repl.eval_line("(+ 1 2)") == "3"
    assert repl.eval_line("   ") is None
    assert repl.eval_line("(car ())") == "*** ERROR: pair required, but got ()"


def test_session_output(env):
    output = run_session(env, "(+ 1 2)\n'(a b)\n")
    assert output == f"{PROMPT}3\n{PROMPT}(a b)\n{PROMPT}\n"


def test_errors_abort_only_their_line(env):
    output = run_session(env, "(def a 1)\n(car ())\nundefined\n(+ a 1)\n")
    lines = output.split(PROMPT)
    assert lines[1] == "a\n"
    assert lines[2] == "*** ERROR: pair required, but got ()\n"
    assert lines[3] == "*** ERROR: Unbound variable: undefined\n"
    assert lines[4] == "2\n"


def test_blank_lines_are_skipped(env):
    output = run_session(env, "\n\n7\n")
    assert output == f"{PROMPT}{PROMPT}{PROMPT}7\n{PROMPT}\n"


def test_incomplete_line_reports_syntax_error(env):
    output = run_session(env, "(+ 1\n")
    assert "*** ERROR: Unexpected end of input" in output


def test_definitions_persist_across_lines(env):
    output = run_session(env, "(defn (sq x) (* x x))\n(sq 9)\n")
    assert output.endswith(f"{PROMPT}81\n{PROMPT}\n")


def test_runaway_recursion_is_reported(env):
    output = run_session(env, "(defn (loop x) (loop x))\n(loop 1)\n(+ 1 1)\n")
    assert "*** ERROR:" in output
    assert output.endswith(f"{PROMPT}2\n{PROMPT}\n")


def test_format_error():
    assert format_error(ValueError("boom")) == "*** ERROR: boom"


# -------------------------
# Command line
# -------------------------

def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.files == []
    assert not args.debug
    assert not args.no_prelude
    assert args.prelude is None


def test_version(capsys):
    with pytest.raises(SystemExit):
        main(["--version"])
    assert __version__ in capsys.readouterr().out


def test_batch_mode(tmp_path, capsys):
    script = tmp_path / "hello.yall"
    script.write_text('(println "hello")\n(println (length \'(1 2 3)))\n')
    assert main([str(script)]) == 0
    assert capsys.readouterr().out == "hello\n3\n"


def test_batch_mode_shares_one_environment(tmp_path, capsys):
    first = tmp_path / "a.yall"
    second = tmp_path / "b.yall"
    first.write_text("(def x 5)")
    second.write_text("(println (* x x))")
    assert main(["--no-prelude", str(first), str(second)]) == 0
    assert capsys.readouterr().out == "25\n"


def test_batch_mode_error_exit_status(tmp_path, capsys):
    script = tmp_path / "bad.yall"
    script.write_text('(println "before")\n(car ())\n(println "after")\n')
    assert main(["--no-prelude", str(script)]) == 1
    captured = capsys.readouterr()
    assert captured.out == "before\n"
    assert "*** ERROR: pair required" in captured.err


def test_batch_mode_unreadable_file(tmp_path, capsys):
    missing = tmp_path / "missing.yall"
    assert main(["--no-prelude", str(missing)]) == 1
    assert f"Can't open {missing}: error" in capsys.readouterr().err


def test_no_prelude_flag(tmp_path, capsys):
    script = tmp_path / "uses_prelude.yall"
    script.write_text("(length '(1))")
    assert main(["--no-prelude", str(script)]) == 1
    assert "Unbound variable: length" in capsys.readouterr().err


def test_custom_prelude(tmp_path, capsys):
    prelude = tmp_path / "mine.yall"
    prelude.write_text("(def greeting \"hi\")")
    script = tmp_path / "main.yall"
    script.write_text("(println greeting)")
    assert main(["--prelude", str(prelude), str(script)]) == 0
    assert capsys.readouterr().out == "hi\n"


def test_bad_prelude_exit_status(tmp_path, capsys):
    assert main(["--prelude", str(tmp_path / "none.yall")]) == 1
    assert "Failed to open prelude" in capsys.readouterr().err


def test_interactive_mode(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("(+ 40 2)\n"))
    assert main(["--no-prelude"]) == 0
    assert capsys.readouterr().out == f"{PROMPT}42\n{PROMPT}\n"
