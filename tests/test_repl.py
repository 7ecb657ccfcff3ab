import io

import pytest

from lispy import repl
from lispy.interpreter import Interpreter
from lispy.repl import Shell, format_value, main
from lispy.types.value import Error, Number


@pytest.fixture
def shell():
    out = io.StringIO()
    return Shell(Interpreter(prelude=None), stdout=out), out


def test_format_value():
    assert format_value(Number(3)) == "3"
    assert "ERROR: boom" in format_value(Error("boom"))


def test_shell_evaluates_lines(shell):
    sh, out = shell
    sh.onecmd("+ 1 2")
    sh.onecmd("def {x} 10")
    sh.onecmd("* x x")
    assert out.getvalue().splitlines() == ["3", "()", "100"]


def test_shell_continuation_lines(shell):
    sh, out = shell
    sh.onecmd("def {f} (\\ {a} {")
    assert sh.prompt == Shell.secondary_prompt
    sh.onecmd("+ a 1")
    assert out.getvalue() == ""
    sh.onecmd("})")
    assert sh.prompt == Shell.primary_prompt
    sh.onecmd("f 2")
    assert out.getvalue().splitlines() == ["()", "3"]


def test_continuation_line_is_never_a_shell_command(shell):
    sh, out = shell
    sh.onecmd("(+ 1")
    assert sh.onecmd(":help") is None
    sh.onecmd(")")
    assert "Q-expressions" not in out.getvalue()
    assert "Unexpected char" in out.getvalue()


def test_shell_blank_and_comment_lines(shell):
    sh, out = shell
    assert sh.emptyline() is None
    sh.onecmd("")
    sh.onecmd(":")
    sh.onecmd("; just a comment")
    assert out.getvalue() == ""


def test_shell_help(shell):
    sh, out = shell
    sh.onecmd(":help")
    assert "Q-expressions" in out.getvalue()


def test_shell_exit(shell):
    sh, out = shell
    assert sh.onecmd(":exit") is True
    assert sh.onecmd("EOF") is True


def test_command_names_are_ordinary_symbols(shell):
    sh, out = shell
    assert sh.onecmd("help") is None
    sh.onecmd("def {help exit} 1 2")
    assert sh.onecmd("exit") is None
    sh.onecmd("+ help exit")
    lines = out.getvalue().splitlines()
    assert "Unbound symbol help" in lines[0]
    assert lines[1:] == ["()", "2", "3"]


def test_unknown_shell_command(shell):
    sh, out = shell
    assert sh.onecmd(":frobnicate 1") is None
    assert out.getvalue() == "Unknown shell command: :frobnicate 1\n"


def test_shell_cmdloop_reads_until_eof():
    stdin = io.StringIO("+ 1 2\nlist 1\n(+ 1\n2)\n")
    out = io.StringIO()
    sh = Shell(Interpreter(prelude=None), stdin=stdin, stdout=out)
    sh.use_rawinput = False
    sh.cmdloop(intro="")
    lines = out.getvalue().split(Shell.primary_prompt)
    assert "3\n" in lines
    assert "{1}\n" in lines
    assert any(line.endswith("3\n") and line.startswith(Shell.secondary_prompt) for line in lines)


# -----------------------------------------------------
# main
# -----------------------------------------------------

def test_main_evaluates_files(tmp_path, capsys):
    first = tmp_path / "a.lspy"
    first.write_text("def {x} 2\n")
    second = tmp_path / "b.lspy"
    second.write_text("* x 21\nsquare 3\n")
    assert main([str(first), str(second)]) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == ["()", "42", "9"]


def test_main_without_prelude(tmp_path, capsys):
    src = tmp_path / "a.lspy"
    src.write_text("square 3\n")
    assert main(["--no-prelude", str(src)]) == 0
    assert "Unbound symbol square" in capsys.readouterr().out


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.lspy")]) == 1
    assert "could not be opened" in capsys.readouterr().err


def test_main_bad_config(monkeypatch, capsys):
    monkeypatch.setenv("LISPY_RECURSION_LIMIT", "lots")
    assert main(["--no-prelude"]) == 1
    assert "LISPY_RECURSION_LIMIT" in capsys.readouterr().err


def test_main_stack_exhaustion_is_fatal(monkeypatch, tmp_path, capsys):
    def overflow(self, path):
        raise RecursionError

    monkeypatch.setattr(repl.Interpreter, "load_file", overflow)
    src = tmp_path / "a.lspy"
    src.write_text("1\n")
    assert main(["--no-prelude", str(src)]) == 2
    assert "maximum recursion depth exceeded" in capsys.readouterr().err


def test_main_rejects_unknown_log_level():
    with pytest.raises(SystemExit):
        main(["--log-level", "chatty"])
