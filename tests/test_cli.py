import io
import sys

import pytest

from brainfuck import run_cli
from programs import HELLOWORLD


@pytest.fixture
def stdin(monkeypatch):
    def feed(data: bytes):
        monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(data), encoding="latin-1"))

    feed(b"")
    return feed


def test_run_builtin_compiled(capsysbinary, stdin):
    assert run_cli(["run", "helloworld"]) == 0
    assert capsysbinary.readouterr().out == b"Hello World!\n"


def test_run_builtin_interpreted(capsysbinary, stdin):
    assert run_cli(["run", "helloworld", "--interpret"]) == 0
    assert capsysbinary.readouterr().out == b"Hello World!\n"


def test_run_rot13_reads_standard_input(capsysbinary, stdin):
    stdin(b"How I Start\n")
    assert run_cli(["run", "rot13"]) == 0
    assert capsysbinary.readouterr().out == b"Ubj V Fgneg\n"


def test_run_unknown_program(capsysbinary, stdin):
    assert run_cli(["run", "nosuchprogram"]) == 1
    assert b"Unknown program 'nosuchprogram'" in capsysbinary.readouterr().err


def test_interpret_file(tmp_path, capsysbinary, stdin):
    path = tmp_path / "hello.b"
    path.write_text(HELLOWORLD, encoding="utf-8")
    assert run_cli(["interpret", str(path)]) == 0
    assert capsysbinary.readouterr().out == b"Hello World!\n"


def test_interpret_file_with_non_utf8_comment(tmp_path, capsysbinary, stdin):
    path = tmp_path / "latin.b"
    path.write_bytes(b"\xe9 comment\n++++++++[>++++++++<-]>+.")
    assert run_cli(["interpret", str(path)]) == 0
    assert capsysbinary.readouterr().out == b"A"


def test_compile_run_file_with_non_utf8_comment(tmp_path, capsysbinary, stdin):
    path = tmp_path / "latin.b"
    path.write_bytes(b"\xff\xfe caf\xe9\n++++++++[>++++++++<-]>+.")
    assert run_cli(["compile", str(path), "--run"]) == 0
    assert capsysbinary.readouterr().out == b"A"


def test_interpret_literal_source(capsysbinary, stdin):
    assert run_cli(["interpret", "-source", "++++++++[>++++++++<-]>+."]) == 0
    assert capsysbinary.readouterr().out == b"A"


def test_interpret_source_from_standard_input(capsysbinary, stdin):
    stdin(HELLOWORLD.encode("latin-1"))
    assert run_cli(["interpret"]) == 0
    assert capsysbinary.readouterr().out == b"Hello World!\n"


def test_interpret_non_utf8_source_from_standard_input(capsysbinary, stdin):
    stdin(b"\x80\x81 ++++++++[>++++++++<-]>+.")
    assert run_cli(["interpret"]) == 0
    assert capsysbinary.readouterr().out == b"A"


def test_missing_file_fails_with_diagnostic(tmp_path, capsysbinary, stdin):
    assert run_cli(["interpret", str(tmp_path / "missing.b")]) == 1
    assert b"Failed to read" in capsysbinary.readouterr().err


def test_source_flag_requires_program(capsysbinary, stdin):
    assert run_cli(["interpret", "-source"]) == 1
    assert b"-source requires a program string" in capsysbinary.readouterr().err


def test_malformed_program_is_reported(capsysbinary, stdin):
    assert run_cli(["interpret", "-source", "[+"]) == 1
    assert capsysbinary.readouterr().err.startswith(b"ParseError: Unmatched '['")


def test_negative_cursor_is_normal_termination(capsysbinary, stdin):
    assert run_cli(["interpret", "-source", "<+."]) == 0
    assert capsysbinary.readouterr().out == b""


def test_trace_prints_every_n_steps(capsysbinary, stdin):
    assert run_cli(["interpret", "-source", "+++", "--trace", "2"]) == 0
    err = capsysbinary.readouterr().err
    assert err.count(b"[trace]") == 2
    assert b"[trace] step 2: '+' at 2, tape[0]=3" in err


def test_compile_prints_python(capsysbinary, stdin):
    assert run_cli(["compile", "-source", "+[-]"]) == 0
    assert b"while tape.read_cell(pos):" in capsysbinary.readouterr().out


def test_compile_emit_writes_file(tmp_path, capsysbinary, stdin):
    target = tmp_path / "out.py"
    assert run_cli(["compile", "-source", "+.", "--emit", str(target)]) == 0
    assert target.read_text(encoding="utf-8").startswith("def program(")
    assert capsysbinary.readouterr().out == b""


def test_compile_run(capsysbinary, stdin):
    stdin(b"x")
    assert run_cli(["compile", "-source", ",.", "--run"]) == 0
    assert capsysbinary.readouterr().out == b"x"


def test_list_builtin_programs(capsysbinary):
    assert run_cli(["list"]) == 0
    assert capsysbinary.readouterr().out == b"helloworld\nmandelbrot\nrot13\n"


def test_version(capsysbinary):
    with pytest.raises(SystemExit) as excinfo:
        run_cli(["--version"])
    assert excinfo.value.code == 0
    assert b"brainfuck 1.0" in capsysbinary.readouterr().out
