import io
import sys

import pytest

from codegen import MAX_INLINE_DEPTH, CompiledProgram, PythonGenerator, compile_program
from interpreter import interpret_string
from lexer import BFParseError
from parser import translate
from programs import HELLOWORLD, ROT13


def _generate(source):
    return PythonGenerator().generate(translate(source))


def test_empty_program_generates_bare_entry_point():
    assert _generate("") == "def program(tape, io, pos=0):\n    return pos\n"


def test_empty_program_runs_with_no_output():
    assert compile_program("").run_string("anything") == ""


def test_loops_render_as_native_while():
    generated = _generate("+[-]")
    assert "    while tape.read_cell(pos):\n        tape.decrement(pos)\n" in generated


def test_empty_loop_body_renders_pass():
    assert "        pass\n" in _generate("[]")


def test_every_instruction_becomes_one_step():
    assert _generate("+++").count("tape.increment(pos)") == 3


def test_custom_entry_name():
    program = CompiledProgram(PythonGenerator(entry_name="main").generate(translate("+.")), entry_name="main")
    assert program.run_string() == "\x01"


def test_compiled_hello_world():
    assert compile_program(HELLOWORLD).run_string() == "Hello World!\n"


def test_compiled_rot13_round_trip():
    rot13 = compile_program(ROT13)
    conv = rot13.run_string("How I Start\n")
    assert conv == "Ubj V Fgneg\n"
    assert rot13.run_string(conv) == "How I Start\n"


EQUIVALENCE_CASES = [
    (HELLOWORLD, ""),
    (ROT13, "Some Input\n"),
    ("+" * 256 + ".", ""),
    ("-.", ""),
    (",.,.,.", "a"),
    (",.,.,.", "€"),
    (",+[-.,+]", "echo me"),
    ("+[<]+.", ""),
    ("<+.", ""),
    ("++[>+++[>+<-]<-]>>.", ""),
    ("[.]+.", ""),
    ("", "x"),
]


@pytest.mark.parametrize("source, text", EQUIVALENCE_CASES)
def test_compiled_output_matches_interpreter(source, text):
    assert compile_program(source).run_string(text) == interpret_string(source, text)


def test_deep_nesting_is_hoisted_into_helpers():
    depth = MAX_INLINE_DEPTH * 3
    source = "+" + "[" * depth + "-" + "]" * depth + "+++."
    assert "_loop_1" in _generate(source)
    assert compile_program(source).run_string() == "\x03"
    assert interpret_string(source) == "\x03"


def test_halt_propagates_out_of_hoisted_helpers():
    depth = MAX_INLINE_DEPTH * 2
    source = "+" + "[" * depth + "<" + "]" * depth + "+."
    assert compile_program(source).run_string() == ""
    assert interpret_string(source) == ""


def test_nesting_deeper_than_the_recursion_limit():
    depth = sys.getrecursionlimit() + 200
    source = "+" + "[" * depth + "-" + "]" * depth + "+++."
    block = translate(source)
    assert block.depth() == depth
    assert block.count_steps() == 6
    assert compile_program(source).run_string() == "\x03"


def test_input_text_is_fed_as_utf8_bytes():
    assert compile_program(",.,.,.").run_string("€") == "\xe2\x82\xac"


def test_run_writes_to_external_sink():
    out = io.BytesIO()
    assert compile_program(",.").run(io.BytesIO(b"Q"), out) == b""
    assert out.getvalue() == b"Q"


def test_each_run_uses_a_fresh_tape():
    program = compile_program("+.")
    assert program.run_string() == "\x01"
    assert program.run_string() == "\x01"


def test_unmatched_brackets_are_rejected():
    with pytest.raises(BFParseError):
        compile_program("+[")
