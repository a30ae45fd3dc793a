import pytest

from lexer import BFParseError
from parser import Block, Loop, Step, translate


def test_empty_source_translates_to_empty_block():
    block = translate("")
    assert isinstance(block, Block)
    assert block.steps == []
    assert block.count_steps() == 0
    assert block.depth() == 0


def test_commentary_emits_no_steps():
    assert translate("hello world").steps == []


def test_loop_wraps_its_body():
    block = translate("+[->+<].")
    assert [type(step) for step in block.steps] == [Step, Loop, Step]
    loop = block.steps[1]
    assert [step.op for step in loop.body.steps] == ["-", ">", "+", "<"]
    assert block.steps[2].op == "."


def test_adjacent_instructions_are_not_merged():
    block = translate("+++>>")
    assert [step.op for step in block.steps] == ["+", "+", "+", ">", ">"]


def test_nested_loops():
    block = translate("[[+]-]")
    outer = block.steps[0]
    assert isinstance(outer, Loop)
    inner = outer.body.steps[0]
    assert isinstance(inner, Loop)
    assert inner.body.steps[0].op == "+"
    assert outer.body.steps[1].op == "-"
    assert block.depth() == 2


def test_empty_loop_has_empty_body():
    block = translate("[]")
    assert block.steps[0].body.steps == []


def test_loop_location_points_at_open_bracket():
    loop = translate("+\n [-]").steps[1]
    assert (loop.location.line, loop.location.column) == (2, 2)


def test_count_steps_includes_loop_bodies():
    assert translate("+[-[>]]").count_steps() == 3


@pytest.mark.parametrize("source", ["[+", "+]", "[[]", "[]]"])
def test_unmatched_brackets_are_rejected(source):
    with pytest.raises(BFParseError):
        translate(source)
