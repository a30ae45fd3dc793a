import pytest

from lexer import BFParseError, Lexer, validate_brackets


def _check(source):
    tokens = Lexer(source, "<test>").tokenize()
    validate_brackets(tokens, "<test>", source.splitlines())


def test_tokenize_skips_commentary():
    tokens = Lexer("a+b\n [x]-", "<test>").tokenize()
    assert [t.value for t in tokens] == ["+", "[", "]", "-"]
    assert [t.type for t in tokens] == ["INC", "LOOP_START", "LOOP_END", "DEC"]


def test_tokens_carry_line_column_and_offset():
    tokens = Lexer("+\n  >", "<test>").tokenize()
    assert (tokens[0].line, tokens[0].column, tokens[0].offset) == (1, 1, 0)
    assert (tokens[1].line, tokens[1].column, tokens[1].offset) == (2, 3, 4)


def test_empty_source_has_no_tokens():
    assert Lexer("", "<test>").tokenize() == []


def test_balanced_brackets_pass():
    _check("+[-[>]<]")
    _check("")


def test_unmatched_close_reports_its_position():
    with pytest.raises(BFParseError) as excinfo:
        _check("+]\n")
    error = excinfo.value
    assert "Unmatched ']'" in str(error)
    assert (error.location.line, error.location.column) == (1, 2)


def test_unmatched_open_reports_innermost_bracket():
    with pytest.raises(BFParseError) as excinfo:
        _check("[\n+[")
    location = excinfo.value.location
    assert (location.line, location.column) == (2, 2)
    assert location.statement == "+["
