from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from parser import SourceLocation


class BFError(Exception):
    """Base class for interpreter errors."""


class BFParseError(BFError):
    """Raised when the bracket structure of a program is malformed."""

    def __init__(self, message: str, *, location: Optional["SourceLocation"] = None) -> None:
        super().__init__(message)
        self.message = message
        self.location = location


@dataclass
class Token:
    type: str
    value: str
    line: int
    column: int
    offset: int


INSTRUCTIONS = {
    "+": "INC",
    "-": "DEC",
    ">": "RIGHT",
    "<": "LEFT",
    ".": "OUTPUT",
    ",": "INPUT",
    "[": "LOOP_START",
    "]": "LOOP_END",
}


class Lexer:
    def __init__(self, text: str, filename: str) -> None:
        self.text = text
        self.filename = filename
        self.index = 0
        self.line = 1
        self.column = 1

    def tokenize(self) -> List[Token]:
        tokens: List[Token] = []
        tokens_append = tokens.append
        _advance = self._advance
        instructions = INSTRUCTIONS
        text = self.text
        n = len(text)

        while self.index < n:
            ch: str = text[self.index]
            if ch in instructions:
                tokens_append(Token(instructions[ch], ch, self.line, self.column, self.index))
            # Everything else is commentary.
            _advance()
        return tokens

    def _advance(self) -> None:
        if self.text[self.index] == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        self.index += 1


def location_from_token(token: Token, filename: str, source_lines: List[str]) -> "SourceLocation":
    from parser import SourceLocation

    line_index = token.line - 1
    statement = ""
    if 0 <= line_index < len(source_lines):
        statement = source_lines[line_index]
    return SourceLocation(file=filename, line=token.line, column=token.column, statement=statement)


def validate_brackets(tokens: List[Token], filename: str, source_lines: List[str]) -> None:
    """Reject programs whose '[' and ']' do not pair up.

    An unmatched ']' is reported at its own position; an unmatched '[' is
    reported at the innermost bracket still open when the text runs out.
    """
    open_stack: List[Token] = []
    for token in tokens:
        if token.type == "LOOP_START":
            open_stack.append(token)
        elif token.type == "LOOP_END":
            if not open_stack:
                raise BFParseError(
                    f"Unmatched ']' at {filename}:{token.line}:{token.column}",
                    location=location_from_token(token, filename, source_lines),
                )
            open_stack.pop()
    if open_stack:
        token = open_stack[-1]
        raise BFParseError(
            f"Unmatched '[' at {filename}:{token.line}:{token.column}",
            location=location_from_token(token, filename, source_lines),
        )
