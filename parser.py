from __future__ import annotations
from dataclasses import dataclass
from typing import List, Tuple, Union

from lexer import BFParseError, Lexer, Token, location_from_token


@dataclass
class SourceLocation:
    file: str
    line: int
    column: int
    statement: str


@dataclass
class Node:
    location: SourceLocation


@dataclass
class Step(Node):
    op: str


@dataclass
class Loop(Node):
    body: "Block"


@dataclass
class Block(Node):
    steps: List[Union[Step, Loop]]

    def count_steps(self) -> int:
        total = 0
        pending: List[Block] = [self]
        while pending:
            block = pending.pop()
            for step in block.steps:
                if isinstance(step, Loop):
                    pending.append(step.body)
                else:
                    total += 1
        return total

    def depth(self) -> int:
        deepest = 0
        pending: List[Tuple[Block, int]] = [(self, 0)]
        while pending:
            block, level = pending.pop()
            deepest = max(deepest, level)
            for step in block.steps:
                if isinstance(step, Loop):
                    pending.append((step.body, level + 1))
        return deepest


class Parser:
    def __init__(self, tokens: List[Token], filename: str, source_lines: List[str]) -> None:
        self.tokens = tokens
        self.filename = filename
        self.source_lines = source_lines

    def parse(self) -> Block:
        top = Block(location=SourceLocation(file=self.filename, line=1, column=1, statement=""), steps=[])
        # One open accumulator per '[' still waiting for its ']'; the
        # top-level block sits at the bottom and never leaves.
        stack: List[Block] = [top]
        for token in self.tokens:
            if token.type == "LOOP_START":
                stack.append(Block(location=self._location_from_token(token), steps=[]))
            elif token.type == "LOOP_END":
                if len(stack) == 1:
                    raise BFParseError(
                        f"Unmatched ']' at {self.filename}:{token.line}:{token.column}",
                        location=self._location_from_token(token),
                    )
                body = stack.pop()
                stack[-1].steps.append(Loop(location=body.location, body=body))
            else:
                stack[-1].steps.append(Step(location=self._location_from_token(token), op=token.value))
        if len(stack) > 1:
            location = stack[-1].location
            raise BFParseError(
                f"Unmatched '[' at {self.filename}:{location.line}:{location.column}",
                location=location,
            )
        return top

    def _location_from_token(self, token: Token) -> SourceLocation:
        return location_from_token(token, self.filename, self.source_lines)


def translate(source: str, filename: str = "<string>") -> Block:
    """Turn program text into a tree of steps and loops without running it."""
    tokens = Lexer(source, filename).tokenize()
    return Parser(tokens, filename, source.splitlines()).parse()
