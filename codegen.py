"""Render a translated block tree as Python source and compile it.

Every loop becomes a native ``while`` statement and every step a call into
the tape and stream primitives, so a compiled program behaves exactly like
the interpreter on the same input.

A generated function returns the final tape cursor. A cursor that goes
negative ends the whole run: the function returns at once, and any caller
that receives a negative cursor from a hoisted helper returns it in turn.
"""

from __future__ import annotations
import io
from collections import deque
from typing import IO, Any, Callable, Deque, Dict, Iterator, List, Optional, Tuple, Union

from interpreter import BFRuntimeError
from lexer import BFError
from parser import Block, Loop, Step, translate
from tape import StreamIO, Tape, decode_output, encode_input


INDENT = "    "

# CPython refuses more than 20 statically nested blocks per function; loops
# deeper than this move into helper functions.
MAX_INLINE_DEPTH = 12

STEP_TEMPLATES: Dict[str, List[str]] = {
    "+": ["tape.increment(pos)"],
    "-": ["tape.decrement(pos)"],
    ">": ["pos += 1"],
    "<": ["pos -= 1", "if pos < 0:", INDENT + "return pos"],
    ".": ["io.write_output(tape.read_cell(pos))"],
    ",": ["tape.write_cell(pos, io.read_input())"],
}


class PythonGenerator:
    def __init__(self, entry_name: str = "program") -> None:
        self.entry_name = entry_name
        self._functions: List[List[str]] = []
        self._pending: Deque[Tuple[str, List[Union[Step, Loop]]]] = deque()
        self._helper_count = 0

    def generate(self, program: Block) -> str:
        self._functions = []
        self._pending = deque([(self.entry_name, program.steps)])
        self._helper_count = 0
        while self._pending:
            name, steps = self._pending.popleft()
            self._emit_function(name, steps)
        chunks = ["\n".join(lines) for lines in self._functions]
        return "\n\n\n".join(chunks) + "\n"

    def _emit_function(self, name: str, steps: List[Union[Step, Loop]]) -> None:
        lines = [f"def {name}(tape, io, pos=0):"]
        self._functions.append(lines)
        self._emit_steps(steps, lines)
        lines.append(INDENT + "return pos")

    def _emit_steps(self, steps: List[Union[Step, Loop]], lines: List[str]) -> None:
        # Walk the tree with an explicit stack of (remaining steps, depth).
        stack: List[Tuple[Iterator[Union[Step, Loop]], int]] = [(iter(steps), 1)]
        while stack:
            remaining, depth = stack[-1]
            step = next(remaining, None)
            if step is None:
                stack.pop()
                continue
            pad = INDENT * depth
            if isinstance(step, Loop):
                if depth >= MAX_INLINE_DEPTH:
                    helper = self._next_helper_name()
                    self._pending.append((helper, [step]))
                    lines.append(f"{pad}pos = {helper}(tape, io, pos)")
                    lines.append(f"{pad}if pos < 0:")
                    lines.append(f"{pad}{INDENT}return pos")
                    continue
                lines.append(f"{pad}while tape.read_cell(pos):")
                if not step.body.steps:
                    lines.append(pad + INDENT + "pass")
                stack.append((iter(step.body.steps), depth + 1))
            else:
                lines.extend(pad + line for line in STEP_TEMPLATES[step.op])

    def _next_helper_name(self) -> str:
        self._helper_count += 1
        return f"_loop_{self._helper_count}"


class CompiledProgram:
    def __init__(self, source: str, *, filename: str = "<brainfuck>", entry_name: str = "program") -> None:
        self.source = source
        self.filename = filename
        namespace: Dict[str, Any] = {}
        code = compile(source, filename, "exec")
        exec(code, namespace)
        self._entry: Callable[..., int] = namespace[entry_name]

    def run(
        self,
        input_stream: Optional[IO[Any]] = None,
        output_stream: Optional[IO[Any]] = None,
    ) -> bytes:
        """Execute on a fresh tape; returns the collected output when no sink is given."""
        streams = StreamIO(input_stream, output_stream)
        try:
            self._entry(Tape(), streams)
        except BFError:
            raise
        except Exception as exc:
            raise BFRuntimeError(f"Internal compiled program error: {exc}") from exc
        finally:
            streams.flush()
        if output_stream is None:
            return streams.getvalue()
        return b""

    def run_string(self, input_text: str = "") -> str:
        return decode_output(self.run(io.BytesIO(encode_input(input_text))))


def compile_program(source: str, filename: str = "<string>") -> CompiledProgram:
    block = translate(source, filename)
    generated = PythonGenerator().generate(block)
    return CompiledProgram(generated, filename=f"<brainfuck {filename}>")
