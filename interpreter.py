from __future__ import annotations
import io
import json
from dataclasses import dataclass
from typing import IO, Any, Dict, List, Optional, Tuple

from hooks import HookRegistry, RuntimeServices, StepContext, build_default_services
from lexer import BFError, Lexer, validate_brackets
from parser import SourceLocation
from tape import StreamIO, Tape, decode_output, encode_input


TAPE_WINDOW = 8


class BFRuntimeError(BFError):
    """Raised for faults outside the language itself (I/O failures, broken hooks)."""

    def __init__(
        self,
        message: str,
        *,
        location: Optional[SourceLocation] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.location = location
        self.step_index: Optional[int] = None


@dataclass
class StateEntry:
    step_index: int
    code_pos: int
    instruction: str
    tape_pos: int
    cell: int


class StateLogger:
    def __init__(self, verbose: bool) -> None:
        self.verbose = verbose
        self.entries: List[StateEntry] = []
        self.next_state_index = 0

    def record(self, *, code_pos: int, instruction: str, tape_pos: int, cell: int) -> int:
        step_index = self.next_state_index
        if self.verbose:
            self.entries.append(
                StateEntry(
                    step_index=step_index,
                    code_pos=code_pos,
                    instruction=instruction,
                    tape_pos=tape_pos,
                    cell=cell,
                )
            )
        self.next_state_index += 1
        return step_index

    def last_entry(self) -> Optional[StateEntry]:
        return self.entries[-1] if self.entries else None


class Interpreter:
    """Executes program text directly by scanning it, with no jump table.

    Loops keep an explicit stack of open brackets rather than recursing, so
    nesting depth is bounded only by memory. The body text is scanned again
    on each iteration.
    """

    def __init__(
        self,
        *,
        source: str,
        filename: str = "<string>",
        verbose: bool = False,
        services: Optional[RuntimeServices] = None,
        input_stream: Optional[IO[Any]] = None,
        output_stream: Optional[IO[Any]] = None,
    ) -> None:
        self.source = source
        self._source_lines = source.splitlines()
        self.filename = filename
        self.verbose = verbose
        self.services = services or build_default_services()
        self.hook_registry: HookRegistry = self.services.hook_registry
        self.io = StreamIO(input_stream, output_stream)
        self.logger = StateLogger(verbose=verbose)
        self.tape = Tape()
        self.tape_pos = 0
        self.code_pos = 0
        self.steps = 0
        self.halted = False
        self._tracing = False

    def validate(self) -> None:
        tokens = Lexer(self.source, self.filename).tokenize()
        validate_brackets(tokens, self.filename, self._source_lines)

    def run(self) -> None:
        self.validate()
        self.tape = Tape()
        self.logger = StateLogger(verbose=self.verbose)
        self.tape_pos = 0
        self.code_pos = 0
        self.steps = 0
        self.halted = False
        self._tracing = self.verbose or self.hook_registry.has_step_rules()
        self._emit_event("program_start", self)
        try:
            self._run()
        except BFError as error:
            self._emit_event("on_error", self, error)
            if isinstance(error, BFRuntimeError) and error.step_index is None:
                error.step_index = self.steps
            raise
        except Exception as exc:
            self._emit_event("on_error", self, exc)
            # Surface Python-level failures (usually I/O) as interpreter errors
            # so the CLI can format them.
            wrapped = BFRuntimeError(f"Internal interpreter error: {exc}", location=self.current_location())
            wrapped.step_index = self.steps
            raise wrapped from exc
        finally:
            self.io.flush()
        if self.tape_pos < 0:
            self.halted = True
            self._emit_event("halt", self)
        self._emit_event("program_end", self)

    def _run(self) -> None:
        code = self.source
        n = len(code)
        tape = self.tape
        # One frame per open '[': where its body starts and the skip mode of
        # the enclosing text. A zero cell on entry walks the body in skip
        # mode, which only looks for the matching ']'.
        frames: List[Tuple[int, bool]] = []
        skip = False
        while self.tape_pos >= 0 and self.code_pos < n:
            ch = code[self.code_pos]
            if ch == "[":
                self.code_pos += 1
                frames.append((self.code_pos, skip))
                skip = tape.read_cell(self.tape_pos) == 0
                continue
            if ch == "]" and frames:
                if tape.read_cell(self.tape_pos) != 0:
                    self.code_pos = frames[-1][0]
                    skip = False
                    continue
                skip = frames.pop()[1]
            elif not skip and ch in "+-<>.,":
                self._execute(ch)
            self.code_pos += 1

    def _execute(self, ch: str) -> None:
        tape = self.tape
        pos = self.tape_pos
        if ch == "+":
            tape.increment(pos)
        elif ch == "-":
            tape.decrement(pos)
        elif ch == ">":
            self.tape_pos = pos + 1
        elif ch == "<":
            self.tape_pos = pos - 1
        elif ch == ".":
            self.io.write_output(tape.read_cell(pos))
        elif ch == ",":
            tape.write_cell(pos, self.io.read_input())
        self.steps += 1
        if self._tracing:
            self._log_step(ch)

    def current_location(self) -> SourceLocation:
        pos = min(self.code_pos, len(self.source))
        line = self.source.count("\n", 0, pos) + 1
        column = pos - (self.source.rfind("\n", 0, pos) + 1) + 1
        statement = ""
        if 0 <= line - 1 < len(self._source_lines):
            statement = self._source_lines[line - 1]
        return SourceLocation(file=self.filename, line=line, column=column, statement=statement)

    def output_text(self) -> str:
        return decode_output(self.io.getvalue())

    def _emit_event(self, event: str, *args: Any, **kwargs: Any) -> None:
        try:
            self.hook_registry.emit(event, *args, **kwargs)
        except BFRuntimeError:
            raise
        except Exception as exc:
            error = BFRuntimeError(
                f"Hook '{event}' failed: {exc}",
                location=self.current_location(),
            )
            error.step_index = self.steps
            raise error from exc

    def _log_step(self, instruction: str) -> None:
        step_index = self.logger.record(
            code_pos=self.code_pos,
            instruction=instruction,
            tape_pos=self.tape_pos,
            cell=self.tape.peek_cell(self.tape_pos),
        )
        try:
            self.hook_registry.after_step(
                self,
                StepContext(
                    step_index=step_index,
                    instruction=instruction,
                    code_pos=self.code_pos,
                    tape_pos=self.tape_pos,
                ),
            )
        except BFRuntimeError:
            raise
        except Exception as exc:
            raise BFRuntimeError(
                f"Step rule failed: {exc}",
                location=self.current_location(),
            ) from exc


def interpret(
    source: str,
    input_stream: Optional[IO[Any]] = None,
    output_stream: Optional[IO[Any]] = None,
    *,
    filename: str = "<string>",
) -> Interpreter:
    interpreter = Interpreter(
        source=source,
        filename=filename,
        input_stream=input_stream,
        output_stream=output_stream,
    )
    interpreter.run()
    return interpreter


def interpret_string(source: str, input_text: str = "", *, filename: str = "<string>") -> str:
    """Run ``source`` on ``input_text`` and return everything it printed."""
    interpreter = interpret(source, io.BytesIO(encode_input(input_text)), filename=filename)
    return interpreter.output_text()


class TracebackFormatter:
    def __init__(self, interpreter: Optional[Interpreter] = None) -> None:
        self.interpreter = interpreter

    def format_text(self, error: BFError, verbose: bool) -> str:
        lines = ["Traceback (most recent call last):"]
        location: Optional[SourceLocation] = getattr(error, "location", None)
        if location:
            lines.append(f"  File \"{location.file}\", line {location.line}, column {location.column}")
            if location.statement.strip():
                stripped = location.statement.lstrip()
                indent = len(location.statement) - len(stripped)
                lines.append(f"    {stripped.rstrip()}")
                lines.append("    " + " " * max(0, location.column - 1 - indent) + "^")
        else:
            lines.append("  <unknown location>")
        entry = self.interpreter.logger.last_entry() if self.interpreter else None
        if entry:
            lines.append(
                f"    State log index: {entry.step_index}  Instruction: '{entry.instruction}'"
                f"  Tape position: {entry.tape_pos}"
            )
        if verbose:
            window = self._tape_window()
            if window:
                lines.append(f"    Tape: {window}")
        lines.append(f"{error.__class__.__name__}: {error}")
        return "\n".join(lines)

    def to_json(self, error: BFError) -> str:
        location: Optional[SourceLocation] = getattr(error, "location", None)
        data: Dict[str, Any] = {
            "error": {
                "type": error.__class__.__name__,
                "message": str(error),
                "failing_step_index": getattr(error, "step_index", None),
            },
        }
        if location:
            data["source_location"] = {
                "file": location.file,
                "line": location.line,
                "column": location.column,
                "statement": location.statement,
            }
        if self.interpreter is not None:
            data["state"] = {
                "steps": self.interpreter.steps,
                "tape_pos": self.interpreter.tape_pos,
                "code_pos": self.interpreter.code_pos,
            }
            entry = self.interpreter.logger.last_entry()
            if entry:
                data["state"]["last_step"] = {
                    "step_index": entry.step_index,
                    "instruction": entry.instruction,
                    "tape_pos": entry.tape_pos,
                    "cell": entry.cell,
                }
        return json.dumps(data, indent=2)

    def _tape_window(self) -> str:
        if self.interpreter is None:
            return ""
        pos = self.interpreter.tape_pos
        start = max(0, pos - TAPE_WINDOW)
        cells = self.interpreter.tape.snapshot(start, pos + TAPE_WINDOW + 1)
        parts = []
        for offset, value in enumerate(cells):
            index = start + offset
            marker = "*" if index == pos else ""
            parts.append(f"{marker}{index}={value}")
        return ", ".join(parts)
