"""brainfuck entry point: run built-in programs, interpret or compile source."""

from __future__ import annotations
import argparse
import sys
from typing import IO, Any, List, Optional, Tuple

from codegen import CompiledProgram, PythonGenerator
from hooks import StepContext, build_default_services
from interpreter import BFRuntimeError, Interpreter, TracebackFormatter
from lexer import BFParseError
from parser import translate
from programs import BUILTIN_PROGRAMS, load_program


VERSION = "brainfuck 1.0"

# Every byte is a legal source character; anything but the eight
# instructions is a comment, whatever its encoding.
SOURCE_ENCODING = "latin-1"


def _stdin() -> IO[Any]:
    return getattr(sys.stdin, "buffer", sys.stdin)


def _stdout() -> IO[Any]:
    return getattr(sys.stdout, "buffer", sys.stdout)


def _decode_source(data: Any) -> str:
    if isinstance(data, str):
        return data
    return data.decode(SOURCE_ENCODING)


def _load_source(args: argparse.Namespace) -> Optional[Tuple[str, str]]:
    if args.source_mode:
        if args.program is None:
            print("-source requires a program string", file=sys.stderr)
            return None
        return args.program, "<string>"
    if args.program is None:
        return _decode_source(_stdin().read()), "<stdin>"
    filename = args.program
    try:
        with open(filename, "rb") as handle:
            return _decode_source(handle.read()), filename
    except OSError as exc:
        print(f"Failed to read {filename}: {exc}", file=sys.stderr)
        return None


def _print_trace(interpreter: Interpreter, ctx: StepContext) -> None:
    cell = interpreter.tape.peek_cell(ctx.tape_pos)
    print(
        f"[trace] step {ctx.step_index}: '{ctx.instruction}' at {ctx.code_pos}, tape[{ctx.tape_pos}]={cell}",
        file=sys.stderr,
    )


def _interpret(source_text: str, filename: str, *, verbose: bool = False, traceback_json: bool = False, trace: int = 0) -> int:
    services = build_default_services()
    if trace:
        services.hook_registry.add_step_rule(name="trace", every_n=trace, handler=_print_trace)
    interpreter = Interpreter(
        source=source_text,
        filename=filename,
        verbose=verbose,
        services=services,
        input_stream=_stdin(),
        output_stream=_stdout(),
    )
    try:
        interpreter.run()
    except BFParseError as error:
        print(f"ParseError: {error}", file=sys.stderr)
        return 1
    except BFRuntimeError as error:
        formatter = TracebackFormatter(interpreter)
        print(formatter.format_text(error, verbose=verbose), file=sys.stderr)
        if traceback_json:
            print(formatter.to_json(error), file=sys.stderr)
        return 1
    return 0


def _translate(source_text: str, filename: str) -> Optional[str]:
    try:
        block = translate(source_text, filename)
    except BFParseError as error:
        print(f"ParseError: {error}", file=sys.stderr)
        return None
    return PythonGenerator().generate(block)


def _run_compiled(generated: str, filename: str) -> int:
    program = CompiledProgram(generated, filename=f"<brainfuck {filename}>")
    try:
        program.run(_stdin(), _stdout())
    except BFRuntimeError as error:
        print(TracebackFormatter().format_text(error, verbose=False), file=sys.stderr)
        return 1
    return 0


def _cmd_run(args: argparse.Namespace) -> int:
    try:
        source_text = load_program(args.name)
    except KeyError as exc:
        print(exc.args[0], file=sys.stderr)
        return 1
    filename = f"<{args.name}>"
    if args.interpret:
        return _interpret(source_text, filename)
    generated = _translate(source_text, filename)
    if generated is None:
        return 1
    return _run_compiled(generated, filename)


def _cmd_interpret(args: argparse.Namespace) -> int:
    loaded = _load_source(args)
    if loaded is None:
        return 1
    source_text, filename = loaded
    return _interpret(
        source_text,
        filename,
        verbose=args.verbose,
        traceback_json=args.traceback_json,
        trace=args.trace,
    )


def _cmd_compile(args: argparse.Namespace) -> int:
    loaded = _load_source(args)
    if loaded is None:
        return 1
    source_text, filename = loaded
    generated = _translate(source_text, filename)
    if generated is None:
        return 1
    if args.run:
        return _run_compiled(generated, filename)
    if args.emit:
        try:
            with open(args.emit, "w", encoding="utf-8") as handle:
                handle.write(generated)
        except OSError as exc:
            print(f"Failed to write {args.emit}: {exc}", file=sys.stderr)
            return 1
        return 0
    sys.stdout.write(generated)
    return 0


def _cmd_list(_args: argparse.Namespace) -> int:
    for name in sorted(BUILTIN_PROGRAMS):
        print(name)
    return 0


def _positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError("must be >= 1")
    return value


def _add_program_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("program", nargs="?", help="Source file path, literal source with -source, or stdin when omitted")
    parser.add_argument("-source", "--source", dest="source_mode", action="store_true", help="Treat program argument as literal source text")


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="brainfuck", description="brainfuck interpreter and compiler")
    parser.add_argument("-v", "--version", action="version", version=VERSION)
    commands = parser.add_subparsers(dest="command", required=True)

    run = commands.add_parser("run", help="Run a built-in program")
    run.add_argument("name", help="Built-in program name (see 'list')")
    run.add_argument("--interpret", action="store_true", help="Use the interpreter instead of the compiled form")
    run.set_defaults(handler=_cmd_run)

    interpret = commands.add_parser("interpret", help="Interpret a program")
    _add_program_arguments(interpret)
    interpret.add_argument("-verbose", "--verbose", dest="verbose", action="store_true", help="Record every step and show the tape in tracebacks")
    interpret.add_argument("--traceback-json", action="store_true", help="Also emit JSON traceback")
    interpret.add_argument("--trace", type=_positive_int, default=0, metavar="N", help="Print machine state to stderr every N steps")
    interpret.set_defaults(handler=_cmd_interpret)

    compile_ = commands.add_parser("compile", help="Translate a program to Python")
    _add_program_arguments(compile_)
    compile_.add_argument("--emit", metavar="PATH", help="Write the generated Python to PATH instead of stdout")
    compile_.add_argument("--run", action="store_true", help="Execute the compiled program instead of printing it")
    compile_.set_defaults(handler=_cmd_compile)

    listing = commands.add_parser("list", help="List built-in programs")
    listing.set_defaults(handler=_cmd_list)
    return parser


def run_cli(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    return args.handler(args)


if __name__ == "__main__":
    raise SystemExit(run_cli())
