"""Tape storage and byte-stream wiring shared by both execution engines."""

from __future__ import annotations
import io
import numpy as np
from dataclasses import dataclass, field
from typing import IO, Any, Optional
from numpy.typing import NDArray


EOF_BYTE = 255
CELL_MASK = 0xFF
INITIAL_CAPACITY = 1024

# Input text enters as UTF-8 bytes. Output bytes leave as Latin-1, which maps
# 0..255 onto the first 256 code points one to one.
INPUT_ENCODING = "utf-8"
OUTPUT_ENCODING = "latin-1"


def encode_input(text: str) -> bytes:
    return text.encode(INPUT_ENCODING, errors="surrogatepass")


def decode_output(data: bytes) -> str:
    return data.decode(OUTPUT_ENCODING)


def _fresh_cells() -> NDArray[np.uint8]:
    return np.zeros(INITIAL_CAPACITY, dtype=np.uint8)


@dataclass
class Tape:
    cells: NDArray[np.uint8] = field(default_factory=_fresh_cells, repr=False)
    extent: int = 0

    def __len__(self) -> int:
        return self.extent

    def _grow(self, pos: int) -> None:
        if pos < 0:
            raise IndexError(f"tape position {pos} is left of the first cell")
        capacity = len(self.cells)
        if pos >= capacity:
            while pos >= capacity:
                capacity *= 2
            grown = np.zeros(capacity, dtype=np.uint8)
            grown[: len(self.cells)] = self.cells
            self.cells = grown
        if pos >= self.extent:
            self.extent = pos + 1

    def read_cell(self, pos: int) -> int:
        self._grow(pos)
        return int(self.cells[pos])

    def peek_cell(self, pos: int) -> int:
        # Inspection only: never grows the tape.
        if 0 <= pos < self.extent:
            return int(self.cells[pos])
        return 0

    def write_cell(self, pos: int, value: int) -> None:
        self._grow(pos)
        self.cells[pos] = value & CELL_MASK

    def increment(self, pos: int) -> None:
        self._grow(pos)
        self.cells[pos] = (int(self.cells[pos]) + 1) & CELL_MASK

    def decrement(self, pos: int) -> None:
        self._grow(pos)
        self.cells[pos] = (int(self.cells[pos]) - 1) & CELL_MASK

    def snapshot(self, start: int = 0, stop: Optional[int] = None) -> bytes:
        if stop is None or stop > self.extent:
            stop = self.extent
        start = max(0, start)
        if start >= stop:
            return b""
        return self.cells[start:stop].tobytes()


class StreamIO:
    """Byte-at-a-time view over an input source and an output sink.

    Either stream may be binary or text. Characters read from a text stream
    are fed to the program as their UTF-8 bytes, one byte per read, the same
    way ``encode_input`` prepares a string. Text output maps each byte to one
    Latin-1 character. Without an output stream the written bytes are
    collected in memory.
    """

    def __init__(self, input_stream: Optional[IO[Any]] = None, output_stream: Optional[IO[Any]] = None) -> None:
        self.input_stream = input_stream
        self._pending = b""
        self._buffer: Optional[io.BytesIO] = None
        if output_stream is None:
            self._buffer = io.BytesIO()
            output_stream = self._buffer
        self.output_stream = output_stream
        self._text_output = isinstance(output_stream, io.TextIOBase)

    def read_input(self) -> int:
        if self._pending:
            byte = self._pending[0]
            self._pending = self._pending[1:]
            return byte
        if self.input_stream is None:
            return EOF_BYTE
        data = self.input_stream.read(1)
        if not data:
            return EOF_BYTE
        if isinstance(data, str):
            encoded = encode_input(data)
            self._pending = encoded[1:]
            return encoded[0]
        return data[0]

    def write_output(self, byte: int) -> None:
        if self._text_output:
            self.output_stream.write(chr(byte))
        else:
            self.output_stream.write(bytes((byte,)))

    def flush(self) -> None:
        flush = getattr(self.output_stream, "flush", None)
        if flush is not None:
            flush()

    def getvalue(self) -> bytes:
        if self._buffer is None:
            raise ValueError("output is written to an external stream")
        return self._buffer.getvalue()
