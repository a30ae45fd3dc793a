import io

import pytest

from tape import EOF_BYTE, INITIAL_CAPACITY, StreamIO, Tape, decode_output, encode_input


def test_fresh_cells_read_as_zero_and_extend_tape():
    tape = Tape()
    assert len(tape) == 0
    assert tape.read_cell(5) == 0
    assert len(tape) == 6


def test_tape_grows_past_initial_capacity():
    tape = Tape()
    far = INITIAL_CAPACITY * 4 + 3
    tape.write_cell(far, 7)
    assert tape.read_cell(far) == 7
    assert tape.read_cell(far - 1) == 0
    assert len(tape) == far + 1


def test_extent_never_shrinks():
    tape = Tape()
    tape.read_cell(10)
    tape.read_cell(2)
    assert len(tape) == 11


def test_increment_wraps_to_zero():
    tape = Tape()
    tape.write_cell(0, 255)
    tape.increment(0)
    assert tape.read_cell(0) == 0


def test_decrement_wraps_to_255():
    tape = Tape()
    tape.decrement(3)
    assert tape.read_cell(3) == 255


def test_write_cell_reduces_modulo_256():
    tape = Tape()
    tape.write_cell(0, 300)
    assert tape.read_cell(0) == 44


def test_negative_position_is_rejected():
    with pytest.raises(IndexError):
        Tape().read_cell(-1)


def test_peek_does_not_grow_the_tape():
    tape = Tape()
    assert tape.peek_cell(10) == 0
    assert tape.peek_cell(-1) == 0
    assert len(tape) == 0


def test_snapshot_covers_touched_cells():
    tape = Tape()
    for pos in range(3):
        tape.write_cell(pos, pos + 1)
    assert tape.snapshot() == b"\x01\x02\x03"
    assert tape.snapshot(1, 100) == b"\x02\x03"
    assert tape.snapshot(5, 9) == b""


def test_read_input_returns_sentinel_at_end_of_stream():
    streams = StreamIO(io.BytesIO(b"A"))
    assert streams.read_input() == 65
    assert streams.read_input() == EOF_BYTE
    assert streams.read_input() == EOF_BYTE


def test_zero_byte_is_data_not_eof():
    streams = StreamIO(io.BytesIO(b"\x00"))
    assert streams.read_input() == 0
    assert streams.read_input() == EOF_BYTE


def test_missing_input_stream_reads_as_eof():
    assert StreamIO().read_input() == EOF_BYTE


def test_text_input_reads_utf8_bytes_and_text_output_is_latin1():
    out = io.StringIO()
    streams = StreamIO(io.StringIO("\xe9"), out)
    first, second = streams.read_input(), streams.read_input()
    assert (first, second) == (0xC3, 0xA9)
    assert streams.read_input() == EOF_BYTE
    streams.write_output(first)
    streams.write_output(second)
    assert out.getvalue() == "\xc3\xa9"


def test_text_stream_and_encoded_string_feed_the_same_bytes():
    text = "a€!"
    from_text = StreamIO(io.StringIO(text))
    from_bytes = StreamIO(io.BytesIO(encode_input(text)))
    expected = [0x61, 0xE2, 0x82, 0xAC, 0x21, EOF_BYTE]
    assert [from_text.read_input() for _ in expected] == expected
    assert [from_bytes.read_input() for _ in expected] == expected


def test_encode_input_accepts_any_string():
    assert encode_input("€") == b"\xe2\x82\xac"
    assert encode_input("\ud800") == b"\xed\xa0\x80"


def test_output_collects_in_memory_without_sink():
    streams = StreamIO()
    streams.write_output(72)
    streams.write_output(105)
    assert streams.getvalue() == b"Hi"


def test_getvalue_unavailable_for_external_sink():
    streams = StreamIO(None, io.BytesIO())
    with pytest.raises(ValueError):
        streams.getvalue()


def test_output_decoding_keeps_every_byte_value():
    data = bytes(range(256))
    assert [ord(ch) for ch in decode_output(data)] == list(data)
