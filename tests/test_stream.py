"""Tests for the typed byte stream."""

import io
import struct

import pytest

from ddsdecoder.errors import DDSError, TruncatedError
from ddsdecoder.stream import TypedStream


class _Trickle(io.RawIOBase):
    """File object that returns at most one byte per read call."""

    def __init__(self, data):
        self._data = io.BytesIO(data)

    def readable(self):
        return True

    def read(self, size=-1):
        return self._data.read(min(size, 1))


class TestTypedStream:
    def test_read_exact_bytes(self):
        stream = TypedStream(b"abcdef")
        assert stream.read(4) == b"abcd"
        assert stream.read(2) == b"ef"
        assert stream.tell() == 6

    def test_read_zero_bytes(self):
        stream = TypedStream(b"abc")
        assert stream.read(0) == b""
        assert stream.tell() == 0

    def test_short_read_raises_truncated(self):
        stream = TypedStream(b"abc")
        with pytest.raises(TruncatedError) as excinfo:
            stream.read(4, "field")
        assert excinfo.value.expected == 4
        assert excinfo.value.actual == 3
        assert "field" in str(excinfo.value)

    def test_truncated_is_eof_and_dds_error(self):
        stream = TypedStream(b"")
        with pytest.raises(EOFError):
            stream.uint32()
        assert issubclass(TruncatedError, DDSError)

    def test_uint32_little_endian(self):
        stream = TypedStream(struct.pack("<I", 0x20534444))
        assert stream.uint32() == 0x20534444

    def test_array(self):
        stream = TypedStream(struct.pack("<3I", 1, 2, 0xFFFFFFFF))
        assert stream.array(3) == [1, 2, 0xFFFFFFFF]
        assert stream.tell() == 12

    def test_array_other_width(self):
        stream = TypedStream(struct.pack("<2H", 7, 9))
        assert stream.array(2, "H") == [7, 9]

    def test_file_object_partial_reads_are_joined(self):
        stream = TypedStream(_Trickle(b"0123456789"))
        assert stream.read(10) == b"0123456789"

    def test_negative_size_rejected(self):
        with pytest.raises(ValueError):
            TypedStream(b"abc").read(-1)

    def test_accepts_bytearray_and_memoryview(self):
        assert TypedStream(bytearray(b"xy")).read(2) == b"xy"
        assert TypedStream(memoryview(b"xy")).read(2) == b"xy"

    def test_field_name_is_optional(self):
        with pytest.raises(TruncatedError) as excinfo:
            TypedStream(b"ab").uint32()
        assert excinfo.value.what is None
        assert "for" not in str(excinfo.value)
