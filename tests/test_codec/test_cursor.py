"""Tests for the blob read and write cursors."""

import pytest

from blob_codec.codec.cursor import BlobWriter, ChunkReader
from blob_codec.protocol.constants import BYTES_PER_BLOB


class TestChunkReader:
    def test_reads_bytes_in_order(self) -> None:
        reader = ChunkReader(b"\x01\x02")
        assert reader.read_byte() == 1
        assert reader.read_byte() == 2
        assert reader.exhausted

    def test_reads_zero_past_end(self) -> None:
        reader = ChunkReader(b"\x07")
        reader.read_byte()
        assert reader.read_byte() == 0
        assert reader.offset == 1

    def test_carrier_is_zero_padded(self) -> None:
        reader = ChunkReader(b"abc")
        carrier = reader.read_carrier()
        assert carrier == b"abc" + bytes(28)
        assert reader.offset == 3

    def test_carrier_takes_31_bytes(self) -> None:
        reader = ChunkReader(bytes(range(40)))
        assert reader.read_carrier() == bytes(range(31))
        assert reader.offset == 31

    def test_read_into_respects_start(self) -> None:
        buf = bytearray(8)
        reader = ChunkReader(b"\xaa" * 10)
        assert reader.read_into(buf, 5) == 3
        assert buf == bytearray(5) + b"\xaa" * 3
        assert reader.offset == 3

    def test_accepts_memoryview(self) -> None:
        reader = ChunkReader(memoryview(b"xyz")[1:])
        assert len(reader) == 2
        assert reader.read_byte() == ord("y")


class TestBlobWriter:
    def test_writes_field_element(self) -> None:
        writer = BlobWriter()
        writer.write_field_element(0x3F, b"\x01" * 31)
        blob = writer.finish()
        assert len(blob) == BYTES_PER_BLOB
        assert blob[0] == 0x3F
        assert blob[1:32] == b"\x01" * 31
        assert writer.offset == 32

    def test_unwritten_blob_is_zero(self) -> None:
        assert BlobWriter().finish() == bytes(BYTES_PER_BLOB)

    def test_header_must_be_aligned(self) -> None:
        writer = BlobWriter()
        writer.write_header_byte(0)
        with pytest.raises(AssertionError, match="invalid byte write offset"):
            writer.write_header_byte(0)

    def test_carrier_must_follow_header(self) -> None:
        writer = BlobWriter()
        with pytest.raises(AssertionError, match="invalid bytes31 write offset"):
            writer.write_carrier(bytes(31))

    def test_header_rejects_high_bits(self) -> None:
        writer = BlobWriter()
        with pytest.raises(AssertionError, match="invalid 6-bit value"):
            writer.write_header_byte(0x40)

    def test_carrier_must_be_31_bytes(self) -> None:
        writer = BlobWriter()
        writer.write_header_byte(0)
        with pytest.raises(AssertionError, match="invalid carrier size"):
            writer.write_carrier(bytes(30))
