"""Sequential read and write cursors used by the blob packer.

The writer owns the 32-byte alignment rules of a blob: every field element is
written as one header byte followed by a 31-byte carrier, so header writes must
land on a field element boundary and carrier writes one byte past it. A
violation means the packing loop itself is wrong, so it fails an assertion
rather than raising a recoverable error.
"""

from __future__ import annotations

from blob_codec.protocol.constants import (
    BYTES_PER_BLOB,
    BYTES_PER_FIELD_ELEMENT,
    CARRIER_SIZE,
    HIGH_TWO_BITS,
)

_ZERO_CARRIER = bytes(CARRIER_SIZE)


class ChunkReader:
    """Reads a chunk front to back, yielding zeros past the end of input."""

    __slots__ = ("_data", "offset")

    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        self._data = memoryview(data).cast("B")
        self.offset = 0

    def __len__(self) -> int:
        return len(self._data)

    @property
    def exhausted(self) -> bool:
        return self.offset >= len(self._data)

    def read_byte(self) -> int:
        if self.offset < len(self._data):
            b = self._data[self.offset]
            self.offset += 1
            return b
        return 0

    def read_into(self, buf: bytearray, start: int = 0) -> int:
        """Copy as many bytes as fit into ``buf[start:]``, returning the count."""
        n = min(len(buf) - start, len(self._data) - self.offset)
        if n <= 0:
            return 0
        buf[start : start + n] = self._data[self.offset : self.offset + n]
        self.offset += n
        return n

    def read_carrier(self) -> bytes:
        """Read the next 31 bytes, zero padded past the end of input."""
        if self.exhausted:
            return _ZERO_CARRIER
        buf = bytearray(CARRIER_SIZE)
        self.read_into(buf)
        return bytes(buf)


class BlobWriter:
    """Fills a fresh blob buffer one field element at a time."""

    __slots__ = ("_out", "offset")

    def __init__(self) -> None:
        self._out = bytearray(BYTES_PER_BLOB)
        self.offset = 0

    def write_header_byte(self, v: int) -> None:
        assert self.offset % BYTES_PER_FIELD_ELEMENT == 0, (
            f"blob encoding: invalid byte write offset: {self.offset}"
        )
        assert v & HIGH_TWO_BITS == 0, f"blob encoding: invalid 6-bit value: {v:08b}"

        self._out[self.offset] = v
        self.offset += 1

    def write_carrier(self, buf: bytes | bytearray) -> None:
        assert self.offset % BYTES_PER_FIELD_ELEMENT == 1, (
            f"blob encoding: invalid bytes31 write offset: {self.offset}"
        )
        assert len(buf) == CARRIER_SIZE, f"blob encoding: invalid carrier size: {len(buf)}"

        self._out[self.offset : self.offset + CARRIER_SIZE] = buf
        self.offset += CARRIER_SIZE

    def write_field_element(self, header: int, carrier: bytes | bytearray) -> None:
        self.write_header_byte(header)
        self.write_carrier(carrier)

    def finish(self) -> bytes:
        return bytes(self._out)
