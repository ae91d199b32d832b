"""Pack a chunk of payload bytes into one blob.

The encoding works in rounds. Each round writes 4 field elements (128 bytes)
from up to 127 bytes of input: four 31-byte carriers plus three single bytes
(x, y, z) whose low bits become header bytes. The two high bits of x and z and
the high nibble of y cannot live in their own header byte without breaking the
field element bound, so they are moved into the headers of the second and
fourth elements:

    fe1 header = x & 0x3F
    fe2 header = (y & 0x0F) | ((x & 0xC0) >> 2)
    fe3 header = z & 0x3F
    fe4 header = ((z & 0xC0) >> 2) | ((y & 0xF0) >> 4)

Round 0 reserves the first 4 carrier bytes of the first element for the
version byte and the 3-byte big-endian chunk length.

This is bit-for-bit the layout of op-service/eth/blob.go in the Optimism
monorepo.
"""

from __future__ import annotations

from blob_codec.codec.cursor import BlobWriter, ChunkReader
from blob_codec.errors import DataDidNotFit, InputTooLarge
from blob_codec.protocol.constants import (
    CARRIER_SIZE,
    ENCODING_VERSION,
    HEADER_SIZE,
    HIGH_NIBBLE,
    HIGH_TWO_BITS,
    LOW_NIBBLE,
    LOW_SIX_BITS,
    MAX_BLOB_DATA_SIZE,
    ROUNDS,
)


def encode_header(length: int) -> bytes:
    """Version byte followed by the 3-byte big-endian length."""
    return bytes((ENCODING_VERSION,)) + length.to_bytes(3, "big")


def pack(data: bytes | bytearray | memoryview) -> bytes:
    """Encode ``data`` into a single 131072-byte blob.

    Raises:
        InputTooLarge: if ``data`` is longer than ``MAX_BLOB_DATA_SIZE``.
        DataDidNotFit: if input remains after the last round.
    """
    reader = ChunkReader(data)
    if len(reader) > MAX_BLOB_DATA_SIZE:
        raise InputTooLarge(len(reader))

    writer = BlobWriter()

    for round_ in range(ROUNDS):
        if reader.exhausted:
            break

        # First field element: 6 bits of x, plus the header in round 0
        if round_ == 0:
            buf = bytearray(CARRIER_SIZE)
            buf[:HEADER_SIZE] = encode_header(len(reader))
            reader.read_into(buf, HEADER_SIZE)
            carrier = bytes(buf)
        else:
            carrier = reader.read_carrier()
        x = reader.read_byte()
        writer.write_field_element(x & LOW_SIX_BITS, carrier)

        # Second field element: low nibble of y, high bits of x
        carrier = reader.read_carrier()
        y = reader.read_byte()
        writer.write_field_element((y & LOW_NIBBLE) | ((x & HIGH_TWO_BITS) >> 2), carrier)

        # Third field element: 6 bits of z
        carrier = reader.read_carrier()
        z = reader.read_byte()
        writer.write_field_element(z & LOW_SIX_BITS, carrier)

        # Fourth field element: high bits of z, high nibble of y
        carrier = reader.read_carrier()
        writer.write_field_element(((z & HIGH_TWO_BITS) >> 2) | ((y & HIGH_NIBBLE) >> 4), carrier)

    if not reader.exhausted:
        raise DataDidNotFit(reader.offset, len(reader))

    return writer.finish()
