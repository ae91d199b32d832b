"""Recover the chunk that was packed into a blob."""

from __future__ import annotations

from blob_codec.errors import (
    InvalidBlobSize,
    InvalidFieldElement,
    InvalidLength,
    UnsupportedVersion,
)
from blob_codec.protocol.constants import (
    BYTES_PER_BLOB,
    BYTES_PER_FIELD_ELEMENT,
    CARRIER_SIZE,
    ENCODING_VERSION,
    HEADER_SIZE,
    HIGH_TWO_BITS,
    LOW_NIBBLE,
    LOW_SIX_BITS,
    MAX_BLOB_DATA_SIZE,
)

ROUND_SIZE = 4 * BYTES_PER_FIELD_ELEMENT
ROUND_DATA_SIZE = 4 * CARRIER_SIZE + 3


def decode_header(blob: bytes | bytearray | memoryview) -> tuple[int, int]:
    """Return ``(version, length)`` from the first field element."""
    if len(blob) != BYTES_PER_BLOB:
        raise InvalidBlobSize(len(blob))
    return blob[1], int.from_bytes(blob[2:5], "big")


def unpack(blob: bytes | bytearray | memoryview) -> bytes:
    """Inverse of :func:`blob_codec.codec.packer.pack`.

    Raises:
        InvalidBlobSize: if ``blob`` is not exactly one blob long.
        InvalidFieldElement: if any field element has a top bit set.
        UnsupportedVersion: for a version byte other than ``ENCODING_VERSION``.
        InvalidLength: if the length prefix exceeds ``MAX_BLOB_DATA_SIZE``.
    """
    view = memoryview(blob).cast("B")
    version, length = decode_header(view)

    for index in range(0, BYTES_PER_BLOB, BYTES_PER_FIELD_ELEMENT):
        if view[index] & HIGH_TWO_BITS:
            raise InvalidFieldElement(index // BYTES_PER_FIELD_ELEMENT, view[index])
    if version != ENCODING_VERSION:
        raise UnsupportedVersion(version)
    if length > MAX_BLOB_DATA_SIZE:
        raise InvalidLength(length)

    out = bytearray()
    target = length + HEADER_SIZE
    base = 0
    while len(out) < target:
        h0, h1, h2, h3 = (view[base + k * BYTES_PER_FIELD_ELEMENT] for k in range(4))
        x = (h0 & LOW_SIX_BITS) | ((h1 & 0b0011_0000) << 2)
        y = (h1 & LOW_NIBBLE) | ((h3 & LOW_NIBBLE) << 4)
        z = (h2 & LOW_SIX_BITS) | ((h3 & 0b0011_0000) << 2)

        for k, extra in enumerate((x, y, z, None)):
            start = base + k * BYTES_PER_FIELD_ELEMENT + 1
            out += view[start : start + CARRIER_SIZE]
            if extra is not None:
                out.append(extra)
        base += ROUND_SIZE

    # The first round's carrier starts with the version and length prefix
    return bytes(out[HEADER_SIZE:target])
