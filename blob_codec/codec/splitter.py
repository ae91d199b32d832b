"""Split arbitrary payloads across as many blobs as they need."""

from __future__ import annotations

from typing import TYPE_CHECKING

from blob_codec.codec.packer import pack
from blob_codec.codec.unpacker import unpack
from blob_codec.protocol.constants import MAX_BLOB_DATA_SIZE

if TYPE_CHECKING:
    from collections.abc import Iterable


def split_chunks(payload: bytes | bytearray | memoryview) -> list[memoryview]:
    """Slice ``payload`` end to end into chunks of at most one blob's capacity.

    An empty payload yields no chunks.
    """
    view = memoryview(payload).cast("B")
    return [
        view[start : start + MAX_BLOB_DATA_SIZE]
        for start in range(0, len(view), MAX_BLOB_DATA_SIZE)
    ]


def blobs_required(length: int) -> int:
    return -(-length // MAX_BLOB_DATA_SIZE)


def encode_blobs(payload: bytes | bytearray | memoryview) -> list[bytes]:
    """Pack each chunk of ``payload`` into its own blob, in input order."""
    return [pack(chunk) for chunk in split_chunks(payload)]


def decode_blobs(blobs: Iterable[bytes | bytearray | memoryview]) -> bytes:
    return b"".join(unpack(blob) for blob in blobs)
