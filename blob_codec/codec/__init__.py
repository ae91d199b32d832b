"""Blob codec: pack payload bytes into field-element-safe blobs and back."""

from blob_codec.codec.packer import encode_header, pack
from blob_codec.codec.splitter import blobs_required, decode_blobs, encode_blobs, split_chunks
from blob_codec.codec.unpacker import decode_header, unpack

__all__ = [
    "blobs_required",
    "decode_blobs",
    "decode_header",
    "encode_blobs",
    "encode_header",
    "pack",
    "split_chunks",
    "unpack",
]
