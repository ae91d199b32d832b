"""Blob codec: pack payloads into EIP-4844 blobs and build their sidecars."""

from blob_codec.codec import decode_blobs, encode_blobs, pack, split_chunks, unpack
from blob_codec.commitment import CommitmentEngine, KzgCommitmentEngine, Sidecar
from blob_codec.config import CodecConfig
from blob_codec.errors import (
    BlobError,
    CommitmentError,
    DataDidNotFit,
    InputTooLarge,
    ThreadPanicked,
)
from blob_codec.executor import BlobWorkerPool, get_default_pool
from blob_codec.protocol.constants import BYTES_PER_BLOB, MAX_BLOB_DATA_SIZE
from blob_codec.sidecar import create_blob_sidecar, create_blob_sidecar_blocking

__all__ = [
    "BYTES_PER_BLOB",
    "MAX_BLOB_DATA_SIZE",
    "BlobError",
    "BlobWorkerPool",
    "CodecConfig",
    "CommitmentEngine",
    "CommitmentError",
    "DataDidNotFit",
    "InputTooLarge",
    "KzgCommitmentEngine",
    "Sidecar",
    "ThreadPanicked",
    "create_blob_sidecar",
    "create_blob_sidecar_blocking",
    "decode_blobs",
    "encode_blobs",
    "get_default_pool",
    "pack",
    "split_chunks",
    "unpack",
]
