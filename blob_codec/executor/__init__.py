"""Blocking-offload executor for blob encoding."""

from blob_codec.executor.pool import BlobWorkerPool, get_default_pool

__all__ = [
    "BlobWorkerPool",
    "get_default_pool",
]
