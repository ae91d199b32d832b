"""Build a blob sidecar from an arbitrary payload."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from blob_codec.codec.splitter import encode_blobs
from blob_codec.errors import BlobError, CommitmentError
from blob_codec.executor.pool import get_default_pool

if TYPE_CHECKING:
    from blob_codec.commitment.engine import CommitmentEngine
    from blob_codec.commitment.sidecar import Sidecar
    from blob_codec.executor.pool import BlobWorkerPool

logger = logging.getLogger(__name__)


def create_blob_sidecar_blocking(
    data: bytes | bytearray | memoryview,
    engine: CommitmentEngine,
) -> Sidecar:
    """Encode ``data`` into blobs and commit to them.

    Blocks the current thread until the sidecar is built; the KZG step needs a
    deep stack, so prefer :func:`create_blob_sidecar` from async code.
    """
    blobs = encode_blobs(data)

    try:
        sidecar = engine.build_sidecar(blobs)
    except BlobError:
        raise
    except Exception as e:
        raise CommitmentError(e) from e

    logger.debug("built sidecar with %d blobs from %d payload bytes", len(blobs), len(data))
    return sidecar


async def create_blob_sidecar(
    data: bytes | bytearray | memoryview,
    engine: CommitmentEngine,
    pool: BlobWorkerPool | None = None,
) -> Sidecar:
    """Build the sidecar on the blob worker pool without blocking the event loop."""
    pool = pool or get_default_pool()
    # Copy so the worker never sees the caller mutate its buffer
    return await pool.run(create_blob_sidecar_blocking, bytes(data), engine)
