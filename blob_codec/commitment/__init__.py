"""Commitment engine boundary and the sidecar it produces."""

from blob_codec.commitment.engine import CommitmentEngine, KzgCommitmentEngine
from blob_codec.commitment.sidecar import Sidecar, kzg_to_versioned_hash

__all__ = [
    "CommitmentEngine",
    "KzgCommitmentEngine",
    "Sidecar",
    "kzg_to_versioned_hash",
]
