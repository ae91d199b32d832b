"""Blob sidecar: blobs together with their KZG commitments and proofs."""

from __future__ import annotations

from dataclasses import dataclass, field
from hashlib import sha256

from blob_codec.protocol.constants import VERSIONED_HASH_VERSION_KZG


def kzg_to_versioned_hash(commitment: bytes) -> bytes:
    """EIP-4844 versioned hash: version byte followed by sha256(commitment)[1:]."""
    return bytes((VERSIONED_HASH_VERSION_KZG,)) + sha256(commitment).digest()[1:]


@dataclass(frozen=True)
class Sidecar:
    """Ordered blobs with one commitment and one proof per blob."""

    blobs: tuple[bytes, ...] = field(repr=False)
    commitments: tuple[bytes, ...]
    proofs: tuple[bytes, ...] = field(repr=False)

    def __post_init__(self) -> None:
        if not len(self.blobs) == len(self.commitments) == len(self.proofs):
            raise ValueError(
                f"sidecar length mismatch: blobs={len(self.blobs)} "
                f"commitments={len(self.commitments)} proofs={len(self.proofs)}"
            )

    def __len__(self) -> int:
        return len(self.blobs)

    def versioned_hashes(self) -> list[bytes]:
        return [kzg_to_versioned_hash(c) for c in self.commitments]
