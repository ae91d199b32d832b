"""Commitment engines that turn raw blobs into a sidecar.

The codec only produces blob bytes; computing commitments and proofs is the
engine's job. :class:`KzgCommitmentEngine` uses the c-kzg-4844 bindings and a
trusted setup file loaded once at construction.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import ckzg

from blob_codec.commitment.sidecar import Sidecar
from blob_codec.errors import CommitmentError

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


class CommitmentEngine(Protocol):
    def build_sidecar(self, blobs: Sequence[bytes]) -> Sidecar: ...


class KzgCommitmentEngine:
    """KZG commitments and blob proofs over BLS12-381 via ``ckzg``."""

    def __init__(self, trusted_setup_path: Path, precompute: int = 0) -> None:
        self.trusted_setup_path = trusted_setup_path
        self._settings: Any = ckzg.load_trusted_setup(str(trusted_setup_path), precompute)

    def commit(self, blob: bytes) -> tuple[bytes, bytes]:
        """Return ``(commitment, proof)`` for one blob."""
        commitment = ckzg.blob_to_kzg_commitment(blob, self._settings)
        proof = ckzg.compute_blob_kzg_proof(blob, commitment, self._settings)
        return commitment, proof

    def build_sidecar(self, blobs: Sequence[bytes]) -> Sidecar:
        commitments: list[bytes] = []
        proofs: list[bytes] = []
        try:
            for blob in blobs:
                commitment, proof = self.commit(bytes(blob))
                commitments.append(commitment)
                proofs.append(proof)
        except Exception as e:
            raise CommitmentError(e) from e

        return Sidecar(
            blobs=tuple(bytes(b) for b in blobs),
            commitments=tuple(commitments),
            proofs=tuple(proofs),
        )

    def verify(self, sidecar: Sidecar) -> bool:
        """Batch-verify every blob proof in ``sidecar``."""
        try:
            return ckzg.verify_blob_kzg_proof_batch(
                b"".join(sidecar.blobs),
                b"".join(sidecar.commitments),
                b"".join(sidecar.proofs),
                self._settings,
            )
        except Exception as e:
            raise CommitmentError(e) from e
