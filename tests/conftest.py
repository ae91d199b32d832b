"""Shared pytest fixtures for blob codec tests."""

from collections.abc import Iterator, Sequence
from hashlib import sha384
from random import Random

import pytest

from blob_codec.commitment.sidecar import Sidecar
from blob_codec.config import CodecConfig
from blob_codec.executor.pool import BlobWorkerPool


class FakeCommitmentEngine:
    """Deterministic stand-in for the KZG engine (48-byte hash digests)."""

    def __init__(self) -> None:
        self.calls = 0

    def build_sidecar(self, blobs: Sequence[bytes]) -> Sidecar:
        self.calls += 1
        return Sidecar(
            blobs=tuple(blobs),
            commitments=tuple(sha384(b).digest() for b in blobs),
            proofs=tuple(sha384(b"proof" + b).digest() for b in blobs),
        )


class FailingCommitmentEngine:
    def build_sidecar(self, blobs: Sequence[bytes]) -> Sidecar:
        raise ValueError("invalid blob")


@pytest.fixture
def pool() -> Iterator[BlobWorkerPool]:
    """Create an isolated two-worker pool, shut down after the test."""
    workers = BlobWorkerPool(CodecConfig())
    yield workers
    workers.shutdown()


@pytest.fixture
def engine() -> FakeCommitmentEngine:
    return FakeCommitmentEngine()


@pytest.fixture
def failing_engine() -> FailingCommitmentEngine:
    return FailingCommitmentEngine()


@pytest.fixture
def rng() -> Random:
    return Random(42)
