"""Tests for the blob codec HTTP API."""

from collections.abc import Sequence

import pytest
from fastapi.testclient import TestClient

from blob_codec.commitment.engine import CommitmentEngine
from blob_codec.commitment.sidecar import Sidecar
from blob_codec.errors import ThreadPanicked
from blob_codec.executor.pool import BlobWorkerPool
from blob_codec.protocol.constants import BYTES_PER_BLOB, MAX_BLOB_DATA_SIZE
from blob_codec.server import create_app


class PanickingCommitmentEngine:
    def build_sidecar(self, blobs: Sequence[bytes]) -> Sidecar:
        raise ThreadPanicked(RecursionError("maximum recursion depth exceeded"))


@pytest.fixture
def client(pool: BlobWorkerPool) -> TestClient:
    return TestClient(create_app(pool=pool))


class TestLimits:
    def test_limits(self, client: TestClient) -> None:
        response = client.get("/api/limits")
        assert response.status_code == 200
        assert response.json() == {
            "bytes_per_blob": BYTES_PER_BLOB,
            "field_elements_per_blob": 4096,
            "max_blob_data_size": MAX_BLOB_DATA_SIZE,
            "encoding_version": 0,
        }


class TestEncode:
    def test_encode_without_engine(self, client: TestClient) -> None:
        response = client.post("/api/blobs", content=bytes(MAX_BLOB_DATA_SIZE + 1))
        assert response.status_code == 200
        body = response.json()
        assert body["payload_length"] == MAX_BLOB_DATA_SIZE + 1
        assert body["blob_count"] == 2
        assert body["commitments"] == []

    def test_encode_with_engine(self, pool: BlobWorkerPool, engine: CommitmentEngine) -> None:
        client = TestClient(create_app(engine=engine, pool=pool))
        response = client.post("/api/blobs", content=b"hello blobs")

        assert response.status_code == 200
        body = response.json()
        assert body["blob_count"] == 1
        assert len(body["commitments"]) == 1
        assert body["commitments"][0].startswith("0x")
        assert len(body["commitments"][0]) == 2 + 96
        assert body["versioned_hashes"][0].startswith("0x01")


class TestErrors:
    def test_commitment_error_is_bad_request(
        self, pool: BlobWorkerPool, failing_engine: CommitmentEngine
    ) -> None:
        client = TestClient(create_app(engine=failing_engine, pool=pool))
        response = client.post("/api/blobs", content=b"data")

        assert response.status_code == 400
        assert response.json()["error"] == "CommitmentError"

    def test_thread_panic_is_server_error(self, pool: BlobWorkerPool) -> None:
        client = TestClient(create_app(engine=PanickingCommitmentEngine(), pool=pool))
        response = client.post("/api/blobs", content=b"data")

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "ThreadPanicked"
        assert "RecursionError" in body["detail"]

    def test_pool_survives_failed_request(self, pool: BlobWorkerPool) -> None:
        client = TestClient(create_app(engine=PanickingCommitmentEngine(), pool=pool))
        client.post("/api/blobs", content=b"data")

        assert pool.submit(lambda: "ok").result(10.0) == "ok"
