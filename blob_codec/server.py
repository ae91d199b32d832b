"""FastAPI service that encodes payloads into blobs off the event loop."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from blob_codec.codec.splitter import encode_blobs
from blob_codec.commitment.engine import KzgCommitmentEngine
from blob_codec.config import CodecConfig
from blob_codec.errors import BlobError, ThreadPanicked
from blob_codec.executor.pool import BlobWorkerPool, get_default_pool
from blob_codec.protocol.constants import (
    BYTES_PER_BLOB,
    ENCODING_VERSION,
    FIELD_ELEMENTS_PER_BLOB,
    MAX_BLOB_DATA_SIZE,
)
from blob_codec.sidecar import create_blob_sidecar

if TYPE_CHECKING:
    from blob_codec.commitment.engine import CommitmentEngine

logger = logging.getLogger(__name__)


class BlobLimits(BaseModel):
    bytes_per_blob: int
    field_elements_per_blob: int
    max_blob_data_size: int
    encoding_version: int


class EncodeResponse(BaseModel):
    payload_length: int
    blob_count: int
    commitments: list[str]
    versioned_hashes: list[str]


def create_app(
    config: CodecConfig | None = None,
    engine: CommitmentEngine | None = None,
    pool: BlobWorkerPool | None = None,
) -> FastAPI:
    config = config or CodecConfig()
    if engine is None and config.trusted_setup_path is not None:
        engine = KzgCommitmentEngine(config.trusted_setup_path, config.precompute)
    workers = pool or get_default_pool()

    app = FastAPI(title="Blob Codec API")

    @app.exception_handler(BlobError)
    async def blob_error_handler(request: Request, exc: BlobError) -> JSONResponse:
        status = 500 if isinstance(exc, ThreadPanicked) else 400
        logger.info("%s %s failed: %s", request.method, request.url.path, exc)
        return JSONResponse(
            status_code=status,
            content={"error": type(exc).__name__, "detail": str(exc)},
        )

    @app.get("/api/limits")
    async def get_limits() -> BlobLimits:
        return BlobLimits(
            bytes_per_blob=BYTES_PER_BLOB,
            field_elements_per_blob=FIELD_ELEMENTS_PER_BLOB,
            max_blob_data_size=MAX_BLOB_DATA_SIZE,
            encoding_version=ENCODING_VERSION,
        )

    @app.post("/api/blobs")
    async def encode(request: Request) -> EncodeResponse:
        payload = await request.body()

        if engine is None:
            blobs = await workers.run(encode_blobs, payload)
            return EncodeResponse(
                payload_length=len(payload),
                blob_count=len(blobs),
                commitments=[],
                versioned_hashes=[],
            )

        sidecar = await create_blob_sidecar(payload, engine, workers)
        return EncodeResponse(
            payload_length=len(payload),
            blob_count=len(sidecar),
            commitments=["0x" + c.hex() for c in sidecar.commitments],
            versioned_hashes=["0x" + h.hex() for h in sidecar.versioned_hashes()],
        )

    return app


def run_server(config: CodecConfig, host: str = "0.0.0.0", port: int = 8000) -> None:
    import uvicorn

    app = create_app(config, pool=BlobWorkerPool(config))
    print(f"Starting blob codec server at http://{host}:{port}")
    if config.trusted_setup_path is None:
        print("No trusted setup configured; commitments disabled")
    uvicorn.run(app, host=host, port=port)


def main() -> None:
    import argparse
    from dataclasses import replace
    from pathlib import Path

    parser = argparse.ArgumentParser(description="Blob codec HTTP server")
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to TOML configuration file",
    )
    parser.add_argument(
        "--trusted-setup",
        type=Path,
        help="Path to the KZG trusted setup file (overrides the config file)",
    )
    parser.add_argument(
        "--host",
        default="0.0.0.0",
        help="Bind address (default: 0.0.0.0)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="Port to listen on (default: 8000)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = CodecConfig.from_toml(args.config) if args.config is not None else CodecConfig()
    if args.trusted_setup is not None:
        config = replace(config, trusted_setup_path=args.trusted_setup)

    run_server(config, host=args.host, port=args.port)


if __name__ == "__main__":
    main()
