"""Codec runtime configuration."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_WORKER_COUNT = 2
DEFAULT_THREAD_STACK_SIZE = 8 * 1024 * 1024  # 8 MiB; the KZG step overflows 2 MiB
MIN_THREAD_STACK_SIZE = 32 * 1024  # threading.stack_size() lower bound


@dataclass(frozen=True)
class CodecConfig:
    """Configuration for the blob worker pool and commitment engine."""

    # Worker pool
    worker_count: int = DEFAULT_WORKER_COUNT
    thread_stack_size: int = DEFAULT_THREAD_STACK_SIZE
    thread_name_prefix: str = "blob-worker"

    # KZG commitment engine
    trusted_setup_path: Path | None = None
    precompute: int = 0

    def __post_init__(self) -> None:
        if self.worker_count < 1:
            raise ValueError(f"worker_count must be >= 1, got {self.worker_count}")
        if self.thread_stack_size < MIN_THREAD_STACK_SIZE:
            raise ValueError(
                f"thread_stack_size must be >= {MIN_THREAD_STACK_SIZE}, "
                f"got {self.thread_stack_size}"
            )
        if self.precompute < 0:
            raise ValueError(f"precompute must be >= 0, got {self.precompute}")

    @classmethod
    def from_toml(cls, path: Path) -> CodecConfig:
        import tomllib

        with path.open("rb") as f:
            data = tomllib.load(f)

        executor = data.get("executor", {})
        kzg = data.get("kzg", {})

        trusted_setup = kzg.get("trusted_setup_path")
        if trusted_setup is not None:
            trusted_setup = Path(trusted_setup)
            if not trusted_setup.is_absolute():
                trusted_setup = path.parent / trusted_setup

        return cls(
            worker_count=executor.get("worker_count", DEFAULT_WORKER_COUNT),
            thread_stack_size=executor.get("thread_stack_size", DEFAULT_THREAD_STACK_SIZE),
            thread_name_prefix=executor.get("thread_name_prefix", "blob-worker"),
            trusted_setup_path=trusted_setup,
            precompute=kzg.get("precompute", 0),
        )
