"""Tests for codec configuration."""

from dataclasses import FrozenInstanceError
from pathlib import Path

import pytest

from blob_codec.config import CodecConfig


class TestCodecConfig:
    def test_default_values(self) -> None:
        """Two workers with 8 MiB stacks, no trusted setup."""
        config = CodecConfig()

        assert config.worker_count == 2
        assert config.thread_stack_size == 8 * 1024 * 1024
        assert config.thread_name_prefix == "blob-worker"
        assert config.trusted_setup_path is None
        assert config.precompute == 0

    def test_config_is_frozen(self) -> None:
        config = CodecConfig()
        with pytest.raises(FrozenInstanceError):
            config.worker_count = 4  # type: ignore[misc]

    @pytest.mark.parametrize(
        "kwargs",
        [{"worker_count": 0}, {"thread_stack_size": 1024}, {"precompute": -1}],
    )
    def test_invalid_values_rejected(self, kwargs: dict[str, int]) -> None:
        with pytest.raises(ValueError):
            CodecConfig(**kwargs)


class TestFromToml:
    def test_loads_sections(self, tmp_path: Path) -> None:
        path = tmp_path / "codec.toml"
        path.write_text(
            "[executor]\n"
            "worker_count = 4\n"
            "thread_stack_size = 16777216\n"
            "\n"
            "[kzg]\n"
            'trusted_setup_path = "setup/trusted_setup.txt"\n'
            "precompute = 8\n"
        )

        config = CodecConfig.from_toml(path)

        assert config.worker_count == 4
        assert config.thread_stack_size == 16 * 1024 * 1024
        assert config.trusted_setup_path == tmp_path / "setup" / "trusted_setup.txt"
        assert config.precompute == 8

    def test_empty_file_uses_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "codec.toml"
        path.write_text("")
        assert CodecConfig.from_toml(path) == CodecConfig()
