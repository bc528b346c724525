"""Shared pytest fixtures for scicalc tests."""

from collections.abc import Callable
from pathlib import Path

import pytest

from scicalc.core.config import AngleUnit, EngineConfig


@pytest.fixture
def default_config() -> EngineConfig:
    """Return the default engine configuration."""
    return EngineConfig()


@pytest.fixture
def degrees_config() -> EngineConfig:
    """Return a configuration that reads trig arguments as degrees."""
    return EngineConfig(angle_unit=AngleUnit.DEGREES)


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str], Path]:
    """Return a helper that writes a scicalc.toml with the given body."""

    def _write(body: str) -> Path:
        path = tmp_path / "scicalc.toml"
        path.write_text(body)
        return path

    return _write
