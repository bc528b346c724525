"""
Engine configuration models.

Parses the [engine] section from scicalc.toml and provides typed
configuration for the parser, evaluator and result formatting.
"""

from __future__ import annotations

import logging
import tomllib
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from scicalc.core.errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "scicalc.toml"
DEFAULT_MAX_DEPTH = 64


class AngleUnit(str, Enum):
    """Unit used for the arguments of sin, cos and tan."""

    RADIANS = "radians"
    DEGREES = "degrees"


class EngineConfig(BaseModel):
    """Complete engine configuration."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    max_depth: int = Field(
        default=DEFAULT_MAX_DEPTH,
        ge=1,
        le=128,
        description="Maximum nesting of groups, calls, signs and exponents",
    )
    angle_unit: AngleUnit = AngleUnit.RADIANS
    integer_tolerance: float = Field(
        default=1e-9,
        ge=0.0,
        lt=0.5,
        description="How far fact() accepts an argument from the nearest integer",
    )
    precision: int | None = Field(
        default=None,
        ge=1,
        le=17,
        description="Significant digits for formatted results (None = shortest round trip)",
    )


def load_engine_config(toml_path: Path) -> EngineConfig:
    """
    Load engine configuration from scicalc.toml.

    Args:
        toml_path: Path to scicalc.toml file

    Returns:
        EngineConfig with parsed values or defaults

    Raises:
        ConfigError: If the file is not valid TOML or holds invalid values
    """
    if not toml_path.exists():
        return EngineConfig()

    try:
        with open(toml_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {toml_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read {toml_path}: {e}") from e

    engine_data: Any = data.get("engine")

    if engine_data is None or engine_data == {}:
        return EngineConfig()

    # A non-table engine value is rejected by validation
    try:
        config = EngineConfig.model_validate(engine_data)
    except ValidationError as e:
        raise ConfigError(f"Invalid [engine] configuration in {toml_path}: {e}") from e

    logger.debug(f"Loaded engine configuration from {toml_path}: {config}")
    return config
