"""
scicalc CLI Utilities.

Shared utility functions used across CLI modules.
"""

import logging
import os
import platform
from pathlib import Path

import typer

from scicalc._version import get_version
from scicalc.core.config import CONFIG_FILENAME, AngleUnit, EngineConfig, load_engine_config

logger = logging.getLogger(__name__)


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        python_version = platform.python_version()
        python_impl = platform.python_implementation()

        typer.echo(f"scicalc version {get_version()}")
        typer.echo("")
        typer.echo("Environment:")
        typer.echo(f"  Python:        {python_impl} {python_version}")
        typer.echo(f"  Platform:      {platform.system()} {platform.release()}")

        raise typer.Exit()


def configure_logging(verbose: bool = False) -> None:
    """Configure root logging from LOG_LEVEL, or DEBUG when verbose."""
    if verbose:
        level = logging.DEBUG
    else:
        log_level = os.getenv("LOG_LEVEL", "WARNING").upper()
        level = getattr(logging, log_level, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def resolve_config_path(config_path: Path | None) -> Path:
    """Pick the config file: explicit option, then SCICALC_CONFIG, then ./scicalc.toml."""
    if config_path is not None:
        return config_path
    env_path = os.getenv("SCICALC_CONFIG")
    if env_path:
        return Path(env_path)
    return Path.cwd() / CONFIG_FILENAME


def load_cli_config(
    config_path: Path | None,
    degrees: bool = False,
    precision: int | None = None,
) -> EngineConfig:
    """Load the engine configuration and apply command-line overrides.

    Raises:
        ConfigError: If the configuration file is invalid.
    """
    path = resolve_config_path(config_path)
    config = load_engine_config(path)

    overrides: dict[str, object] = {}
    if degrees:
        overrides["angle_unit"] = AngleUnit.DEGREES
    if precision is not None:
        overrides["precision"] = precision
    if overrides:
        config = config.model_copy(update=overrides)

    logger.debug(f"Using engine configuration {config} (from {path})")
    return config
