"""Core scicalc functionality: IR, error taxonomy, configuration, expression engine."""

from . import ir
from .config import AngleUnit, EngineConfig, load_engine_config
from .errors import (
    CalcError,
    ConfigError,
    ErrorContext,
    ErrorKind,
    EvalError,
    LexError,
    ScicalcError,
)

__all__ = [
    "ir",
    "AngleUnit",
    "CalcError",
    "ConfigError",
    "EngineConfig",
    "ErrorContext",
    "ErrorKind",
    "EvalError",
    "LexError",
    "ScicalcError",
    "load_engine_config",
]
