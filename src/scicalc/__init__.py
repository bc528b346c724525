"""
scicalc - scientific expression evaluation engine.

Turns calculator input such as ``"2 + sqrt(16) * fact(3)"`` into a double,
or into a precisely classified error.
"""

from __future__ import annotations

from ._version import get_version
from .core.config import EngineConfig
from .core.errors import CalcError, ErrorKind, ScicalcError
from .core.expression_lang import calculate, format_result

__version__ = get_version()

__all__ = [
    "__version__",
    "CalcError",
    "EngineConfig",
    "ErrorKind",
    "ScicalcError",
    "calculate",
    "format_result",
]
