"""
Built-in functions and constants.

The set is closed: the parser only accepts the names defined here, and each
function checks its own domain once its arguments are fully evaluated.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass

from scicalc.core.config import AngleUnit, EngineConfig
from scicalc.core.errors import DomainError

# fact() of anything larger overflows a double
MAX_EXACT_FACTORIAL = 170

CONSTANTS: dict[str, float] = {
    "pi": math.pi,
    "e": math.e,
}


@dataclass(frozen=True)
class FunctionSpec:
    """A built-in function: its name, arity and implementation."""

    name: str
    arity: int
    description: str
    impl: Callable[[list[float], EngineConfig], float]

    def __call__(self, args: list[float], config: EngineConfig) -> float:
        return self.impl(args, config)


def _fmt(value: float) -> str:
    return f"{value:g}"


def power(base: float, exponent: float) -> float:
    """Raise ``base`` to ``exponent``; overflow gives an infinity, not an error."""
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and exponent.is_integer() and exponent % 2 == 1:
            return -math.inf
        return math.inf
    except ValueError:
        if base == 0:
            raise DomainError("0 cannot be raised to a negative power") from None
        raise DomainError(
            f"{_fmt(base)} ^ {_fmt(exponent)} is not a real number"
        ) from None


def _to_radians(value: float, config: EngineConfig) -> float:
    if config.angle_unit == AngleUnit.DEGREES:
        return math.radians(value)
    return value


def _trig(name: str, fn: Callable[[float], float]) -> Callable[[list[float], EngineConfig], float]:
    def impl(args: list[float], config: EngineConfig) -> float:
        x = args[0]
        if math.isinf(x):
            raise DomainError(f"{name}() is undefined for {_fmt(x)}")
        return fn(_to_radians(x, config))

    return impl


def _sqrt(args: list[float], config: EngineConfig) -> float:
    x = args[0]
    if x < 0:
        raise DomainError(f"sqrt() of negative number {_fmt(x)}")
    return math.sqrt(x)


def _fact(args: list[float], config: EngineConfig) -> float:
    x = args[0]
    if x < 0:
        raise DomainError(f"fact() of negative number {_fmt(x)}")
    if math.isinf(x):
        return math.inf
    n = round(x)
    if abs(x - n) > config.integer_tolerance:
        raise DomainError(f"fact() of non-integer {_fmt(x)}")
    if n > MAX_EXACT_FACTORIAL:
        return math.inf
    return float(math.factorial(n))


def _log10(args: list[float], config: EngineConfig) -> float:
    x = args[0]
    if x <= 0:
        raise DomainError(f"log() of non-positive number {_fmt(x)}")
    return math.log10(x)


def _ln(args: list[float], config: EngineConfig) -> float:
    x = args[0]
    if x <= 0:
        raise DomainError(f"ln() of non-positive number {_fmt(x)}")
    return math.log(x)


def _exp(args: list[float], config: EngineConfig) -> float:
    try:
        return math.exp(args[0])
    except OverflowError:
        return math.inf


def _pow(args: list[float], config: EngineConfig) -> float:
    return power(args[0], args[1])


FUNCTIONS: dict[str, FunctionSpec] = {
    spec.name: spec
    for spec in (
        FunctionSpec("sqrt", 1, "Square root", _sqrt),
        FunctionSpec("fact", 1, "Factorial of a non-negative integer", _fact),
        FunctionSpec("sin", 1, "Sine", _trig("sin", math.sin)),
        FunctionSpec("cos", 1, "Cosine", _trig("cos", math.cos)),
        FunctionSpec("tan", 1, "Tangent", _trig("tan", math.tan)),
        FunctionSpec("log", 1, "Base-10 logarithm", _log10),
        FunctionSpec("ln", 1, "Natural logarithm", _ln),
        FunctionSpec("exp", 1, "e raised to the argument", _exp),
        FunctionSpec("pow", 2, "First argument raised to the second", _pow),
    )
}
