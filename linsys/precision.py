"""Precision and rounding policy applied to every elimination step."""
from __future__ import annotations

import decimal
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict


class RoundingMode(str, Enum):
    HALF_UP = decimal.ROUND_HALF_UP
    HALF_DOWN = decimal.ROUND_HALF_DOWN
    HALF_EVEN = decimal.ROUND_HALF_EVEN
    UP = decimal.ROUND_UP
    DOWN = decimal.ROUND_DOWN
    CEILING = decimal.ROUND_CEILING
    FLOOR = decimal.ROUND_FLOOR
    ZERO_FIVE_UP = decimal.ROUND_05UP

    @property
    def label(self) -> str:
        return self.name.replace("_", " ").title()


DEFAULT_ROUNDING = RoundingMode.HALF_UP
DEFAULT_PRECISION = 10
DEFAULT_SCALE = 4

_ROUNDING_ALIASES: Dict[str, RoundingMode] = {
    "half_up": RoundingMode.HALF_UP,
    "halfup": RoundingMode.HALF_UP,
    "half_down": RoundingMode.HALF_DOWN,
    "halfdown": RoundingMode.HALF_DOWN,
    "half_even": RoundingMode.HALF_EVEN,
    "halfeven": RoundingMode.HALF_EVEN,
    "bankers": RoundingMode.HALF_EVEN,
    "up": RoundingMode.UP,
    "down": RoundingMode.DOWN,
    "truncate": RoundingMode.DOWN,
    "ceiling": RoundingMode.CEILING,
    "floor": RoundingMode.FLOOR,
    "05up": RoundingMode.ZERO_FIVE_UP,
    "zero_five_up": RoundingMode.ZERO_FIVE_UP,
}


def normalize_rounding(value: Any) -> RoundingMode:
    """Return a :class:`RoundingMode` for ``value``.

    Accepts enum members, the ``decimal`` module constants (``"ROUND_HALF_UP"``)
    and loose spellings such as ``"half-up"``.  Documents written by hand may
    carry names that do not resolve; those fall back to half-up, the rounding
    the editor has always used.
    """

    try:
        return parse_rounding(value)
    except ValueError:
        return DEFAULT_ROUNDING


def parse_rounding(value: Any) -> RoundingMode:
    """Like :func:`normalize_rounding` but raise ``ValueError`` for unknown names."""

    if isinstance(value, RoundingMode):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Unknown rounding mode: {value!r}")

    normalized = value.strip().lower().replace(" ", "_").replace("-", "_")
    if normalized.startswith("round_"):
        normalized = normalized[len("round_"):]
    if normalized not in _ROUNDING_ALIASES:
        raise ValueError(f"Unknown rounding mode: {value!r}")
    return _ROUNDING_ALIASES[normalized]


@dataclass(frozen=True)
class PrecisionPolicy:
    """Significant-digit count and rounding mode for decimal arithmetic."""

    precision: int = DEFAULT_PRECISION
    rounding: RoundingMode = DEFAULT_ROUNDING

    def __post_init__(self) -> None:
        if isinstance(self.precision, bool) or not isinstance(self.precision, int) or self.precision <= 0:
            raise ValueError(f"Precision must be a positive integer; received {self.precision!r}")
        object.__setattr__(self, "rounding", RoundingMode(self.rounding))

    @property
    def context(self) -> decimal.Context:
        """A fresh :class:`decimal.Context` carrying this policy."""

        return decimal.Context(prec=self.precision, rounding=self.rounding.value)

    @classmethod
    def from_settings(cls, precision: Any, rounding: Any = DEFAULT_ROUNDING) -> "PrecisionPolicy":
        return cls(precision=int(precision), rounding=normalize_rounding(rounding))

    def to_dict(self) -> Dict[str, Any]:
        return {"precision": self.precision, "rounding": self.rounding.name}


__all__ = [
    "DEFAULT_PRECISION",
    "DEFAULT_ROUNDING",
    "DEFAULT_SCALE",
    "PrecisionPolicy",
    "RoundingMode",
    "normalize_rounding",
    "parse_rounding",
]
