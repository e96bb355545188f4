"""Advisory bounds and choice lists for config entries.

Presentation layers read these to clamp numeric editors and populate choice
lists. The change pipeline never consults them; business rules belong in
veto handlers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


@dataclass(frozen=True)
class IntegerBounds:
    min: int = INT_MIN
    max: int = INT_MAX

    def contains(self, value: int) -> bool:
        return self.min <= value <= self.max

    def clamp(self, value: int) -> int:
        return max(self.min, min(self.max, value))


class ConstraintRegistry:
    """Per-entry integer bounds and choice options, keyed by entry name."""

    def __init__(self) -> None:
        self._min: Dict[str, int] = {}
        self._max: Dict[str, int] = {}
        self._options: Dict[str, Tuple[str, ...]] = {}

    def set_integer_bounds(self, name: str, minimum: int, maximum: int) -> None:
        self.set_integer_min(name, minimum)
        self.set_integer_max(name, maximum)

    def set_integer_min(self, name: str, minimum: int) -> None:
        self._min[name] = int(minimum)

    def set_integer_max(self, name: str, maximum: int) -> None:
        self._max[name] = int(maximum)

    def get_integer_bounds(self, name: str) -> IntegerBounds:
        return IntegerBounds(self._min.get(name, INT_MIN), self._max.get(name, INT_MAX))

    def has_bounds(self, name: str) -> bool:
        return name in self._min or name in self._max

    def clamp(self, name: str, value: int) -> int:
        return self.get_integer_bounds(name).clamp(value)

    def set_options(self, name: str, *options: str) -> None:
        self._options[name] = tuple(str(option) for option in options)

    def get_options(self, name: str) -> Optional[Tuple[str, ...]]:
        return self._options.get(name)

    def clear(self) -> None:
        self._min.clear()
        self._max.clear()
        self._options.clear()
