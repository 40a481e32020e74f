"""Custom weight scales and a pallet whose calls are weighed by them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from palletkit.runtime import DispatchError, Origin

U32_MAX = 2**32 - 1
STORE_VALUE_WEIGHT = 10_000


def _saturating_mul(a: int, b: int) -> int:
    return min(a * b, U32_MAX)


def _saturating_add(a: int, b: int) -> int:
    return min(a + b, U32_MAX)


class Pays(Enum):
    """Whether the caller is charged a fee for a call."""

    YES = "yes"
    NO = "no"


class DispatchClass(Enum):
    """The class a call is counted under toward block limits."""

    NORMAL = "normal"
    OPERATIONAL = "operational"
    MANDATORY = "mandatory"

    @classmethod
    def default(cls) -> DispatchClass:
        return cls.NORMAL


@dataclass(frozen=True)
class Linear:
    """Weight proportional to a single u32 argument."""

    multiplier: int

    def weigh_data(self, x: int) -> int:
        return _saturating_mul(x, self.multiplier)

    def pays_fee(self, args: Any) -> Pays:
        return Pays.YES

    def classify_dispatch(self, args: Any) -> DispatchClass:
        return DispatchClass.default()


@dataclass(frozen=True)
class Quadratic:
    """Weight ``a*x^2 + b*y + c``, saturating at the u32 maximum."""

    a: int
    b: int
    c: int

    def weigh_data(self, x: int, y: int) -> int:
        ax2 = _saturating_mul(_saturating_mul(x, x), self.a)
        by = _saturating_mul(y, self.b)
        return _saturating_add(_saturating_add(ax2, by), self.c)

    def pays_fee(self, args: Any) -> Pays:
        return Pays.YES

    def classify_dispatch(self, args: Any) -> DispatchClass:
        return DispatchClass.default()


@dataclass(frozen=True)
class Conditional:
    """Weight linear in ``val`` when ``switch`` is set, otherwise constant."""

    multiplier: int

    def weigh_data(self, switch: bool, val: int) -> int:
        if switch:
            return _saturating_mul(val, self.multiplier)
        return self.multiplier

    def pays_fee(self, args: Any) -> Pays:
        return Pays.YES

    def classify_dispatch(self, args: Any) -> DispatchClass:
        return DispatchClass.default()


class Weights:
    """A single stored u32 changed by calls of differing computational cost."""

    store_value_weight = STORE_VALUE_WEIGHT
    add_n_weight = Linear(200)
    double_weight = Linear(200)
    complex_calculations_weight = Quadratic(200, 30, 100)
    add_or_set_weight = Conditional(200)

    def __init__(self) -> None:
        self.stored_value = 0

    def _checked(self, value: int) -> int:
        if value > U32_MAX:
            raise OverflowError("stored value overflows u32")
        return value

    def store_value(self, origin: Origin, entry: int) -> None:
        """Store ``entry``."""
        self.stored_value = entry

    def add_n(self, origin: Origin, n: int) -> None:
        """Increment the stored value ``n`` times."""
        self.stored_value = self._checked(self.stored_value + n)

    def double(self, origin: Origin, initial_value: int) -> None:
        """Double the stored value; the caller must state its current value."""
        initial = self.stored_value
        if initial != initial_value:
            raise DispatchError("Storage value did not match parameter")
        self.stored_value = self._checked(initial + initial)

    def complex_calculations(self, origin: Origin, x: int, y: int) -> None:
        """Do ``x^2`` increments of storage, then store ``2*y``."""
        part1 = 2 * y
        self._checked(self.stored_value + x * x)
        self.stored_value = self._checked(part1)

    def add_or_set(self, origin: Origin, add_flag: bool, val: int) -> None:
        """Rewrite the stored value ``val`` times when ``add_flag``, else store ``val``."""
        if not add_flag:
            self.stored_value = val