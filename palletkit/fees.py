"""Turning dispatch weights into fees with polynomial coefficients."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

U128_MAX = 2**128 - 1
_BILLION = 1_000_000_000

FEE_WEIGHT_RATIO = 1_000
TRANSACTION_BYTE_FEE = 1


@dataclass(frozen=True, order=True)
class Perbill:
    """A fraction in parts per billion, between zero and one."""

    parts: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.parts <= _BILLION:
            raise ValueError("Perbill parts must lie between 0 and one billion")

    @staticmethod
    def from_percent(percent: int) -> Perbill:
        """The fraction ``percent`` / 100, capped at one."""
        return Perbill(min(max(percent, 0), 100) * (_BILLION // 100))

    @staticmethod
    def zero() -> Perbill:
        return Perbill(0)

    @staticmethod
    def one() -> Perbill:
        return Perbill(_BILLION)

    def __mul__(self, other: int) -> int:
        """This fraction of ``other``, rounded to the nearest integer."""
        if not isinstance(other, int):
            return NotImplemented
        return (other * self.parts + _BILLION // 2) // _BILLION

    __rmul__ = __mul__


@dataclass(frozen=True)
class WeightToFeeCoefficient:
    """One term ``±(coeff_integer + coeff_frac) * weight^degree``."""

    coeff_integer: int
    coeff_frac: Perbill
    negative: bool
    degree: int


def weight_to_fee(coefficients: Iterable[WeightToFeeCoefficient], weight: int) -> int:
    """Apply the terms in order, saturating between zero and the u128 maximum."""
    acc = 0
    for term in coefficients:
        w = min(weight**term.degree, U128_MAX)
        frac = term.coeff_frac * w
        integer = min(term.coeff_integer * w, U128_MAX)
        if term.negative:
            acc = max(acc - frac, 0)
            acc = max(acc - integer, 0)
        else:
            acc = min(acc + frac, U128_MAX)
            acc = min(acc + integer, U128_MAX)
    return acc


class LinearWeightToFee:
    """Fee equal to the weight times a constant number of balance units."""

    def __init__(self, coefficient: int = FEE_WEIGHT_RATIO) -> None:
        self.coefficient = coefficient

    def polynomial(self) -> list[WeightToFeeCoefficient]:
        return [WeightToFeeCoefficient(self.coefficient, Perbill.zero(), False, 1)]

    def calc(self, weight: int) -> int:
        return weight_to_fee(self.polynomial(), weight)


class QuadraticWeightToFee:
    """Fee ``3 w^2 - 2.4 w``; the negative term comes last to limit saturation."""

    def polynomial(self) -> list[WeightToFeeCoefficient]:
        linear = WeightToFeeCoefficient(2, Perbill.from_percent(40), True, 1)
        quadratic = WeightToFeeCoefficient(3, Perbill.zero(), False, 2)
        return [quadratic, linear]

    def calc(self, weight: int) -> int:
        return weight_to_fee(self.polynomial(), weight)