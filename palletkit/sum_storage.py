"""Two stored values and a query for their sum."""

from __future__ import annotations

from dataclasses import dataclass

from palletkit.runtime import Origin, SumStorageApi, System, ensure_signed

_U32_MAX = 2**32 - 1


@dataclass(frozen=True)
class ValueSet:
    """Stored value number ``which`` was set to ``value``."""

    which: int
    value: int


class SumStorage(SumStorageApi):
    """Stores two u32 values and answers the sum of both."""

    def __init__(self, system: System) -> None:
        self.system = system
        self.thing1 = 0
        self.thing2 = 0

    def set_thing_1(self, origin: Origin, val: int) -> None:
        """Set the first stored value."""
        ensure_signed(origin)
        self.thing1 = val
        self.system.deposit_event(ValueSet(1, val))

    def set_thing_2(self, origin: Origin, val: int) -> None:
        """Set the second stored value."""
        ensure_signed(origin)
        self.thing2 = val
        self.system.deposit_event(ValueSet(2, val))

    def get_sum(self) -> int:
        total = self.thing1 + self.thing2
        if total > _U32_MAX:
            raise OverflowError("sum of stored values overflows u32")
        return total