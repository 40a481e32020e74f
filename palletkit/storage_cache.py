"""Storage access patterns: reading a value once and reusing it versus reading it again."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable

from palletkit.runtime import DispatchError, Origin, System, ensure_signed

_U32_MAX = 2**32 - 1


@dataclass(frozen=True)
class InefficientValueChange:
    new_value: int
    block_number: int


@dataclass(frozen=True)
class BetterValueChange:
    new_value: int
    block_number: int


@dataclass(frozen=True)
class InefficientKingSwap:
    old: Hashable
    new: Hashable


@dataclass(frozen=True)
class BetterKingSwap:
    old: Hashable
    new: Hashable


def _checked_add(a: int, b: int, message: str) -> int:
    total = a + b
    if total > _U32_MAX:
        raise DispatchError(message)
    return total


class StorageCache:
    """A stored u32, a king account and a group of member accounts."""

    def __init__(self, system: System) -> None:
        self.system = system
        self.some_copy_value = 0
        self.king_member: Hashable | None = None
        self.group_members: list[Hashable] = []

    def increase_value_no_cache(self, origin: Origin, some_val: int) -> None:
        """Set the value to ``2 * value + some_val``, reading storage twice."""
        ensure_signed(origin)
        original = self.some_copy_value
        some_calculation = _checked_add(original, some_val, "addition overflowed1")
        unnecessary = self.some_copy_value
        result = _checked_add(some_calculation, unnecessary, "addition overflowed2")
        self.some_copy_value = result
        self.system.deposit_event(InefficientValueChange(result, self.system.block_number))

    def increase_value_w_copy(self, origin: Origin, some_val: int) -> None:
        """Set the value to ``2 * value + some_val``, reading storage once."""
        ensure_signed(origin)
        original = self.some_copy_value
        some_calculation = _checked_add(original, some_val, "addition overflowed1")
        result = _checked_add(some_calculation, original, "addition overflowed2")
        self.some_copy_value = result
        self.system.deposit_event(BetterValueChange(result, self.system.block_number))

    def _check_swap(self, existing_king: Hashable | None, new_king: Hashable) -> None:
        if self.is_member(existing_king):
            raise DispatchError("current king is a member so maintains priority")
        if not self.is_member(new_king):
            raise DispatchError("new king is not a member so doesn't get priority")

    def swap_king_no_cache(self, origin: Origin) -> None:
        """Make the caller king if they are a member and the current king is not."""
        new_king = ensure_signed(origin)
        self._check_swap(self.king_member, new_king)
        old_king = self.king_member
        self.king_member = new_king
        self.system.deposit_event(InefficientKingSwap(old_king, new_king))

    def swap_king_with_cache(self, origin: Origin) -> None:
        """Same as :meth:`swap_king_no_cache`, keeping the first read of the king."""
        new_king = ensure_signed(origin)
        existing_king = self.king_member
        self._check_swap(existing_king, new_king)
        self.king_member = new_king
        self.system.deposit_event(BetterKingSwap(existing_king, new_king))

    def set_copy(self, origin: Origin, val: int) -> None:
        ensure_signed(origin)
        self.some_copy_value = val

    def set_king(self, origin: Origin) -> None:
        self.king_member = ensure_signed(origin)

    def mock_add_member(self, origin: Origin) -> None:
        added = ensure_signed(origin)
        if self.is_member(added):
            raise DispatchError("member already in group")
        self.group_members.append(added)

    def is_member(self, who: Hashable | None) -> bool:
        return who in self.group_members