"""A membership set kept as a sorted list, with a size limit."""

from __future__ import annotations

import bisect
from dataclasses import dataclass
from typing import Any

from palletkit.runtime import AccountSet, DispatchError, Origin, System, ensure_signed

MAX_MEMBERS = 16


class AlreadyMember(DispatchError):
    """Cannot join as a member because the caller already is one."""

    def __init__(self) -> None:
        super().__init__("already a member")


class NotMember(DispatchError):
    """Cannot give up membership because the caller is not a member."""

    def __init__(self) -> None:
        super().__init__("not a member")


class MembershipLimitReached(DispatchError):
    """Cannot add another member because the limit is already reached."""

    def __init__(self) -> None:
        super().__init__("membership limit reached")


@dataclass(frozen=True)
class MemberAdded:
    who: Any


@dataclass(frozen=True)
class MemberRemoved:
    who: Any


class VecSet(AccountSet):
    """Members kept in sorted order so lookups use binary search."""

    def __init__(self, system: System) -> None:
        self.system = system
        self._members: list[Any] = []

    @property
    def members(self) -> list:
        """The current members, in sorted order."""
        return list(self._members)

    def _find(self, who: Any) -> tuple[int, bool]:
        index = bisect.bisect_left(self._members, who)
        found = index < len(self._members) and self._members[index] == who
        return index, found

    def add_member(self, origin: Origin) -> None:
        """Add the caller to the set unless the limit is reached."""
        new_member = ensure_signed(origin)
        if len(self._members) >= MAX_MEMBERS:
            raise MembershipLimitReached()
        index, found = self._find(new_member)
        if found:
            raise AlreadyMember()
        self._members.insert(index, new_member)
        self.system.deposit_event(MemberAdded(new_member))

    def remove_member(self, origin: Origin) -> None:
        """Remove the caller from the set."""
        old_member = ensure_signed(origin)
        index, found = self._find(old_member)
        if not found:
            raise NotMember()
        del self._members[index]
        self.system.deposit_event(MemberRemoved(old_member))

    def accounts(self) -> set:
        return set(self._members)