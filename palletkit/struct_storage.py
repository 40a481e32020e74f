"""Storing structs whose field types come from the runtime configuration."""

from __future__ import annotations

from dataclasses import dataclass, field

from palletkit.runtime import Origin, System, ensure_signed

_ZERO_HASH = bytes(32)


@dataclass(frozen=True)
class InnerThing:
    """A number together with a hash and a balance."""

    number: int = 0
    hash: bytes = _ZERO_HASH
    balance: int = 0


@dataclass(frozen=True)
class SuperThing:
    """A number wrapping an :class:`InnerThing`."""

    super_number: int = 0
    inner_thing: InnerThing = field(default_factory=InnerThing)


@dataclass(frozen=True)
class NewInnerThing:
    number: int
    hash: bytes
    balance: int


@dataclass(frozen=True)
class NewSuperThingByExistingInner:
    super_number: int
    inner_number: int
    hash: bytes
    balance: int


@dataclass(frozen=True)
class NewSuperThingByNewInner:
    super_number: int
    inner_number: int
    hash: bytes
    balance: int


class StructStorage:
    """Two maps: inner things by number and super things by super number."""

    def __init__(self, system: System) -> None:
        self.system = system
        self._inner_things: dict[int, InnerThing] = {}
        self._super_things: dict[int, SuperThing] = {}

    def inner_things_by_numbers(self, number: int) -> InnerThing:
        """The inner thing stored under ``number``, or the default one."""
        return self._inner_things.get(number, InnerThing())

    def super_things_by_super_numbers(self, super_number: int) -> SuperThing:
        """The super thing stored under ``super_number``, or the default one."""
        return self._super_things.get(super_number, SuperThing())

    def insert_inner_thing(self, origin: Origin, number: int, hash: bytes, balance: int) -> None:
        """Store an inner thing under its own number."""
        ensure_signed(origin)
        self._inner_things[number] = InnerThing(number, hash, balance)
        self.system.deposit_event(NewInnerThing(number, hash, balance))

    def insert_super_thing_with_existing_inner(
        self, origin: Origin, inner_number: int, super_number: int
    ) -> None:
        """Store a super thing wrapping the inner thing already stored under ``inner_number``."""
        ensure_signed(origin)
        inner = self.inner_things_by_numbers(inner_number)
        self._super_things[super_number] = SuperThing(super_number, inner)
        self.system.deposit_event(
            NewSuperThingByExistingInner(super_number, inner.number, inner.hash, inner.balance)
        )

    def insert_super_thing_with_new_inner(
        self,
        origin: Origin,
        inner_number: int,
        hash: bytes,
        balance: int,
        super_number: int,
    ) -> None:
        """Store a new inner thing, overwriting any old one, and a super thing wrapping it."""
        ensure_signed(origin)
        inner = InnerThing(inner_number, hash, balance)
        self._inner_things[inner_number] = inner
        self.system.deposit_event(NewInnerThing(inner_number, hash, balance))
        self._super_things[super_number] = SuperThing(super_number, inner)
        self.system.deposit_event(
            NewSuperThingByNewInner(super_number, inner_number, hash, balance)
        )