"""Core runtime pieces: origins, dispatch errors, the system event log and shared interfaces."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Hashable


class DispatchError(Exception):
    """Raised when a dispatchable call fails; storage is left as it was."""


class BadOrigin(DispatchError):
    """Raised when a call requires a signed origin but got something else."""

    def __init__(self, message: str = "bad origin") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class Origin:
    """The origin of a call: signed by an account, or root when ``who`` is None."""

    who: Hashable | None = None

    @staticmethod
    def signed(who: Hashable) -> Origin:
        """An origin signed by the account ``who``."""
        return Origin(who)

    @staticmethod
    def root() -> Origin:
        """The root origin, which carries no account."""
        return Origin(None)

    @property
    def is_signed(self) -> bool:
        return self.who is not None


def ensure_signed(origin: Origin) -> Hashable:
    """Return the signing account of ``origin`` or raise :class:`BadOrigin`."""
    if not origin.is_signed:
        raise BadOrigin()
    return origin.who


@dataclass(frozen=True)
class EventRecord:
    """An event deposited into the system log, with the block it was deposited in."""

    event: Any
    block_number: int


class System:
    """Holds the current block number and the events deposited so far."""

    def __init__(self) -> None:
        self.block_number = 0
        self._events: list[EventRecord] = []

    def set_block_number(self, number: int) -> None:
        if number < 0:
            raise ValueError("block number cannot be negative")
        self.block_number = number

    def deposit_event(self, event: Any) -> None:
        self._events.append(EventRecord(event, self.block_number))

    def events(self) -> list[EventRecord]:
        """All deposited events, oldest first."""
        return list(self._events)


class AccountSet(ABC):
    """Something that can supply a set of accounts."""

    @abstractmethod
    def accounts(self) -> set:
        """The accounts this object knows about."""


class SumStorageApi(ABC):
    """Runtime interface for querying the sum of two stored values."""

    @abstractmethod
    def get_sum(self) -> int:
        """The sum of the two stored values."""