"""RPC front end for querying the stored sum at a given block."""

from __future__ import annotations

from typing import Any, Hashable, Protocol

from palletkit.runtime import SumStorageApi

SERVER_ERROR_CODE = 9876


class SumStorageClient(Protocol):
    """What the RPC handler needs from a client."""

    best_hash: Hashable

    def runtime_api(self, at: Hashable) -> SumStorageApi:
        """The runtime API as of the block with hash ``at``."""


class RpcError(Exception):
    """An error reported to an RPC caller."""

    def __init__(self, code: int, message: str, data: Any = None) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.data = data


class SumStorageRpc:
    """Answers ``sumStorage_getSum`` calls against a client."""

    method_name = "sumStorage_getSum"

    def __init__(self, client: SumStorageClient) -> None:
        self.client = client

    def get_sum(self, at: Hashable | None = None) -> int:
        """The sum at block ``at``, or at the best block when ``at`` is None."""
        block = self.client.best_hash if at is None else at
        try:
            return self.client.runtime_api(block).get_sum()
        except Exception as exc:
            raise RpcError(SERVER_ERROR_CODE, "Something wrong", repr(exc)) from exc