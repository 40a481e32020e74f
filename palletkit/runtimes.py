"""A runtime that puts the sum-storage pallet together with a custom runtime API."""

from __future__ import annotations

from dataclasses import dataclass, field

from palletkit.fees import Perbill
from palletkit.runtime import SumStorageApi, System
from palletkit.sum_storage import SumStorage

BLOCK_HASH_COUNT = 2400
SS58_PREFIX = 42
MINIMUM_PERIOD = 1
EXISTENTIAL_DEPOSIT = 500
TRANSFER_FEE = 0
CREATION_FEE = 0
MAX_LOCKS = 50
TRANSACTION_BYTE_FEE = 1
MAX_BLOCK_LENGTH = 5 * 1024 * 1024
NORMAL_DISPATCH_RATIO = Perbill.from_percent(75)

RUNTIME_APIS = (
    "Core",
    "Metadata",
    "BlockBuilder",
    "TaggedTransactionQueue",
    "OffchainWorkerApi",
    "SumStorageApi",
    "SessionKeys",
)


@dataclass(frozen=True)
class RuntimeVersion:
    """Identifies a runtime and the interfaces it provides."""

    spec_name: str
    impl_name: str
    authoring_version: int
    spec_version: int
    impl_version: int
    transaction_version: int
    apis: tuple[str, ...] = field(default_factory=tuple)


VERSION = RuntimeVersion(
    spec_name="api-runtime",
    impl_name="api-runtime",
    authoring_version=1,
    spec_version=1,
    impl_version=1,
    transaction_version=1,
    apis=RUNTIME_APIS,
)


class ApiRuntime(SumStorageApi):
    """System plus the sum-storage pallet, answering the sum through the runtime API."""

    def __init__(self) -> None:
        self.system = System()
        self.sum_storage = SumStorage(self.system)

    def version(self) -> RuntimeVersion:
        """The version of this runtime."""
        return VERSION

    def get_sum(self) -> int:
        """The sum of the two values held by the sum-storage pallet."""
        return self.sum_storage.get_sum()

    def generate_session_keys(self, seed: bytes | None = None) -> bytes:
        """This runtime has no session keys, so the encoding is always empty."""
        return b""

    def decode_session_keys(self, encoded: bytes) -> list[tuple[bytes, bytes]] | None:
        """This runtime has no session keys, so nothing can be decoded."""
        return None