import pytest

from palletkit.rpc import RpcError, SumStorageRpc
from palletkit.runtime import Origin, System
from palletkit.sum_storage import SumStorage


class FakeClient:
    def __init__(self, states, best_hash):
        self.states = states
        self.best_hash = best_hash

    def runtime_api(self, at):
        return self.states[at]


def _state(a, b):
    pallet = SumStorage(System())
    pallet.set_thing_1(Origin.signed(1), a)
    pallet.set_thing_2(Origin.signed(1), b)
    return pallet


@pytest.fixture
def client():
    return FakeClient({"old": _state(1, 2), "best": _state(42, 43)}, "best")


def test_get_sum_defaults_to_best_block(client):
    rpc = SumStorageRpc(client)
    assert rpc.get_sum() == client.states["best"].get_sum()
    assert rpc.get_sum(None) == rpc.get_sum("best")


def test_get_sum_at_given_block(client):
    rpc = SumStorageRpc(client)
    assert rpc.get_sum("old") == 3


def test_unknown_block_becomes_rpc_error(client):
    rpc = SumStorageRpc(client)
    with pytest.raises(RpcError) as info:
        rpc.get_sum("missing")
    assert info.value.code == 9876
    assert info.value.message == "Something wrong"
    assert "missing" in info.value.data


def test_runtime_failure_becomes_rpc_error():
    client = FakeClient({"best": _state(2**32 - 1, 1)}, "best")
    with pytest.raises(RpcError) as info:
        SumStorageRpc(client).get_sum()
    assert info.value.code == 9876
    assert isinstance(info.value.__cause__, OverflowError)