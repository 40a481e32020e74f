import pytest

from palletkit.runtime import BadOrigin, DispatchError, Origin, System
from palletkit.storage_cache import (
    BetterKingSwap,
    BetterValueChange,
    InefficientKingSwap,
    InefficientValueChange,
    StorageCache,
)


@pytest.fixture
def pallet():
    system = System()
    system.set_block_number(1)
    return StorageCache(system)


def _events(pallet):
    return [r.event for r in pallet.system.events()]


def test_init_storage(pallet):
    pallet.set_copy(Origin.signed(1), 10)
    assert pallet.some_copy_value == 10

    pallet.set_king(Origin.signed(2))
    assert pallet.king_member == 2

    pallet.mock_add_member(Origin.signed(1))
    with pytest.raises(DispatchError, match="member already in group"):
        pallet.mock_add_member(Origin.signed(1))
    assert 1 in pallet.group_members


def test_increase_value_errs_on_overflow(pallet):
    pallet.set_copy(Origin.signed(1), 2**32 - 1 - 9)
    with pytest.raises(DispatchError, match="^addition overflowed1$"):
        pallet.increase_value_no_cache(Origin.signed(1), 10)
    with pytest.raises(DispatchError, match="^addition overflowed1$"):
        pallet.increase_value_w_copy(Origin.signed(1), 10)

    pallet.set_copy(Origin.signed(1), 2147483643)
    with pytest.raises(DispatchError, match="^addition overflowed2$"):
        pallet.increase_value_no_cache(Origin.signed(1), 10)
    with pytest.raises(DispatchError, match="^addition overflowed2$"):
        pallet.increase_value_w_copy(Origin.signed(1), 10)
    assert pallet.some_copy_value == 2147483643


def test_increase_value_works(pallet):
    pallet.system.set_block_number(5)
    pallet.set_copy(Origin.signed(1), 25)
    pallet.increase_value_no_cache(Origin.signed(1), 10)
    assert InefficientValueChange(60, 5) in _events(pallet)
    assert pallet.some_copy_value == 60

    pallet.increase_value_w_copy(Origin.signed(1), 10)
    assert BetterValueChange(130, 5) in _events(pallet)
    assert pallet.some_copy_value == 130


def test_swap_king_errs_as_intended(pallet):
    pallet.mock_add_member(Origin.signed(1))
    pallet.set_king(Origin.signed(1))
    with pytest.raises(DispatchError, match="current king is a member so maintains priority"):
        pallet.swap_king_no_cache(Origin.signed(3))
    with pytest.raises(DispatchError, match="current king is a member so maintains priority"):
        pallet.swap_king_with_cache(Origin.signed(3))

    pallet.set_king(Origin.signed(2))
    with pytest.raises(DispatchError, match="new king is not a member so doesn't get priority"):
        pallet.swap_king_no_cache(Origin.signed(3))
    with pytest.raises(DispatchError, match="new king is not a member so doesn't get priority"):
        pallet.swap_king_with_cache(Origin.signed(3))
    assert pallet.king_member == 2


def test_swap_king_works(pallet):
    pallet.mock_add_member(Origin.signed(2))
    pallet.mock_add_member(Origin.signed(3))

    pallet.set_king(Origin.signed(1))
    pallet.swap_king_no_cache(Origin.signed(2))
    assert InefficientKingSwap(1, 2) in _events(pallet)
    assert pallet.king_member == 2

    pallet.set_king(Origin.signed(1))
    assert pallet.king_member == 1
    pallet.swap_king_with_cache(Origin.signed(3))
    assert pallet.system.events()[1].event == BetterKingSwap(1, 3)
    assert pallet.king_member == 3


def test_root_origin_rejected(pallet):
    with pytest.raises(BadOrigin):
        pallet.set_copy(Origin.root(), 4)
    with pytest.raises(BadOrigin):
        pallet.swap_king_with_cache(Origin.root())
    assert pallet.some_copy_value == 0


def test_is_member(pallet):
    pallet.mock_add_member(Origin.signed(9))
    assert pallet.is_member(9)
    assert not pallet.is_member(8)